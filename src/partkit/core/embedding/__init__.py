"""Update/view embedding through projection pairs."""

from partkit.core.embedding.operations import embed_update, embed_view, generalize

__all__ = [
    "embed_update",
    "embed_view",
    "generalize",
]
