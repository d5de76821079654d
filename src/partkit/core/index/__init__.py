"""Index paths, the Indexed mapping and index-scoped lenses."""

from partkit.core.index.models import Indexed, make_index
from partkit.core.index.operations import indexed, remove_entry

__all__ = [
    # Models
    "Indexed",
    "make_index",
    # Operations
    "indexed",
    "remove_entry",
]
