"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: projection pairs, index
    paths, effect descriptions and update/view embedding. Nothing here holds
    state or performs I/O. For message boxing and part assembly, see parts/;
    for a synchronous driver, see runtime/.
"""

from partkit.core.effect import (
    NO_EFFECTS,
    Effect,
    Immediate,
    Mappable,
    batch,
    map_effect,
    map_effects,
    send,
)
from partkit.core.embedding import embed_update, embed_view, generalize
from partkit.core.index import Indexed, indexed, make_index, remove_entry
from partkit.core.lens import (
    Lens,
    LensLawError,
    assert_laws,
    check_laws,
    compose,
    field_lens,
    replace_field,
)
from partkit.core.types import Effects, Get, Index, Lift, Set, Update, View

__all__ = [
    # Types
    "Get",
    "Set",
    "Update",
    "View",
    "Lift",
    "Index",
    "Effects",
    # Lens
    "Lens",
    "LensLawError",
    "field_lens",
    "replace_field",
    "compose",
    "check_laws",
    "assert_laws",
    # Index
    "Indexed",
    "make_index",
    "indexed",
    "remove_entry",
    # Effect
    "Effect",
    "Immediate",
    "Mappable",
    "NO_EFFECTS",
    "map_effect",
    "map_effects",
    "batch",
    "send",
    # Embedding
    "embed_update",
    "embed_view",
    "generalize",
]
