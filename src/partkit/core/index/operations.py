"""Deriving index-scoped projection pairs from a lens onto an Indexed mapping."""

from __future__ import annotations

from partkit.core.index.models import Indexed, make_index
from partkit.core.lens import Lens
from partkit.core.types import Get, Index, Set


def indexed[C, M](
    get: Get[C, Indexed[M]],
    set: Set[C, Indexed[M]],
    default: M,
    idx: Index | int,
) -> Lens[C, M]:
    """Derive a lens onto the single entry at `idx` of an Indexed mapping.

    Entries are materialized lazily: reading an absent entry yields `default`
    without writing anything back, and writing `default` into an absent entry
    leaves the parent unchanged. Lenses for different paths never interfere.

    Args:
        get: Projection from the parent to the Indexed mapping.
        set: Writes an Indexed mapping back into the parent.
        default: Model of an instance that has never been written.
        idx: Index path of the instance.

    Returns:
        Lens from the parent to the child model at `idx`.
    """
    key = make_index(idx)

    def get_entry(parent: C) -> M:
        return get(parent).lookup(key, default)

    def set_entry(model: M, parent: C) -> C:
        entries = get(parent)
        if key not in entries and model == default:
            return parent
        return set(entries.set(key, model), parent)

    return Lens(get_entry, set_entry)


def remove_entry[C, M](
    get: Get[C, Indexed[M]],
    set: Set[C, Indexed[M]],
    idx: Index | int,
    parent: C,
) -> C:
    """Drop the entry at `idx`, returning the instance to its default state.

    Args:
        get: Projection from the parent to the Indexed mapping.
        set: Writes an Indexed mapping back into the parent.
        idx: Index path of the instance to drop.
        parent: Parent model.

    Returns:
        Parent without the entry; `parent` itself if nothing was stored.
    """
    entries = get(parent)
    remaining = entries.remove(idx)
    if remaining is entries:
        return parent
    return set(remaining, parent)
