"""Lifting child-scoped update and view functions to a parent model.

Usage:
    counter = field_lens("counter")

    parent_update = embed_update(counter.get, counter.set, counter_update)
    app, effects = parent_update(Increment(), app)

    parent_view = embed_view(counter.get, render_counter)
    html = parent_view(app)
"""

from __future__ import annotations

from collections.abc import Callable

from partkit.config import get_settings
from partkit.core.lens import LensLawError
from partkit.core.types import Effects, Get, Set, Update, View


def embed_update[C, M, Msg](
    get: Get[C, M], set: Set[C, M], update: Update[Msg, M]
) -> Update[Msg, C]:
    """Run a child update against the child model embedded in a parent.

    Effects are passed through unchanged; they still carry the child's own
    message type at this layer.

    Args:
        get: Projection from parent to child.
        set: Writes the child back into the parent.
        update: Child update function.

    Returns:
        Update function over the parent model.

    Raises:
        LensLawError: If lens checks are enabled and `set` loses the new child.
    """

    def embedded(msg: Msg, parent: C) -> tuple[C, Effects]:
        model, effects = update(msg, get(parent))
        new_parent = set(model, parent)
        if get_settings().check_lens_laws and get(new_parent) != model:
            raise LensLawError(
                f"get-set law violated while applying {msg!r}: wrote {model!r}, "
                f"read back {get(new_parent)!r}"
            )
        return new_parent, effects

    return embedded


def embed_view[C, M, A](get: Get[C, M], view: View[M, A]) -> View[C, A]:
    """Render the child model embedded in a parent."""

    def embedded(parent: C) -> A:
        return view(get(parent))

    return embedded


def generalize[Msg, M](update: Callable[[Msg, M], M]) -> Update[Msg, M]:
    """Lift an effect-free update into the standard `(model, effects)` shape."""

    def generalized(msg: Msg, model: M) -> tuple[M, Effects]:
        return update(msg, model), ()

    return generalized
