"""Part constructors and accessor bundles.

Usage:
    # Indexed family stored in `app.fields: Indexed[str]`
    field_view = create(
        render_field, field_update,
        lambda app: app.fields, lambda fields, app: replace(app, fields=fields),
        "", AppMsg, make_index(0),
    )
    html = field_view(app)

    # Singleton stored directly in `app.counter`
    counter_view = create1(render_counter, counter_update, counter.get, counter.set, AppMsg)

    # Direct model access
    fields = accessors(lambda app: app.fields, lambda f, app: replace(app, fields=f), "")
    app = fields.set((0,), "hello", app)
    app = fields.reset((0,), app)
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from partkit.core.embedding import embed_update, embed_view
from partkit.core.index import Indexed, indexed, remove_entry
from partkit.core.lens import Lens
from partkit.core.types import Get, Index, Set, Update, View
from partkit.parts.message import Msg, pack

type PartView[Msg_, M, A] = Callable[[Callable[[Msg_], Any], M], A]
"""Child view taking a message-lifting function first: `view(lift, model)`."""


def _wire[C, M, Msg_, Out, A](
    view: PartView[Msg_, M, A],
    update: Update[Msg_, M],
    lens: Lens[C, M],
    lift: Callable[[Msg[C]], Out],
) -> View[C, A]:
    embedded = embed_update(lens.get, lens.set, update)

    def lift_child(msg: Msg_) -> Out:
        return lift(pack(embedded, msg))

    return embed_view(lens.get, functools.partial(view, lift_child))


def create[C, M, Msg_, Out, A](
    view: PartView[Msg_, M, A],
    update: Update[Msg_, M],
    get: Get[C, Indexed[M]],
    set: Set[C, Indexed[M]],
    default: M,
    lift: Callable[[Msg[C]], Out],
    idx: Index | int,
) -> View[C, A]:
    """Assemble a view for one instance of a repeatable part.

    Args:
        view: Child view, called as `view(lift_child, model)`.
        update: Child update function.
        get: Projection from parent to the part's Indexed mapping.
        set: Writes the Indexed mapping back into the parent.
        default: Model of an instance that has never been written.
        lift: Converts boxed parent messages into the renderer's message type.
        idx: Index path of this instance.

    Returns:
        View over the parent model; interactions dispatch boxed, lifted messages.
    """
    return _wire(view, update, indexed(get, set, default, idx), lift)


def create1[C, M, Msg_, Out, A](
    view: PartView[Msg_, M, A],
    update: Update[Msg_, M],
    get: Get[C, M],
    set: Set[C, M],
    lift: Callable[[Msg[C]], Out],
) -> View[C, A]:
    """Assemble a view for a singleton part stored directly in the parent.

    Same as `create`, without index derivation or default model.
    """
    return _wire(view, update, Lens(get, set), lift)


@dataclass(frozen=True, slots=True)
class Accessors[C, M]:
    """Direct access to the models of one repeatable part inside a parent.

    Reading an absent instance yields `default`; `reset` removes the entry so
    the instance reverts to `default`.
    """

    outer_get: Get[C, Indexed[M]]
    outer_set: Set[C, Indexed[M]]
    default: M

    def lens(self, idx: Index | int) -> Lens[C, M]:
        """Index-scoped projection pair for `idx`."""
        return indexed(self.outer_get, self.outer_set, self.default, idx)

    def get(self, idx: Index | int, parent: C) -> M:
        return self.lens(idx).get(parent)

    def set(self, idx: Index | int, model: M, parent: C) -> C:
        return self.lens(idx).set(model, parent)

    def map(self, idx: Index | int, f: Callable[[M], M], parent: C) -> C:
        """Read-modify-write the model at `idx` in one step."""
        return self.lens(idx).modify(f, parent)

    def reset(self, idx: Index | int, parent: C) -> C:
        """Remove the entry at `idx`, reverting it to the default model."""
        return remove_entry(self.outer_get, self.outer_set, idx, parent)


def accessors[C, M](
    get: Get[C, Indexed[M]], set: Set[C, Indexed[M]], default: M
) -> Accessors[C, M]:
    """Build the get/set/map/reset bundle for a repeatable part."""
    return Accessors(get, set, default)
