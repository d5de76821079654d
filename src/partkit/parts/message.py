"""Boxed messages: one uniform message channel for heterogeneous parts.

A parent never has a case per child message type. Instead every child message
is boxed together with the embedded update that understands it; applying the
box to the parent model advances it by exactly one step.

Usage:
    counter_update = embed_update(counter.get, counter.set, counter.update)

    msg = pack(counter_update, Increment())      # Msg[App]
    app, effects = update(AppMsg, msg, app)      # effects now yield AppMsg
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from partkit.config import get_settings
from partkit.core.effect import map_effects
from partkit.core.types import Update

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Msg[C]:
    """Message for parent model `C`, indistinguishable by which part sent it.

    Attributes:
        step: Applies the bound child message to a parent model.
        payload: The original child message, for inspection and logging only.
    """

    step: Callable[[C], tuple[C, tuple[Any, ...]]]
    payload: Any = None

    def apply(self, model: C) -> tuple[C, tuple[Any, ...]]:
        """Advance `model` by one step.

        Returns:
            New parent model and effects whose messages are again `Msg[C]`.
        """
        return self.step(model)

    def __call__(self, model: C) -> tuple[C, tuple[Any, ...]]:
        return self.step(model)

    def __repr__(self) -> str:
        return f"Msg({self.payload!r})"


def pack[C, M](update: Update[M, C], msg: M) -> Msg[C]:
    """Box a child message against an embedded update function.

    Effects produced by the step are boxed again with the same `update`, so a
    message arriving later from an effect still routes to the same part.

    Args:
        update: Child update already embedded into the parent model.
        msg: Child message.

    Returns:
        Boxed message for the parent model.
    """

    def step(model: C) -> tuple[C, tuple[Any, ...]]:
        new_model, effects = update(msg, model)
        return new_model, map_effects(functools.partial(pack, update), effects)

    return Msg(step, msg)


def update[C, Out](
    fwd: Callable[[Msg[C]], Out], msg: Msg[C], model: C
) -> tuple[C, tuple[Any, ...]]:
    """Dispatch a boxed message and convert its effects to the caller's type.

    This is the single entry point an outer runtime calls for every message.

    Args:
        fwd: Converts a boxed message into the caller's own message type.
        msg: Boxed message to apply.
        model: Current parent model.

    Returns:
        New parent model and effects yielding `Out` messages.
    """
    if get_settings().trace_dispatch:
        logger.debug("Dispatching %r", msg)
    new_model, effects = msg.apply(model)
    if effects:
        logger.debug("Re-tagging %d effect(s) from %r", len(effects), msg)
    return new_model, map_effects(fwd, effects)


def update_optional[C, Out](
    fwd: Callable[[Msg[C]], Out], msg: Msg[C], model: C
) -> tuple[C | None, tuple[Any, ...]]:
    """Like `update`, but report an unchanged model as None.

    Lets a host skip re-rendering when a message did not change anything.

    Returns:
        New model, or None if equal to `model`, plus converted effects.
    """
    new_model, effects = update(fwd, msg, model)
    if new_model is model or new_model == model:
        return None, effects
    return new_model, effects


def partial[C, M, Out](fwd: Callable[[Msg[C]], Out], update: Update[M, C], msg: M) -> Out:
    """Box `msg` and convert it to the caller's message type in one step.

    Used for subscriptions and programmatic sends into a part.
    """
    return fwd(pack(update, msg))
