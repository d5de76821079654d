"""Pure functions for re-tagging and combining effect descriptions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from partkit.core.effect.models import Effect, Mappable


def map_effect(f: Callable[[Any], Any], effect: Any) -> Any:
    """Re-tag the message one effect will eventually produce.

    Args:
        f: Conversion applied to the eventual message.
        effect: Effect description implementing `Mappable`.

    Returns:
        Effect of the same kind whose message is passed through `f`.

    Raises:
        TypeError: If effect doesn't implement Mappable.
    """
    if not isinstance(effect, Mappable):
        raise TypeError(f"{type(effect).__name__} does not implement Mappable protocol")
    return effect.map(f)


def map_effects(f: Callable[[Any], Any], effects: Iterable[Any]) -> tuple[Any, ...]:
    """Re-tag every effect in order.

    Args:
        f: Conversion applied to each eventual message.
        effects: Effect descriptions.

    Returns:
        Tuple of re-tagged effects, same order as given.
    """
    return tuple(map_effect(f, effect) for effect in effects)


def batch(*groups: Iterable[Any]) -> tuple[Any, ...]:
    """Concatenate effect sequences into one, preserving order."""
    return tuple(effect for group in groups for effect in group)


def send[T](msg: T) -> tuple[Effect[T]]:
    """Single immediate effect delivering `msg` on the next dispatch round."""
    return (Effect.of(msg),)


NO_EFFECTS: tuple[Any, ...] = ()
