"""Effect descriptions.

partkit never runs effects. It only re-tags the message an effect will
eventually produce, so that message still routes to the part it came from.

Usage:
    fetch = Effect(FetchUser(user_id=7), to_msg=UserLoaded)
    boxed = fetch.map(lift)          # same work, message passed through lift

    nudge = Effect.of(Increment())   # resolves straight to a message
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Mappable(Protocol):
    """Anything whose eventual message can be re-tagged.

    Host runtimes may use their own effect types; they only need `map`.
    """

    def map(self, f: Callable[[Any], Any]) -> Any: ...


@dataclass(frozen=True, slots=True)
class Immediate:
    """Description of an effect with no work: it resolves to its message at once."""

    pass


@dataclass(frozen=True, slots=True)
class Effect[T]:
    """Opaque deferred work plus how its outcome becomes a message.

    Attributes:
        description: What the runtime should do. Never inspected here.
        to_msg: Converts the runtime's result into a message.
    """

    description: Any
    to_msg: Callable[[Any], T]

    @classmethod
    def of(cls, msg: T) -> Effect[T]:
        """Effect that resolves to `msg` without doing any work."""
        return cls(Immediate(), lambda _result: msg)

    def map[U](self, f: Callable[[T], U]) -> Effect[U]:
        """Same work; the eventual message is passed through `f`."""
        to_msg = self.to_msg
        return Effect(self.description, lambda result: f(to_msg(result)))

    def resolve(self, result: Any = None) -> T:
        """Turn the runtime's result into the message this effect yields."""
        return self.to_msg(result)

    @property
    def is_immediate(self) -> bool:
        return isinstance(self.description, Immediate)
