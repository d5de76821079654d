"""Program: minimal synchronous driver for a parent model.

Holds the top-level model, routes every boxed message through the generic
dispatch and queues the effects it returns. Effects only run when the caller
asks, through a caller-supplied `perform` function.

Usage:
    program = Program(App())
    program.dispatch(pack(counter_update, Increment()))

    # Run queued effects; immediate ones resolve straight to their message
    program.run_effects(perform_immediate)
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any

from partkit.config import PartsSettings, get_settings
from partkit.core.effect import Effect
from partkit.parts.message import Msg, update

logger = logging.getLogger(__name__)


class EffectLoopError(Exception):
    """Raised when effects keep producing effects past the configured limit."""

    pass


def _identity[T](msg: T) -> T:
    return msg


def perform_immediate(effect: Any) -> Any:
    """Resolve effects created with `Effect.of` / `send`.

    Raises:
        TypeError: If the effect needs real work done by a host runtime.
    """
    if isinstance(effect, Effect) and effect.is_immediate:
        return effect.resolve()
    raise TypeError(f"Cannot perform {effect!r}: not an immediate effect")


class Program[C]:
    """Owns one parent model and threads it through dispatch.

    Single-threaded; every call returns once the model has been replaced.
    """

    def __init__(self, model: C, settings: PartsSettings | None = None) -> None:
        self._model = model
        self._pending: deque[Any] = deque()
        self._settings = settings or get_settings()

    @property
    def model(self) -> C:
        """Current parent model."""
        return self._model

    @property
    def pending(self) -> tuple[Any, ...]:
        """Effects returned by dispatch and not yet performed, oldest first."""
        return tuple(self._pending)

    def dispatch(self, msg: Msg[C]) -> C:
        """Apply one boxed message and queue its effects.

        Returns:
            The new parent model.
        """
        self._model, effects = update(_identity, msg, self._model)
        self._pending.extend(effects)
        return self._model

    def dispatch_all(self, msgs: Iterable[Msg[C]]) -> C:
        """Apply messages in order.

        Returns:
            The parent model after the last message.
        """
        for msg in msgs:
            self.dispatch(msg)
        return self._model

    def run_effects(self, perform: Callable[[Any], Msg[C] | None]) -> int:
        """Perform queued effects until none remain.

        Messages produced by `perform` are dispatched immediately, so effects
        they return are performed in the same run.

        Args:
            perform: Executes one effect and returns its message, or None if
                the effect yields no message.

        Returns:
            Number of effects performed.

        Raises:
            EffectLoopError: If more than `max_effect_rounds` effects are performed.
        """
        limit = self._settings.max_effect_rounds
        performed = 0
        while self._pending:
            if performed >= limit:
                raise EffectLoopError(
                    f"Performed {performed} effects without draining the queue "
                    f"({len(self._pending)} pending)"
                )
            effect = self._pending.popleft()
            msg = perform(effect)
            performed += 1
            if msg is not None:
                self.dispatch(msg)
        logger.debug("Performed %d effect(s)", performed)
        return performed
