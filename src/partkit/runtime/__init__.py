"""Synchronous runtime driver.

Architecture Note:
    runtime/ is the only stateful layer. Unlike core/ and parts/, Program
    holds the current parent model and a queue of pending effects.
"""

from partkit.runtime.program import EffectLoopError, Program, perform_immediate

__all__ = [
    "Program",
    "EffectLoopError",
    "perform_immediate",
]
