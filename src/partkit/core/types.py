"""Core type definitions for partkit."""

from collections.abc import Callable, Sequence
from typing import Any

type Index = tuple[int, ...]
"""Hierarchical address of one part instance.

Length-1 paths name statically known slots, e.g. `(0,)`, `(1,)`. Longer paths
name instances created dynamically under a slot, e.g. `(0, 0)`, `(0, 1)`.
"""

type Get[C, M] = Callable[[C], M]
"""Total projection from a parent model to one child model."""

type Set[C, M] = Callable[[M, C], C]
"""Write a child model back, returning a new parent model."""

type Effects = Sequence[Any]
"""Pending effect descriptions. Each element must be `Mappable`."""

type Update[Msg, M] = Callable[[Msg, M], tuple[M, Effects]]
"""Standard update shape: `(msg, model) -> (model, effects)`."""

type View[M, A] = Callable[[M], A]
"""Presentation function: `model -> presentation value`."""

type Lift[Msg, Out] = Callable[[Msg], Out]
"""Turns a child message into the message type a renderer dispatches."""
