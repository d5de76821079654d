"""Projection pair model.

Usage:
    counter = Lens(lambda app: app.counter, lambda n, app: replace(app, counter=n))

    value = counter.get(app)
    app = counter.set(value + 1, app)
    app = counter.modify(lambda n: n + 1, app)

    get, set = counter  # unpacks into the raw pair
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from partkit.core.types import Get, Set


@dataclass(frozen=True, slots=True)
class Lens[C, M]:
    """Getter/setter pair relating a parent model to one embedded child model.

    Both functions are pure. `get` must be total and `set` must leave every
    parent field unrelated to the child untouched. Lawful pairs satisfy:

        get(set(m, c)) == m
        set(get(c), c) == c
    """

    get: Get[C, M]
    set: Set[C, M]

    def __iter__(self) -> Iterator[Any]:
        """Allow `get, set = lens` where the raw pair is expected."""
        yield self.get
        yield self.set

    def modify(self, f: Callable[[M], M], parent: C) -> C:
        """Read the child, transform it, write it back."""
        return self.set(f(self.get(parent)), parent)

    def then[N](self, inner: Lens[M, N]) -> Lens[C, N]:
        """Focus further into the child through `inner`."""
        # Late import to avoid circular dependency
        from partkit.core.lens.operations import compose

        return compose(self, inner)


class LensLawError(Exception):
    """Raised when a projection pair breaks a lens law."""

    pass
