"""Index paths and the Indexed mapping.

Usage:
    idx = make_index(0)          # (0,)
    child = make_index(idx, 3)   # (0, 3)

    fields = Indexed[str]()
    fields = fields.set(child, "hello")
    fields.lookup(child, "")           # "hello"
    fields.lookup(make_index(1), "")   # "" (absent, nothing written)
    fields = fields.remove(child)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import overload

from partkit.core.types import Index


def make_index(*parts: int | Iterable[int]) -> Index:
    """Normalize ints and int sequences into one Index path.

    Nested sequences are flattened one level, so a parent path can be
    extended: `make_index((0,), 2) == (0, 2)`.

    Args:
        parts: Integers or sequences of integers.

    Returns:
        Tuple of non-negative integers.

    Raises:
        TypeError: If a part is not an int (bools are rejected).
        ValueError: If the path is empty or contains a negative integer.
    """
    if len(parts) == 1 and type(parts[0]) is tuple and _is_valid(parts[0]):
        return parts[0]  # type: ignore[return-value]

    path: list[int] = []
    for part in parts:
        if isinstance(part, int) and not isinstance(part, bool):
            path.append(part)
            continue
        if isinstance(part, (str, bytes)) or not isinstance(part, Iterable):
            raise TypeError(f"Index parts must be ints or int sequences, got {part!r}")
        for item in part:
            if not isinstance(item, int) or isinstance(item, bool):
                raise TypeError(f"Index parts must be ints, got {item!r}")
            path.append(item)

    if not path:
        raise ValueError("Index path must not be empty")
    if any(item < 0 for item in path):
        raise ValueError(f"Index path must be non-negative, got {tuple(path)}")
    return tuple(path)


def _is_valid(path: tuple[object, ...]) -> bool:
    return bool(path) and all(
        type(item) is int and item >= 0  # type: ignore[operator]
        for item in path
    )


class Indexed[M](Mapping[Index, M]):
    """Immutable mapping from Index path to child model.

    Every modifying method returns a new Indexed; the receiver is never
    changed. Iteration order is not part of the contract.
    """

    __slots__ = ("_entries",)

    def __init__(
        self, entries: Mapping[Index, M] | Iterable[tuple[Index, M]] | None = None
    ) -> None:
        items = entries.items() if isinstance(entries, Mapping) else (entries or ())
        self._entries: dict[Index, M] = {make_index(idx): model for idx, model in items}

    @classmethod
    def _wrap(cls, entries: dict[Index, M]) -> Indexed[M]:
        new = cls.__new__(cls)
        new._entries = entries
        return new

    def __getitem__(self, idx: Index) -> M:
        return self._entries[make_index(idx)]

    def __contains__(self, idx: object) -> bool:
        try:
            return make_index(idx) in self._entries  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Index]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Indexed({self._entries!r})"

    @overload
    def lookup(self, idx: Index | int) -> M | None: ...

    @overload
    def lookup(self, idx: Index | int, default: M) -> M: ...

    def lookup(self, idx: Index | int, default: M | None = None) -> M | None:
        """Get the entry at `idx`, or `default` when absent. Never writes."""
        return self._entries.get(make_index(idx), default)

    def set(self, idx: Index | int, model: M) -> Indexed[M]:
        """Return a copy with `model` inserted or overwritten at `idx`."""
        entries = dict(self._entries)
        entries[make_index(idx)] = model
        return self._wrap(entries)

    def remove(self, idx: Index | int) -> Indexed[M]:
        """Return a copy without the entry at `idx`. Missing entries are a no-op."""
        key = make_index(idx)
        if key not in self._entries:
            return self
        entries = dict(self._entries)
        del entries[key]
        return self._wrap(entries)
