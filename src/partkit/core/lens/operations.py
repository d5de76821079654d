"""Pure functions for building, composing and checking projection pairs."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from partkit.core.lens.models import Lens, LensLawError


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def replace_field(parent: Any, name: str, value: Any) -> Any:
    """Return a copy of `parent` with one field replaced.

    Supports dataclass instances (via `dataclasses.replace`), Pydantic models
    (via `model_copy`) and mappings (copied into a new dict).

    Args:
        parent: Parent model value. Never mutated.
        name: Field or key to replace.
        value: New value for the field.

    Returns:
        New parent value sharing all other fields with `parent`.

    Raises:
        TypeError: If parent is none of the supported kinds.
    """
    if dataclasses.is_dataclass(parent) and not isinstance(parent, type):
        return dataclasses.replace(parent, **{name: value})
    if _is_pydantic(type(parent)):
        return parent.model_copy(update={name: value})
    if isinstance(parent, Mapping):
        return {**parent, name: value}
    raise TypeError(
        f"Cannot replace field {name!r} on {type(parent).__name__}: "
        f"expected a dataclass, Pydantic model or mapping"
    )


def field_lens(name: str) -> Lens[Any, Any]:
    """Build a lens onto one named field of a parent model.

    Args:
        name: Attribute name (dataclass/Pydantic) or key (mapping).

    Returns:
        Lens whose setter copies the parent with the field replaced.
    """

    def get(parent: Any) -> Any:
        if isinstance(parent, Mapping):
            return parent[name]
        return getattr(parent, name)

    def set(value: Any, parent: Any) -> Any:
        return replace_field(parent, name, value)

    return Lens(get, set)


def compose[C, M, N](outer: Lens[C, M], inner: Lens[M, N]) -> Lens[C, N]:
    """Chain two lenses: parent -> child -> grandchild.

    Args:
        outer: Lens from the parent to the intermediate model.
        inner: Lens from the intermediate model to the target.

    Returns:
        Lens from the parent straight to the target.
    """

    def get(parent: C) -> N:
        return inner.get(outer.get(parent))

    def set(value: N, parent: C) -> C:
        return outer.set(inner.set(value, outer.get(parent)), parent)

    return Lens(get, set)


def check_laws[C, M](lens: Lens[C, M], parent: C, child: M) -> list[str]:
    """Evaluate the lens laws for one parent/child pair.

    Args:
        lens: Projection pair under test.
        parent: Sample parent model.
        child: Sample child model.

    Returns:
        Names of violated laws ("get-set", "set-get", "set-set"); empty if lawful.
    """
    violations = []
    written = lens.set(child, parent)
    if lens.get(written) != child:
        violations.append("get-set")
    if lens.set(lens.get(parent), parent) != parent:
        violations.append("set-get")
    if lens.set(child, written) != written:
        violations.append("set-set")
    return violations


def assert_laws[C, M](lens: Lens[C, M], parent: C, child: M) -> None:
    """Raise if any lens law fails for the given sample.

    Raises:
        LensLawError: Listing every violated law.
    """
    violations = check_laws(lens, parent, child)
    if violations:
        raise LensLawError(f"Lens violates {', '.join(violations)} law(s) for child {child!r}")
