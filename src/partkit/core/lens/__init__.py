"""Projection pairs: model, builders, composition and law checks."""

from partkit.core.lens.models import Lens, LensLawError
from partkit.core.lens.operations import (
    assert_laws,
    check_laws,
    compose,
    field_lens,
    replace_field,
)

__all__ = [
    # Models
    "Lens",
    "LensLawError",
    # Operations
    "field_lens",
    "replace_field",
    "compose",
    "check_laws",
    "assert_laws",
]
