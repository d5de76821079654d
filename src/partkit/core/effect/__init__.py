"""Effect descriptions and functorial re-tagging."""

from partkit.core.effect.models import Effect, Immediate, Mappable
from partkit.core.effect.operations import NO_EFFECTS, batch, map_effect, map_effects, send

__all__ = [
    # Models
    "Effect",
    "Immediate",
    "Mappable",
    # Operations
    "NO_EFFECTS",
    "map_effect",
    "map_effects",
    "batch",
    "send",
]
