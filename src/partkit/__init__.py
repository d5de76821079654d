"""partkit: compose independently defined update/view parts into one model.

Usage:
    from dataclasses import dataclass
    from partkit import Program, create1, field_lens, pack, embed_update

    @dataclass(frozen=True)
    class App:
        count: int = 0

    def counter_update(msg, count):
        return count + 1 if msg == "inc" else count - 1, ()

    def counter_view(lift, count):
        return {"label": str(count), "on_click": lift("inc")}

    count = field_lens("count")
    view = create1(counter_view, counter_update, count.get, count.set, lambda m: m)

    program = Program(App())
    program.dispatch(view(program.model)["on_click"])
    assert program.model.count == 1
"""

__version__ = "0.1.0"

# Core primitives
from partkit.core import (
    NO_EFFECTS,
    Effect,
    Effects,
    Get,
    Immediate,
    Index,
    Indexed,
    Lens,
    LensLawError,
    Lift,
    Mappable,
    Set,
    Update,
    View,
    assert_laws,
    batch,
    check_laws,
    compose,
    embed_update,
    embed_view,
    field_lens,
    generalize,
    indexed,
    make_index,
    map_effect,
    map_effects,
    remove_entry,
    replace_field,
    send,
)

# Configuration
from partkit.config import PartsSettings, configure, get_settings

# Message channel and part assembly
from partkit.parts import (
    Accessors,
    Msg,
    PartView,
    accessors,
    create,
    create1,
    pack,
    partial,
    update,
    update_optional,
)

# Runtime driver
from partkit.runtime import EffectLoopError, Program, perform_immediate

__all__ = [
    # Version
    "__version__",
    # Types
    "Get",
    "Set",
    "Update",
    "View",
    "Lift",
    "Index",
    "Effects",
    "PartView",
    # Lens
    "Lens",
    "LensLawError",
    "field_lens",
    "replace_field",
    "compose",
    "check_laws",
    "assert_laws",
    # Index
    "Indexed",
    "make_index",
    "indexed",
    "remove_entry",
    # Effect
    "Effect",
    "Immediate",
    "Mappable",
    "NO_EFFECTS",
    "map_effect",
    "map_effects",
    "batch",
    "send",
    # Embedding
    "embed_update",
    "embed_view",
    "generalize",
    # Parts
    "Msg",
    "pack",
    "update",
    "update_optional",
    "partial",
    "Accessors",
    "accessors",
    "create",
    "create1",
    # Runtime
    "Program",
    "EffectLoopError",
    "perform_immediate",
    # Config
    "PartsSettings",
    "get_settings",
    "configure",
]
