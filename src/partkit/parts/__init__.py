"""Message boxing, generic dispatch and part assembly.

Architecture Note:
    parts/ builds on the pure core/ primitives. Everything here is still a
    stateless value transformation; the parent model is threaded explicitly.
"""

from partkit.parts.factory import Accessors, PartView, accessors, create, create1
from partkit.parts.message import Msg, pack, partial, update, update_optional

__all__ = [
    # Message
    "Msg",
    "pack",
    "update",
    "update_optional",
    "partial",
    # Factory
    "PartView",
    "Accessors",
    "accessors",
    "create",
    "create1",
]
