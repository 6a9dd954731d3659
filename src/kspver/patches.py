"""
Patch descriptor record.

A ProtoPatch is what the surrounding patch pipeline extracts from a
root-level configuration node before deciding how to apply it. Only the
applicability fields (ksp_version, needs) are interpreted here; the rest
is carried through for the pass scheduler.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kspver.progress import ConfigSource


class Command(Enum):
    """Patch operation, keyed by its leading symbol in a node name."""

    INSERT = ""
    EDIT = "@"
    COPY = "+"
    DELETE = "-"
    REPLACE = "%"
    RENAME = "|"
    PASTE = "#"
    SPECIAL = "*"
    CREATE = "&"


@dataclass(frozen=True)
class ProtoPatch:
    """
    Properties:
        source: Where the patch was defined
        command: Operation to perform
        node_type: Target node type (e.g. "PART")
        node_name: Target node name filter (optional)
        ksp_version: Root-level KSP_VERSION expression (optional)
        needs: Root-level NEEDS expression (optional)
        has: HAS filter, passed through (optional)
        pass_specifier: Pass the patch runs in, e.g. "FOR[MyMod]" (optional)
    """

    source: ConfigSource
    command: Command
    node_type: str
    node_name: Optional[str] = None
    ksp_version: Optional[str] = None
    needs: Optional[str] = None
    has: Optional[str] = None
    pass_specifier: Optional[str] = None
