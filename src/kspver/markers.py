"""
Annotated names: locating and stripping `:KSP_VERSION[...]` markers.

A node or value name may carry one applicability annotation anywhere:

    "MODULE:KSP_VERSION[>≈1.8]"       -> name "MODULE", expression ">≈1.8"
    "@PART[foo]:KSP_VERSION[1.9]:NEEDS[Bar]"
                                      -> name "@PART[foo]:NEEDS[Bar]"

Rules:
    - The marker is matched case-insensitively
    - Only the first marker is recognized
    - The expression runs from just after "[" to the next "]"
    - A marker with no closing "]" is an error, not "no annotation"
"""

import re
from dataclasses import dataclass
from typing import Optional

from kspver.exceptions import MalformedAnnotationError


MARKER = ":KSP_VERSION["
_MARKER_RE = re.compile(re.escape(MARKER), re.IGNORECASE)


@dataclass(frozen=True)
class AnnotatedName:
    """
    Result of splitting a name around its annotation.

    Properties:
        name: The name with the annotation removed (unchanged if none)
        expression: Bracketed expression text, or None if no marker
    """

    name: Optional[str]
    expression: Optional[str] = None

    @property
    def has_annotation(self) -> bool:
        return self.expression is not None


def split_annotation(name: Optional[str]) -> AnnotatedName:
    """
    Split a name into its stripped form and annotation expression.

    Args:
        name: Node or value name; None is passed through

    Returns:
        AnnotatedName

    Raises:
        MalformedAnnotationError: If a marker has no closing bracket
    """
    if name is None:
        return AnnotatedName(None)

    m = _MARKER_RE.search(name)
    if m is None:
        return AnnotatedName(name)

    end = name.find("]", m.end())
    if end < 0:
        raise MalformedAnnotationError(f"Missing ']' after {MARKER!r} in name {name!r}")

    return AnnotatedName(
        name=name[:m.start()] + name[end + 1:],
        expression=name[m.end():end],
    )
