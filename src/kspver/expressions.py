"""
Expression System for KSP Version Applicability

Annotation bodies such as ">≈1.8,!1.9.0|1.10" are parsed into a small
Abstract Syntax Tree before anything is evaluated.

The grammar is flat, two levels deep, with no parentheses:

    AllOf( AnyOf(term, term, ...), AnyOf(...), ... )

    - AllOf is satisfied iff every AnyOf group is satisfied
    - AnyOf is satisfied iff at least one of its terms is satisfied
    - Negation flips a single term

ARCHITECTURAL RULE:
    These classes are structure only.
    Parsing lives in kspver.parser.
    Evaluation lives in kspver.interpreter.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from kspver.versioning import GameVersion


class Expression(ABC):
    """
    Base class for all AST expressions.

    Exists only to give the expression hierarchy a common type.
    It carries no evaluation logic.
    """
    pass


class Comparator(Enum):
    """
    Comparators that may prefix a version term.

    NONE and EQUIVALENT both mean stop-short equality; they are kept
    apart only so the original spelling of a term is preserved.
    """

    NONE = ""
    EQUIVALENT = "≈"
    GREATER_THAN = ">"
    GREATER_EQUIVALENT = ">≈"
    LESS_THAN = "<"
    LESS_EQUIVALENT = "<≈"


@dataclass(frozen=True)
class VersionTerm(Expression):
    """
    A single comparison against the running game version.

    Example:
        ">≈1.8"

    Becomes:
        VersionTerm(
            comparator=Comparator.GREATER_EQUIVALENT,
            bound=GameVersion(1, 8)
        )
    """

    comparator: Comparator
    bound: GameVersion


@dataclass(frozen=True)
class ModReference(Expression):
    """
    References an installed mod by identifier.

    Only meaningful in "needs" expressions. Whether the mod is present
    is an external fact supplied at evaluation time.
    """

    name: str


@dataclass(frozen=True)
class Negation(Expression):
    """
    Represents a leading "!" on a single term.

    Example:
        "!1.9"  ->  Negation(VersionTerm(Comparator.NONE, GameVersion(1, 9)))
    """

    operand: Expression


@dataclass(frozen=True)
class AnyOf(Expression):
    """
    An OR-group: terms separated by "|".

    Empty segments ("1.8||1.9") are dropped by the parser, so terms may
    be shorter than the number of separators suggests. A group with no
    terms at all is never satisfied.
    """

    terms: Tuple[Expression, ...]


@dataclass(frozen=True)
class AllOf(Expression):
    """
    The expression root: AND-groups separated by "," or "&".

    Example:
        "1.8|1.9,!1.9.0"

    Becomes:
        AllOf(groups=(
            AnyOf(terms=(VersionTerm(...1.8), VersionTerm(...1.9))),
            AnyOf(terms=(Negation(VersionTerm(...1.9.0)),)),
        ))
    """

    groups: Tuple[AnyOf, ...]
