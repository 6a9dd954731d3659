"""
Interpreter for version and needs expressions.

Evaluates an Expression AST against the facts of one run:
    - the running game version (for VersionTerm)
    - the set of installed mods (for ModReference)

The text-level helpers (matches, evaluate, evaluate_needs) parse first
and evaluate second, so a malformed term anywhere in the expression is
an error even when an earlier group already decides the result.
"""

from typing import Callable, Dict, Iterable, Optional

from kspver.exceptions import InvalidArgumentError
from kspver.expressions import (
    AllOf,
    AnyOf,
    Comparator,
    Expression,
    ModReference,
    Negation,
    VersionTerm,
)
from kspver.parser import parse_expression, parse_needs_expression, parse_term
from kspver.versioning import GameVersion


_COMPARATOR_CHECKS: Dict[Comparator, Callable[[int], bool]] = {
    Comparator.NONE: lambda diff: diff == 0,
    Comparator.EQUIVALENT: lambda diff: diff == 0,
    Comparator.GREATER_THAN: lambda diff: diff > 0,
    Comparator.GREATER_EQUIVALENT: lambda diff: diff >= 0,
    Comparator.LESS_THAN: lambda diff: diff < 0,
    Comparator.LESS_EQUIVALENT: lambda diff: diff <= 0,
}


def evaluate_expression(
    expr: Expression,
    version: Optional[GameVersion] = None,
    mods: Optional[Iterable[str]] = None,
) -> bool:
    """
    Evaluate an expression tree.

    Args:
        expr: Expression to evaluate
        version: Running game version, required if expr has version terms
        mods: Installed mod identifiers, required if expr has mod references

    Returns:
        True if the expression is satisfied

    Raises:
        InvalidArgumentError: If a fact needed by the expression is missing
    """
    installed = None if mods is None else {m.lower() for m in mods}
    return _evaluate(expr, version, installed)


def _evaluate(expr: Expression, version, installed) -> bool:
    if isinstance(expr, AllOf):
        return all(_evaluate(group, version, installed) for group in expr.groups)

    if isinstance(expr, AnyOf):
        return any(_evaluate(term, version, installed) for term in expr.terms)

    if isinstance(expr, Negation):
        return not _evaluate(expr.operand, version, installed)

    if isinstance(expr, VersionTerm):
        if version is None:
            raise InvalidArgumentError("A game version is required to evaluate version terms")
        return _COMPARATOR_CHECKS[expr.comparator](version.compare(expr.bound))

    if isinstance(expr, ModReference):
        if installed is None:
            raise InvalidArgumentError("A set of installed mods is required to evaluate mod references")
        return expr.name.lower() in installed

    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def matches(version: GameVersion, term: str) -> bool:
    """
    Check a single version term, e.g. matches(GameVersion(1, 8, 1), ">≈1.8").

    Raises:
        MalformedExpressionError: If the term is malformed
    """
    return evaluate_expression(parse_term(term), version=version)


def evaluate(version: GameVersion, expression: str) -> bool:
    """
    Check a full version expression, e.g. evaluate(v, "1.8|1.9,!1.9.0").

    Raises:
        MalformedExpressionError: If the expression is empty or malformed
    """
    return evaluate_expression(parse_expression(expression), version=version)


def evaluate_needs(expression: str, mods: Iterable[str]) -> bool:
    """
    Check a needs expression against installed mod identifiers.

    Mod identifiers are compared case-insensitively.
    """
    return evaluate_expression(parse_needs_expression(expression), mods=mods)


__all__ = [
    "evaluate_expression",
    "matches",
    "evaluate",
    "evaluate_needs",
]
