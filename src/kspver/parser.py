"""
Parser for KSP version and needs expressions (text → Expression AST).

Grammar:
    expression := andGroup (("," | "&") andGroup)*
    andGroup   := orTerm ("|" orTerm)*
    orTerm     := ["!"] atom          ; empty segments are skipped
    atom       := term | modName
    term       := [comparator] major ["." minor ["." revision]]
    comparator := ">" | ">≈" | "<" | "<≈" | "≈"

Syntax Notes:
    - No whitespace trimming: " 1.8" is not a valid term
    - No parentheses: the grammar is a flat AND of ORs
    - Comparator symbols combine only as "<≈" / ">≈", never "≈<"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from kspver.exceptions import MalformedExpressionError
from kspver.expressions import (
    AllOf,
    AnyOf,
    Comparator,
    Expression,
    ModReference,
    Negation,
    VersionTerm,
)
from kspver.versioning import GameVersion


_TERM_RE = re.compile(
    r"^(?P<comparator>[<>]?≈?)"
    r"(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+)(?:\.(?P<revision>[0-9]+))?)?\Z"
)
_MOD_NAME_RE = re.compile(r"^[A-Za-z0-9_.\-/]+\Z")
_TOKEN_RE = re.compile(r"(?P<and>[,&])|(?P<or>\|)|(?P<atom>[^,&|]+)")


class TokenKind(Enum):
    AND = "and"
    OR = "or"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    """A lexical token with its offset in the source text."""
    kind: TokenKind
    text: str
    position: int


def parse_term(text: str) -> VersionTerm:
    """
    Parse a single version term such as ">≈1.8" or "1.8.1".

    Args:
        text: Term text, verbatim

    Returns:
        VersionTerm

    Raises:
        MalformedExpressionError: If the text is not a valid term
    """
    if text is None:
        raise MalformedExpressionError("Version term cannot be None")

    m = _TERM_RE.match(text)
    if not m:
        raise MalformedExpressionError(f"Malformed version term: {text!r}")

    bound = GameVersion(
        int(m.group("major")),
        int(m.group("minor")) if m.group("minor") else None,
        int(m.group("revision")) if m.group("revision") else None,
    )
    return VersionTerm(Comparator(m.group("comparator")), bound)


def parse_version(text: str, complete: bool = True) -> GameVersion:
    """
    Parse a plain version string such as "1.8.1" (no comparator).

    Args:
        text: Version text
        complete: Require minor and revision to be present

    Raises:
        MalformedExpressionError: If the text is not a valid version
    """
    term = parse_term(text)
    if term.comparator is not Comparator.NONE:
        raise MalformedExpressionError(f"Version cannot have a comparator: {text!r}")
    if complete and not term.bound.is_complete:
        raise MalformedExpressionError(f"Version must be major.minor.revision: {text!r}")
    return term.bound


def _parse_mod_reference(text: str) -> ModReference:
    if not _MOD_NAME_RE.match(text):
        raise MalformedExpressionError(f"Malformed mod identifier: {text!r}")
    return ModReference(text)


def parse_expression(text: str) -> AllOf:
    """
    Parse a version expression such as "1.8|1.9,!1.9.0".

    Args:
        text: Expression text, verbatim

    Returns:
        AllOf expression root

    Raises:
        MalformedExpressionError: If the expression is empty, None, or
            contains any malformed term
    """
    return _parse(text, parse_term)


def parse_needs_expression(text: str) -> AllOf:
    """
    Parse a needs expression such as "ModA|ModB,!ModC".

    Raises:
        MalformedExpressionError: If the expression is empty, None, or
            contains any malformed mod identifier
    """
    return _parse(text, _parse_mod_reference)


def _parse(text: Optional[str], atom: Callable[[str], Expression]) -> AllOf:
    if text is None:
        raise MalformedExpressionError("Expression cannot be None")
    if text == "":
        raise MalformedExpressionError("Expression cannot be empty")

    tokens = _tokenize(text)
    ast, pos = _parse_and_expression(tokens, 0, atom)

    if pos < len(tokens):
        raise MalformedExpressionError(
            f"Unexpected token {tokens[pos].text!r} at position {tokens[pos].position} in {text!r}"
        )

    return ast


def _tokenize(text: str) -> List[Token]:
    """Split expression text into separator and atom tokens."""
    tokens = []
    for m in _TOKEN_RE.finditer(text):
        kind = TokenKind(m.lastgroup)
        tokens.append(Token(kind, m.group(), m.start()))
    return tokens


def _parse_and_expression(tokens: List[Token], pos: int, atom) -> Tuple[AllOf, int]:
    """Parse AND-groups (lowest precedence)."""
    groups = []
    group, pos = _parse_or_expression(tokens, pos, atom)
    groups.append(group)

    while pos < len(tokens) and tokens[pos].kind is TokenKind.AND:
        pos += 1
        group, pos = _parse_or_expression(tokens, pos, atom)
        groups.append(group)

    return AllOf(tuple(groups)), pos


def _parse_or_expression(tokens: List[Token], pos: int, atom) -> Tuple[AnyOf, int]:
    """Parse OR-terms, skipping empty segments."""
    terms = []

    while True:
        if pos < len(tokens) and tokens[pos].kind is TokenKind.ATOM:
            terms.append(_parse_unary_expression(tokens[pos], atom))
            pos += 1

        if pos < len(tokens) and tokens[pos].kind is TokenKind.OR:
            pos += 1
            continue

        return AnyOf(tuple(terms)), pos


def _parse_unary_expression(token: Token, atom) -> Expression:
    """Parse an optional leading "!" followed by one atom."""
    if token.text.startswith("!"):
        return Negation(atom(token.text[1:]))
    return atom(token.text)


__all__ = [
    "parse_term",
    "parse_version",
    "parse_expression",
    "parse_needs_expression",
    "Token",
    "TokenKind",
]
