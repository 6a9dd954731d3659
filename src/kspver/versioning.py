"""
Game Version Value Type

A version is an ordered triple (major, minor, revision) where minor and
revision may be omitted. The running game always has all three parts;
version bounds written in expressions may stop early.

Comparison is "stop-short":
    - major is always compared
    - if either side omits minor, comparison stops there
    - if either side omits revision, comparison stops there

An omitted component is a wildcard, NOT zero:
    GameVersion(1, 8, 1).compare(GameVersion(1, 8)) == 0
    GameVersion(1, 8, 1).compare(GameVersion(1, 8, 0)) > 0
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameVersion:
    """
    Represents a game version or a version bound.

    Properties:
        major: Major version number (always present)
        minor: Minor version number (optional)
        revision: Revision number (optional, requires minor)

    IMPORTANT:
        Equality (==) is structural and does NOT use stop-short rules.
        Use compare() for version ordering.
    """

    major: int
    minor: Optional[int] = None
    revision: Optional[int] = None

    def __post_init__(self):
        for part in (self.major, self.minor, self.revision):
            if part is not None and part < 0:
                raise ValueError(f"Version components must be non-negative: {self}")
        if self.minor is None and self.revision is not None:
            raise ValueError("A version with a revision must also have a minor component")

    @property
    def is_complete(self) -> bool:
        """True when minor and revision are both present."""
        return self.minor is not None and self.revision is not None

    def compare(self, other: "GameVersion") -> int:
        """
        Compare against another version using stop-short rules.

        Returns:
            Negative, zero or positive, like a classic cmp(). The magnitude
            is the raw difference of the first differing component.
        """
        if not isinstance(other, GameVersion):
            raise TypeError(f"Cannot compare GameVersion with {type(other).__name__}")

        diff = self.major - other.major
        if diff != 0 or self.minor is None or other.minor is None:
            return diff

        diff = self.minor - other.minor
        if diff != 0 or self.revision is None or other.revision is None:
            return diff

        return self.revision - other.revision

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.revision]
        return ".".join(str(p) for p in parts if p is not None)
