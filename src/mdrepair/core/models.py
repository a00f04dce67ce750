"""Value types for the line-oriented repair pass"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from mdrepair.core.patterns import SEPARATOR_MARKERS


class LineKind(str, Enum):
    """Category assigned to a single trimmed input line"""
    title = "title"
    heading = "heading"
    table = "table"
    plain = "plain"


@dataclass(frozen=True)
class TitleState:
    """Per-run title detection flag; flips to True once and never back."""
    title_found: bool = False

    def found(self) -> "TitleState":
        return replace(self, title_found=True)


@dataclass(frozen=True)
class HeadingMatch:
    """A `major.minor text` line split into its parts."""
    major: str
    minor: str
    title: str

    @property
    def is_top_level(self) -> bool:
        """True when minor is the literal zero sentinel ("00" does not count)."""
        return self.minor == "0"

    @property
    def level(self) -> int:
        return 2 if self.is_top_level else 3


@dataclass
class TableFragment:
    """A collapsed table line decomposed into an optional caption and pipe-led rows."""
    caption: Optional[str] = None
    rows:    list[str] = field(default_factory=list)

    @property
    def separator_index(self) -> int | None:
        """Index of the first row carrying a separator marker, else None."""
        for i, row in enumerate(self.rows):
            if any(m in row for m in SEPARATOR_MARKERS):
                return i
        return None

    def to_markdown(self) -> str:
        """Caption paragraph, blank line, then rows; rows only when there is no caption."""
        parts = [self.caption, ""] if self.caption is not None else []
        return "\n".join(parts + self.rows)
