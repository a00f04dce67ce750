"""Numbered section lines ("1.0 Overview") rebuilt as Markdown headings"""

import logging

from mdrepair.core.models import HeadingMatch
from mdrepair.core.patterns import HEADING_MARKER, NUMBERED_HEADING_RE

logger = logging.getLogger(__name__)


def match_heading(line: str) -> HeadingMatch | None:
    """Return the major/minor/title parts of a numbered section line, else None."""
    m = NUMBERED_HEADING_RE.match(line)
    if m is None:
        return None
    return HeadingMatch(major=m.group(1), minor=m.group(2), title=m.group(3))


def format_heading(match: HeadingMatch) -> str:
    """`## N.0 title` for top-level sections, `### N.M title` for subsections."""
    return f"{HEADING_MARKER * match.level} {match.major}.{match.minor} {match.title}"


def reconstruct_heading(line: str) -> str | None:
    """Heading markup for a numbered section line, or None if it is not one.

    Purely syntactic: numbers are neither range-checked nor compared with
    earlier sections.
    """
    match = match_heading(line)
    if match is None:
        return None
    logger.debug("Rebuilt section %s.%s as level %d heading", match.major, match.minor, match.level)
    return format_heading(match)
