"""Splitting of table fragments collapsed onto a single physical line"""

import logging

from mdrepair.core.models import TableFragment
from mdrepair.core.patterns import PIPE, ROW_BREAK, ROW_BREAK_RE, SEPARATOR_MARKERS

logger = logging.getLogger(__name__)


def is_table_fragment(line: str) -> bool:
    """True when the line has a pipe and a separator marker anywhere in it."""
    return PIPE in line and any(m in line for m in SEPARATOR_MARKERS)


def _split_rows(line: str) -> list[str]:
    """Turn each `| |` run into a row boundary and split on it."""
    return ROW_BREAK_RE.sub(ROW_BREAK, line).split("\n")


def parse_table_fragment(line: str) -> TableFragment:
    """Decompose a collapsed table line into caption and pipe-led rows.

    Text before the first pipe of the first row becomes the caption. Column
    counts are not checked; a ragged table comes out as ragged as it went in.
    """
    rows = _split_rows(line)
    caption = None
    first = rows[0]
    if not first.strip().startswith(PIPE):
        idx = first.find(PIPE)
        if idx > 0:
            caption = first[:idx].strip()
            rows[0] = first[idx:]
    return TableFragment(caption=caption, rows=rows)


def split_table_fragment(line: str) -> str:
    """Return the repaired multi-line replacement for a collapsed table line."""
    fragment = parse_table_fragment(line)
    logger.debug(
        "Split table fragment into %d row(s), separator at row %s%s",
        len(fragment.rows), fragment.separator_index,
        " with caption" if fragment.caption is not None else "",
    )
    return fragment.to_markdown()
