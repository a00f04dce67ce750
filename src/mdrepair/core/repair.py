"""Repair pass: walk the pasted report once and rebuild its Markdown structure"""

import logging
from typing import Iterable

from mdrepair.core.classify import classify_line
from mdrepair.core.headings import reconstruct_heading
from mdrepair.core.models import LineKind, TitleState
from mdrepair.core.patterns import BOM
from mdrepair.core.tables import split_table_fragment
from mdrepair.core.title import promote_title

logger = logging.getLogger(__name__)


def repair_line(line: str, state: TitleState) -> tuple[str, TitleState]:
    """Repair one line; the result may span several lines (split tables)."""
    trimmed = line.strip().strip(BOM).strip()
    kind = classify_line(trimmed, state)
    if kind == LineKind.title:
        return promote_title(trimmed, state)
    if kind == LineKind.heading:
        return reconstruct_heading(trimmed), state
    if kind == LineKind.table:
        return split_table_fragment(trimmed), state
    return trimmed, state


def repair_lines(
    lines: Iterable[str],
    state: TitleState = TitleState(),
    ) -> tuple[list[str], TitleState]:
    """Repair lines in order, threading title state through. Returns (fragments, state)."""
    out: list[str] = []
    for line in lines:
        fixed, state = repair_line(line, state)
        out.append(fixed)
    return out, state


def repair_markdown(text: str | None) -> str:
    """Return repaired Markdown for pasted report text; '' for empty or None input."""
    if not text:
        return ""
    lines = text.split("\n")
    fragments, state = repair_lines(lines)
    logger.debug("Repaired %d line(s); title found: %s", len(lines), state.title_found)
    return "\n".join(fragments)
