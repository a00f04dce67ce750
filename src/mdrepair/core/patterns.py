"""Compiled patterns and marker constants shared by the line heuristics.

The source application pastes reports with plain-text section numbers
("2.1 Methods") and with whole tables collapsed onto a single line
("Caption | A | B | | :--- | :--- |"). These patterns recognise both.
"""

import re

# ─── Headings ────────────────────────────────────────────────────────────────

# Numbered section line, e.g. "1.0 Overview" or "3.12 Follow-up items".
# ASCII digits only; "١.٠ Intro" is not a section number.
NUMBERED_HEADING_RE = re.compile(r"^([0-9]+)\.([0-9]+)\s+(.+)$")

HEADING_MARKER = "#"

# Minor number that marks a top-level numbered section ("1.0")
TOP_LEVEL_MINOR = "0"

# Byte-order mark left at the start of pasted or saved text
BOM = "\ufeff"


# ─── Tables ──────────────────────────────────────────────────────────────────

PIPE = "|"

# Separator-row markers; either one on a piped line flags a collapsed table
SEPARATOR_MARKERS = ("---", ":--")

# Two pipes with only whitespace between them: an implicit row boundary
ROW_BREAK_RE = re.compile(r"\|\s+\|")

ROW_BREAK = "|\n|"
