"""Single-line classification driving the repair pass"""

from mdrepair.core.models import LineKind, TitleState
from mdrepair.core.patterns import NUMBERED_HEADING_RE
from mdrepair.core.tables import is_table_fragment


def classify_line(line: str, state: TitleState) -> LineKind:
    """Tag a trimmed line; precedence is title > heading > table > plain."""
    if not state.title_found and line:
        return LineKind.title
    if NUMBERED_HEADING_RE.match(line):
        return LineKind.heading
    if is_table_fragment(line):
        return LineKind.table
    return LineKind.plain
