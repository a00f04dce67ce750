"""First-line title promotion"""

import logging

from mdrepair.core.models import TitleState
from mdrepair.core.patterns import HEADING_MARKER

logger = logging.getLogger(__name__)


def promote_title(line: str, state: TitleState) -> tuple[str, TitleState]:
    """Prefix the first non-empty line with `# ` unless it is already a heading.

    Returns the (possibly unchanged) line and the next state. Empty lines and
    any line after the title leave the state as it was.
    """
    if state.title_found or not line:
        return line, state
    if not line.startswith(HEADING_MARKER):
        line = f"{HEADING_MARKER} {line}"
        logger.debug("Promoted title: %s", line)
    return line, state.found()
