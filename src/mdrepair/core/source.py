"""Report discovery and reading: files, directories, or stdin"""

import logging
import sys
from pathlib import Path


logger = logging.getLogger(__name__)

STDIN = "-"
REPORT_EXTENSIONS = {'.md', '.markdown', '.txt'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted report files under path, or [path] if a single file."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in REPORT_EXTENSIONS)


def read_source(source: str, encoding: str = 'utf-8-sig') -> str:
    """Read pasted report text from a file path or stdin ('-').

    Raises RuntimeError when the source cannot be read or holds no content.
    """
    label = "stdin" if source == STDIN else source
    try:
        if source == STDIN:
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {label}: {e}") from e

    if not text.strip():
        logger.warning("Empty report text from %s", label)
        raise RuntimeError(f"No report content found in {label}")
    logger.debug("Read %d character(s) from %s", len(text), label)
    return text
