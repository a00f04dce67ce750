"""Export: repaired Markdown to .md files or print-ready HTML"""

import html
import logging
from pathlib import Path

from markdown_it import MarkdownIt

from mdrepair.core.utils.slug import filename_stem

logger = logging.getLogger(__name__)


EXPORT_FORMATS = ('md', 'html')

PRINT_CSS = """\
body { font-family: sans-serif; line-height: 1.5; max-width: 50em; margin: 2em auto; }
table { border-collapse: collapse; margin: 1em 0; }
th, td { border: 1px solid #999; padding: 0.25em 0.5em; text-align: left; }
@media print { body { margin: 0; max-width: none; } }
"""


def document_title(markdown: str) -> str | None:
    """Return the text of the first top-level `# ` heading, else None."""
    for line in markdown.split("\n"):
        if line.startswith("# "):
            return line[2:].strip() or None
    return None


def suggest_filename(title: str | None, ext: str = 'md', default_stem: str = 'report_export') -> str:
    """Filesystem-safe `<stem>.<ext>` built from the report title."""
    stem = filename_stem(title) if title else default_stem
    return f"{stem}.{ext}"


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance; an unknown preset means no renderer is available."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False})
    except KeyError as e:
        raise RuntimeError(f"Markdown renderer unavailable: unknown preset '{preset}'") from e


def render_html(markdown: str, preset: str = 'gfm-like') -> str:
    """Render Markdown to an HTML fragment."""
    return _make_parser(preset).render(markdown)


def build_html(markdown: str, preset: str = 'gfm-like', title: str | None = None) -> str:
    """Wrap rendered Markdown in a standalone, print-ready HTML document."""
    body = render_html(markdown, preset)
    head_title = html.escape(title or document_title(markdown) or "Report")
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{head_title}</title>\n"
        f"<style>\n{PRINT_CSS}</style>\n"
        "</head>\n<body>\n"
        f"{body}"
        "</body>\n</html>\n"
    )


def write_export(
    markdown: str,
    output_dir: Path,
    fmt: str = 'md',
    name: str | None = None,
    default_stem: str = 'report_export',
    preset: str = 'gfm-like',
    encoding: str = 'utf-8',
    ) -> Path:
    """Write repaired Markdown as `.md` or `.html` under output_dir. Returns the path.

    The filename comes from `name` when given, else from the document title.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format '{fmt}', use one of: {', '.join(EXPORT_FORMATS)}")

    content = build_html(markdown, preset) if fmt == 'html' else markdown
    filename = suggest_filename(name or document_title(markdown), fmt, default_stem)
    dest = output_dir / filename
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        dest.write_text(content, encoding=encoding)
    except OSError as e:
        raise RuntimeError(f"Failed to write {dest}: {e}") from e
    logger.info("Wrote %s", dest)
    return dest
