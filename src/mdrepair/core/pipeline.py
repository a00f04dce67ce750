"""Pipeline step functions: read, repair, and export orchestration"""

from pathlib import Path

from mdrepair.core.export import write_export
from mdrepair.core.repair import repair_markdown
from mdrepair.core.source import STDIN, discover_files, read_source


def run_repair(source: str, encoding: str = 'utf-8-sig') -> str:
    """Read one report (file path or '-') and return its repaired Markdown."""
    return repair_markdown(read_source(source, encoding))


def run_export(
    path: str,
    output_dir: Path,
    fmt: str = 'md',
    name: str | None = None,
    default_stem: str = 'report_export',
    preset: str = 'gfm-like',
    encoding: str = 'utf-8',
    input_encoding: str = 'utf-8-sig',
    ) -> list[tuple[str, Path]]:
    """Repair every report under path and write it to output_dir.

    Returns (source, written_path) pairs. A single report is named by `name`
    or its title; several reports are named after their source files.
    """
    if path == STDIN:
        sources = [STDIN]
    else:
        p = Path(path)
        if not p.exists():
            raise RuntimeError(f"Failed to read {path}: no such file or directory")
        sources = [str(f) for f in discover_files(p)]

    results = []
    for src in sources:
        repaired = run_repair(src, input_encoding)
        file_name = name if len(sources) == 1 else Path(src).stem
        try:
            dest = write_export(repaired, output_dir, fmt, file_name, default_stem, preset, encoding)
        except Exception as e:
            raise RuntimeError(f"Failed to export {src}: {e}") from e
        results.append((src, dest))
    return results
