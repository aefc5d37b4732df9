"""Pipeline step functions: read, convert, and write one document or a tree"""

import logging
from pathlib import Path
from typing import Optional

from mdhtml.core.assemble import assemble_document
from mdhtml.core.convert import convert_lines
from mdhtml.core.export import output_path_for, write_html
from mdhtml.core.source import discover_files, load_lines


logger = logging.getLogger(__name__)


def render_file(source: Path, encoding: str = 'utf-8') -> str:
    """Return the complete HTML document for a markdown file."""
    return assemble_document(convert_lines(load_lines(source, encoding)))


def convert_file(source: Path, dest: Path, encoding: str = 'utf-8') -> Path:
    """Convert source, read with encoding, and write the result to dest as UTF-8.

    The HTML is fully built before dest is opened, so a failed conversion
    leaves no partial output behind.
    """
    html = render_file(source, encoding)
    return write_html(dest, html)


def run_convert(
    path: str,
    output_dir: Optional[Path] = None,
    suffix: str = '.html',
    encoding: str = 'utf-8',
    ) -> list[tuple[Path, Path]]:
    """Convert a file or every markdown file below a directory.

    Returns (source, dest) pairs. Stops at the first failing file.
    """
    root = Path(path)
    results = []
    for p in discover_files(root):
        dest = output_path_for(p, root, output_dir, suffix)
        try:
            convert_file(p, dest, encoding)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        logger.info("Converted %s -> %s", p, dest)
        results.append((p, dest))
    return results
