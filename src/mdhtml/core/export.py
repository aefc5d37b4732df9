"""Document sink: output path layout and HTML file writing"""

from pathlib import Path
from typing import Optional


OUTPUT_ENCODING = 'utf-8'


def output_path_for(
    source: Path,
    root: Path,
    output_dir: Optional[Path] = None,
    suffix: str = '.html',
    ) -> Path:
    """Return where the HTML for source goes.

    With no output_dir the file lands next to its source. Otherwise the path
    mirrors the source location relative to root:
      output_dir / source.relative_to(root).with_suffix(suffix)
    A root that is the source file itself maps to output_dir / source.name.
    """
    if output_dir is None:
        return source.with_suffix(suffix)
    relative = Path(source.name) if root == source else source.relative_to(root)
    return output_dir / relative.with_suffix(suffix)


def write_html(path: Path, html: str) -> Path:
    """Write the complete document to path as UTF-8, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding=OUTPUT_ENCODING)
    return path
