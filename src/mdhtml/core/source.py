"""Line source: markdown file discovery and blank-line filtering"""

from pathlib import Path


MD_EXTENSIONS = {'.md', '.markdown'}


def source_lines(text: str) -> list[str]:
    """Return the non-blank lines of text, order and content unchanged."""
    return [line for line in text.splitlines() if line.strip()]


def load_lines(path: Path, encoding: str = 'utf-8') -> list[str]:
    """Read path and return its non-blank lines."""
    return source_lines(path.read_text(encoding=encoding))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)
