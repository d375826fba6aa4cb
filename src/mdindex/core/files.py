"""Source file discovery and reading"""

from pathlib import Path

from mdindex.core.models import SourceFile


MD_EXTENSIONS = {'.md', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def read_source(path: Path, name: str | None = None) -> SourceFile:
    """Read a file as UTF-8 into a SourceFile named name (default: the file name)."""
    return SourceFile(name=name or path.name, text=path.read_text(encoding='utf-8'))
