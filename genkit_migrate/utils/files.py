"""
File helpers shared by the analyzer and the generator.
"""

import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_dir(path: PathLike) -> Path:
    """Create a directory (and parents) if missing and return it."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_file_with_dir(path: PathLike, content: str) -> None:
    """Write text content, creating parent directories as needed."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_text(content, encoding="utf-8")


def copy_file(source: PathLike, destination: PathLike) -> None:
    """Copy a file verbatim, creating parent directories as needed."""
    destination = Path(destination)
    ensure_dir(destination.parent)
    shutil.copy2(source, destination)


def relative_posix(path: PathLike, root: PathLike) -> str:
    """
    Return ``path`` relative to ``root`` using forward slashes.
    
    Paths outside ``root`` are returned unchanged.
    """
    try:
        return Path(path).relative_to(root).as_posix()
    except ValueError:
        return str(path)


def module_name_for(relative_path: str) -> str:
    """
    Derive the dotted module name of a Python file from its relative path.
    
    ``app/flows.py`` becomes ``app.flows`` and ``app/__init__.py``
    becomes ``app``.
    """
    parts = list(Path(relative_path).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)
