"""Locate source files on disk."""
from pathlib import Path
from typing import List, Union

from ..utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def find_files(path: PathLike, recursive: bool = False, extension: str = ".svg") -> List[Path]:
    """
    List files ending with ``extension`` inside ``path``.

    Args:
        path: Directory to search.
        recursive: Also search every subdirectory.
        extension: File name suffix to match, e.g. ".svg".

    Returns:
        Sorted list of matching file paths (possibly empty).

    Raises:
        FileNotFoundError: If ``path`` is not an existing directory.
    """
    root = Path(path).expanduser().resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Directory not found: {root}")

    pattern = f"*{extension}"
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)
    files = sorted(p for p in candidates if p.is_file())

    logger.debug(f"Found {len(files)} '{extension}' files in {root} (recursive={recursive})")
    return files


def get_file_name(path: PathLike, extension: str = "") -> str:
    """Base name of ``path`` with ``extension`` removed when present."""
    name = Path(path).name
    if extension and name.endswith(extension) and name != extension:
        return name[: -len(extension)]
    return name


class FileFinder:
    """Configured file discovery."""

    def __init__(self, config: dict):
        discovery = config.get("discovery", {})
        self.extension = discovery.get("extension", ".svg")
        self.recursive = discovery.get("recursive", False)

    def find(self, path: PathLike) -> List[Path]:
        return find_files(path, self.recursive, self.extension)

    def name_of(self, path: PathLike) -> str:
        return get_file_name(path, self.extension)
