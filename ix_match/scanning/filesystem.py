import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from ..exceptions import FileReadError


def find_files(root: Path, extension: str) -> List[Path]:
    """
    Recursively collects files under root whose suffix matches extension.

    The leading dot is optional and the comparison ignores case ('.iiq' == 'IIQ').
    Returns an empty list when root is not a directory. Any directory below root that
    cannot be listed raises FileReadError, so callers never work from a partial listing.
    """
    wanted = '.' + extension.lstrip('.').lower()
    root = Path(root)
    if not root.is_dir():
        return []
    return [p for p in _iter_files(root) if p.suffix.lower() == wanted]


def _iter_files(root: Path) -> Iterator[Path]:
    """Depth-first walker using os.scandir for speed."""
    stack = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            raise FileReadError(f"Failed to read directory: {current} ({e})") from e

        # Sort for stable traversal order
        entries.sort(key=lambda e: e.name.lower())

        dirs = []
        files = []
        for e in entries:
            if e.is_dir(follow_symlinks=False):
                dirs.append(Path(e.path))
            elif e.is_file(follow_symlinks=False):
                files.append(Path(e.path))

        # Push dirs to stack (reversed so we process A before Z)
        for d in reversed(dirs):
            stack.append(d)

        for f in files:
            yield f


def find_dir_by_pattern(base_dir: Path, pattern: str) -> Optional[Path]:
    """
    Returns the single directory in base_dir matching a glob pattern, e.g. 'C*_RGB'.
    None if there are no matches or more than one.
    """
    dirs = sorted(p for p in Path(base_dir).glob(pattern) if p.is_dir())

    if len(dirs) == 1:
        return dirs[0]
    if not dirs:
        logging.warning(f"No directory matching '{pattern}' found in {base_dir}")
    else:
        logging.warning(f"Multiple directories matching '{pattern}' found in {base_dir}: "
                        f"{', '.join(d.name for d in dirs)}")
    return None


def file_size(path: Path) -> int:
    try:
        return path.stat().st_size
    except OSError as e:
        raise FileReadError(f"Failed to get metadata for file: {path} ({e})") from e
