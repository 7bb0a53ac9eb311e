from pathlib import Path
from typing import Callable, Iterable, Tuple

from ..models import Record
from .filesystem import file_size as stat_file_size
from .timestamps import parse_captured_at


def build_catalog(paths: Iterable[Path],
                  file_size: Callable[[Path], int] = stat_file_size) -> Tuple[Record, ...]:
    """
    Turns capture file paths into Records.

    Fail-fast: the first unreadable file (FileReadError) or malformed stem (ParseError)
    aborts the whole build, so callers never see a partial catalog.
    """
    records = []
    seen = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path in seen:
            continue
        seen.add(path)

        size_bytes = file_size(path)
        stem = path.stem
        records.append(Record(
            path=path,
            stem=stem,
            captured_at=parse_captured_at(stem),
            size_bytes=size_bytes,
        ))
    return tuple(records)
