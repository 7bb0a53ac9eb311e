from typing import Iterable, Tuple

from ..models import Record


def split_empty(records: Iterable[Record], keep_empty: bool) -> Tuple[Tuple[Record, ...], Tuple[Record, ...]]:
    """
    Splits zero-byte captures out of a stream before correlation.

    Returns (kept, empty). With keep_empty=True nothing is split off and
    zero-byte records take part in matching like any other.
    """
    records = tuple(records)
    if keep_empty:
        return records, ()

    kept = tuple(r for r in records if r.size_bytes > 0)
    empty = tuple(r for r in records if r.size_bytes <= 0)
    return kept, empty
