from bisect import bisect_left
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models import CorrelatedPair, Record


class NearestNeighborCorrelator:
    """
    Pairs every record of each stream with its nearest-in-time record of the other.

    Two one-directional nearest searches (RGB -> NIR, NIR -> RGB) are unioned and
    deduplicated on (rgb_path, nir_path). A single direction would collapse several
    records of the denser stream onto one partner and leave the rest unrepresented;
    with both directions every record appears in at least one candidate pair as long
    as the opposite stream is non-empty.

    Each lookup is a binary search for the insertion point followed by a comparison
    of the two neighbours, so the whole pass is O((R + N) log(R + N)).
    """

    def correlate(self, rgb: Iterable[Record], nir: Iterable[Record]) -> Tuple[CorrelatedPair, ...]:
        rgb_sorted = _sort_by_time(rgb)
        nir_sorted = _sort_by_time(nir)

        pairs: List[CorrelatedPair] = []
        # Forward pass
        nir_times = [r.captured_at for r in nir_sorted]
        for r in rgb_sorted:
            idx = nearest_index(nir_times, r.captured_at)
            if idx is not None:
                n = nir_sorted[idx]
                pairs.append(CorrelatedPair(r.path, n.path, abs(r.captured_at - n.captured_at)))

        # Backward pass
        rgb_times = [r.captured_at for r in rgb_sorted]
        for n in nir_sorted:
            idx = nearest_index(rgb_times, n.captured_at)
            if idx is not None:
                r = rgb_sorted[idx]
                pairs.append(CorrelatedPair(r.path, n.path, abs(r.captured_at - n.captured_at)))

        return _dedupe(pairs)


def nearest_index(times: Sequence[datetime], target: datetime) -> Optional[int]:
    """
    Index of the entry in sorted `times` closest to target.
    Equal distances resolve to the earlier entry. None if times is empty.
    """
    if not times:
        return None

    i = bisect_left(times, target)
    if i == 0:
        return 0
    if i == len(times):
        return i - 1

    # times[i - 1] < target <= times[i]
    if target - times[i - 1] <= times[i] - target:
        return i - 1
    return i


def _sort_by_time(records: Iterable[Record]) -> List[Record]:
    # Path as secondary key keeps equal timestamps in a reproducible order
    return sorted(records, key=lambda r: (r.captured_at, str(r.path)))


def _dedupe(pairs: Iterable[CorrelatedPair]) -> Tuple[CorrelatedPair, ...]:
    seen = set()
    unique = []
    for pair in pairs:
        key = (pair.rgb_path, pair.nir_path)
        if key in seen:
            continue
        seen.add(key)
        unique.append(pair)
    return tuple(unique)
