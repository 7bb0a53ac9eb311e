from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Iterable, Tuple

from ..models import CorrelatedPair, Record


@dataclass(frozen=True)
class Classification:
    matched_pairs: Tuple[CorrelatedPair, ...]
    unmatched_rgb: Tuple[Path, ...]
    unmatched_nir: Tuple[Path, ...]


class ThresholdClassifier:
    """
    Accepts candidate pairs whose time delta is within the threshold (inclusive).

    A record is unmatched when its path is not on its side of any accepted pair,
    which includes records that never got a candidate because the other stream
    was empty.
    """

    def __init__(self, threshold: timedelta):
        if threshold < timedelta(0):
            raise ValueError(f"Match threshold must be non-negative, got {threshold}")
        self.threshold = threshold

    def classify(self,
                 candidates: Iterable[CorrelatedPair],
                 rgb: Iterable[Record],
                 nir: Iterable[Record]) -> Classification:
        matched = tuple(p for p in candidates if p.abs_time_delta <= self.threshold)

        matched_rgb = {p.rgb_path for p in matched}
        matched_nir = {p.nir_path for p in matched}

        return Classification(
            matched_pairs=matched,
            unmatched_rgb=_unmatched_paths(rgb, matched_rgb),
            unmatched_nir=_unmatched_paths(nir, matched_nir),
        )


def _unmatched_paths(records: Iterable[Record], matched: set) -> Tuple[Path, ...]:
    ordered = sorted(records, key=lambda r: (r.captured_at, str(r.path)))
    unmatched = []
    seen = set()
    for r in ordered:
        if r.path in matched or r.path in seen:
            continue
        seen.add(r.path)
        unmatched.append(r.path)
    return tuple(unmatched)
