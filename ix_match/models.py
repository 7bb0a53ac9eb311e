from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Tuple

@dataclass(frozen=True)
class Record:
    """
    A single capture file found in one camera stream.
    """
    path: Path
    stem: str
    captured_at: datetime   # naive, millisecond precision
    size_bytes: int


@dataclass(frozen=True)
class CorrelatedPair:
    """Nearest-in-time candidate pairing. Only the correlator builds these."""
    rgb_path: Path
    nir_path: Path
    abs_time_delta: timedelta


@dataclass(frozen=True)
class ClassificationReport:
    """
    Outcome of one classification run.

    matched_rgb and matched_nir are parallel: index i of each is one accepted pair.
    A path may repeat there when it was accepted from both directional passes.
    """
    rgb_total: int
    nir_total: int
    matched_pairs: Tuple[CorrelatedPair, ...] = ()
    unmatched_rgb: Tuple[Path, ...] = ()
    unmatched_nir: Tuple[Path, ...] = ()
    empty_rgb: Tuple[Path, ...] = ()
    empty_nir: Tuple[Path, ...] = ()
    # Zero-byte files seen in each stream; still counted when keep_empty left them in matching
    empty_rgb_count: Optional[int] = None
    empty_nir_count: Optional[int] = None
    matched_rgb: Tuple[Path, ...] = field(init=False)
    matched_nir: Tuple[Path, ...] = field(init=False)

    def __post_init__(self):
        # Frozen dataclass: derived fields have to go through object.__setattr__
        object.__setattr__(self, 'matched_rgb', tuple(p.rgb_path for p in self.matched_pairs))
        object.__setattr__(self, 'matched_nir', tuple(p.nir_path for p in self.matched_pairs))
        if self.empty_rgb_count is None:
            object.__setattr__(self, 'empty_rgb_count', len(self.empty_rgb))
        if self.empty_nir_count is None:
            object.__setattr__(self, 'empty_nir_count', len(self.empty_nir))

    @property
    def matched_count(self) -> int:
        return len(self.matched_pairs)

