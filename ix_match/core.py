import logging
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from .exceptions import InputError
from .models import ClassificationReport
from .scanning.catalog import build_catalog
from .scanning.filesystem import file_size as stat_file_size, find_files
from .matching.filters import split_empty
from .matching.correlator import NearestNeighborCorrelator
from .matching.classifier import ThresholdClassifier
from .organization.mover import FileMover
from . import config

# Receives (label, value) for intermediate tables; e.g. a debug logger in verbose mode
Diagnostics = Callable[[str, Any], None]


def classify(rgb_paths: Iterable[Path],
             nir_paths: Iterable[Path],
             threshold: timedelta,
             keep_empty: bool = False,
             diagnostics: Optional[Diagnostics] = None,
             file_size: Callable[[Path], int] = stat_file_size) -> ClassificationReport:
    """
    Classifies every RGB and NIR capture as matched, unmatched or empty.

    Pure apart from the size reads done while building the catalogs. Any
    ParseError / FileReadError propagates before a report exists.

    Args:
        threshold: Largest accepted |rgb - nir| time difference (inclusive).
        keep_empty: When False, zero-byte files are set aside and never correlated.
    """
    rgb_all = build_catalog(rgb_paths, file_size=file_size)
    nir_all = build_catalog(nir_paths, file_size=file_size)

    rgb, rgb_empty = split_empty(rgb_all, keep_empty)
    nir, nir_empty = split_empty(nir_all, keep_empty)

    candidates = NearestNeighborCorrelator().correlate(rgb, nir)
    result = ThresholdClassifier(threshold).classify(candidates, rgb, nir)

    if diagnostics:
        diagnostics("candidates", candidates)
        diagnostics("matched", result.matched_pairs)
        diagnostics("unmatched_rgb", result.unmatched_rgb)
        diagnostics("unmatched_nir", result.unmatched_nir)

    return ClassificationReport(
        rgb_total=len(rgb_all),
        nir_total=len(nir_all),
        matched_pairs=result.matched_pairs,
        unmatched_rgb=result.unmatched_rgb,
        unmatched_nir=result.unmatched_nir,
        empty_rgb=tuple(r.path for r in rgb_empty),
        empty_nir=tuple(r.path for r in nir_empty),
        empty_rgb_count=sum(1 for r in rgb_all if r.size_bytes <= 0),
        empty_nir_count=sum(1 for r in nir_all if r.size_bytes <= 0),
    )


class IxMatchApp:
    def __init__(self, mover: Optional[FileMover] = None):
        self.mover = mover or FileMover()

    def process_images(self,
                       rgb_dir: Path,
                       nir_dir: Path,
                       threshold: timedelta,
                       keep_empty: bool = False,
                       dry_run: bool = False,
                       diagnostics: Optional[Diagnostics] = None) -> ClassificationReport:
        """
        Full pipeline for one flight.
        1. Validate camera directories
        2. Find IIQ files
        3. Classify
        4. Relocate (skipped on dry run)
        """
        rgb_dir = Path(rgb_dir)
        nir_dir = Path(nir_dir)

        # --- Step 1: Validation ---
        missing = [f"{name} ({d})" for name, d in (("RGB", rgb_dir), ("NIR", nir_dir)) if not d.is_dir()]
        if missing:
            raise InputError(f"Source directory does not exist: {', '.join(missing)}")

        # --- Step 2: Discovery ---
        rgb_files = find_files(rgb_dir, config.IIQ_EXT)
        nir_files = find_files(nir_dir, config.IIQ_EXT)
        logging.info(f"Found {len(rgb_files)} RGB and {len(nir_files)} NIR files")

        # --- Step 3: Classification ---
        report = classify(rgb_files, nir_files, threshold,
                          keep_empty=keep_empty, diagnostics=diagnostics)

        # --- Step 4: Relocation ---
        self.mover.apply(report, rgb_dir, nir_dir, dry_run=dry_run)

        return report
