import shutil
import logging
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from .. import config
from ..exceptions import FileOperationError
from ..models import ClassificationReport


class FileMover:
    def apply(self, report: ClassificationReport, rgb_dir: Path, nir_dir: Path, dry_run: bool = False):
        """
        Relocates files according to a classification report.

        - matched   -> camera directory root (flattens nested captures)
        - unmatched -> <camera dir>/unmatched
        - empty     -> <camera dir>/empty
        """
        rgb_dir = Path(rgb_dir)
        nir_dir = Path(nir_dir)

        plan = [
            (report.matched_rgb, rgb_dir),
            (report.matched_nir, nir_dir),
            (report.unmatched_rgb, rgb_dir / config.UNMATCHED_DIR_NAME),
            (report.unmatched_nir, nir_dir / config.UNMATCHED_DIR_NAME),
            (report.empty_rgb, rgb_dir / config.EMPTY_DIR_NAME),
            (report.empty_nir, nir_dir / config.EMPTY_DIR_NAME),
        ]
        for paths, dest_dir in plan:
            self.move_files(paths, dest_dir, dry_run=dry_run)

    def move_files(self, paths: Iterable[Path], dest_dir: Path, dry_run: bool = False) -> List[Path]:
        """
        Moves each path into dest_dir, keeping its file name.
        dest_dir is only created when at least one file has to go there.
        Returns the destination paths.
        """
        # A path can be listed twice when it matched from both directions
        to_process = list(dict.fromkeys(Path(p) for p in paths))
        to_process = [p for p in to_process if p.parent != dest_dir]

        if not to_process:
            return []

        logging.info(f"Moving {len(to_process)} files to {dest_dir} (DryRun={dry_run})")
        if not dry_run:
            dest_dir.mkdir(parents=True, exist_ok=True)

        moved = []
        for src in tqdm(to_process, desc=dest_dir.name, disable=dry_run):
            dest = dest_dir / src.name

            if dry_run:
                logging.info(f"[DRY RUN] Move {src} -> {dest}")
                moved.append(dest)
                continue

            logging.debug(f"{src} -> {dest}")
            try:
                shutil.move(str(src), str(dest))
            except OSError as e:
                raise FileOperationError(f"Failed to move {src} -> {dest}: {e}") from e
            moved.append(dest)

        return moved
