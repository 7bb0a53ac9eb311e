import argparse
import logging
import sys
from datetime import timedelta
from pathlib import Path
from typing import Optional

from .core import IxMatchApp
from .exceptions import IxMatchError, InputError
from .reporting import ReportWriter
from .scanning.filesystem import find_dir_by_pattern
from . import config


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def log_diagnostics(label: str, value):
    if isinstance(value, tuple):
        logging.debug(f"{label}: {len(value)} rows")
        for row in value:
            logging.debug(f"  {row}")
    else:
        logging.debug(f"{label}: {value}")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="ix-match",
        description="Match RGB and NIR IIQ captures by timestamp and set aside unmatched and empty files.")

    p.add_argument("rgb_dir", type=Path, nargs="?", help="RGB camera directory")
    p.add_argument("nir_dir", type=Path, nargs="?", help="NIR camera directory")
    p.add_argument("--flight-dir", type=Path, default=None,
                   help=f"Locate the camera directories ({config.RGB_DIR_PATTERN}, "
                        f"{config.NIR_DIR_PATTERN}) inside this directory")

    p.add_argument("-t", "--threshold", type=int, default=config.DEFAULT_THRESHOLD_MS,
                   help="Maximum time difference in milliseconds for a match (default: %(default)s)")
    p.add_argument("--keep-empty", action="store_true", help="Match zero-byte files instead of moving them to 'empty'")
    p.add_argument("--dry-run", action="store_true", help="Classify without moving any files")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("--report-csv", type=Path, default=None, help="Write the per-file classification to a CSV")

    args = p.parse_args(argv)

    if args.threshold < 0:
        p.error("--threshold must be non-negative")
    if args.flight_dir is None and (args.rgb_dir is None or args.nir_dir is None):
        p.error("either rgb_dir and nir_dir or --flight-dir is required")
    if args.flight_dir is not None and (args.rgb_dir is not None or args.nir_dir is not None):
        p.error("--flight-dir cannot be combined with rgb_dir/nir_dir")

    return args


def resolve_camera_dirs(flight_dir: Path):
    if not flight_dir.is_dir():
        raise InputError(f"Flight directory does not exist: {flight_dir}")

    rgb_dir = find_dir_by_pattern(flight_dir, config.RGB_DIR_PATTERN)
    nir_dir = find_dir_by_pattern(flight_dir, config.NIR_DIR_PATTERN)
    if rgb_dir is None or nir_dir is None:
        raise InputError(f"Could not locate a single RGB and NIR camera directory in {flight_dir}")
    return rgb_dir, nir_dir


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    logging.info("=== ix-match Started ===")

    try:
        if args.flight_dir is not None:
            rgb_dir, nir_dir = resolve_camera_dirs(args.flight_dir.resolve())
        else:
            rgb_dir, nir_dir = args.rgb_dir.resolve(), args.nir_dir.resolve()

        logging.info(f"RGB: {rgb_dir}")
        logging.info(f"NIR: {nir_dir}")

        app = IxMatchApp()
        report = app.process_images(
            rgb_dir=rgb_dir,
            nir_dir=nir_dir,
            threshold=timedelta(milliseconds=args.threshold),
            keep_empty=args.keep_empty,
            dry_run=args.dry_run,
            diagnostics=log_diagnostics if args.verbose else None,
        )

        writer = ReportWriter(report)
        writer.log_summary()
        if args.report_csv:
            writer.write_csv(args.report_csv)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1
    except IxMatchError as e:
        logging.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
