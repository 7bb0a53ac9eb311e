import csv
import logging
from pathlib import Path
from typing import List

from .models import ClassificationReport


class ReportWriter:
    def __init__(self, report: ClassificationReport):
        self.report = report

    def summary_lines(self) -> List[str]:
        r = self.report
        return [
            f"RGB files:     {r.rgb_total}",
            f"NIR files:     {r.nir_total}",
            f"Matched pairs: {r.matched_count}",
            f"Unmatched:     {len(r.unmatched_rgb)} RGB / {len(r.unmatched_nir)} NIR",
            f"Empty:         {r.empty_rgb_count} RGB / {r.empty_nir_count} NIR",
        ]

    def log_summary(self):
        for line in self.summary_lines():
            logging.info(line)

    def write_csv(self, output_csv: Path):
        """
        One row per file and classification.
        Matched rows carry the partner path and the time difference in milliseconds.
        """
        headers = ["Stream", "Status", "Path", "Partner", "Delta (ms)"]
        rows = 0

        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(headers)

            for pair in self.report.matched_pairs:
                delta_ms = pair.abs_time_delta.total_seconds() * 1000
                writer.writerow(["RGB", "matched", str(pair.rgb_path), str(pair.nir_path), f"{delta_ms:.0f}"])
                writer.writerow(["NIR", "matched", str(pair.nir_path), str(pair.rgb_path), f"{delta_ms:.0f}"])
                rows += 2

            for stream, status, paths in (
                ("RGB", "unmatched", self.report.unmatched_rgb),
                ("NIR", "unmatched", self.report.unmatched_nir),
                ("RGB", "empty", self.report.empty_rgb),
                ("NIR", "empty", self.report.empty_nir),
            ):
                for p in paths:
                    writer.writerow([stream, status, str(p), "", ""])
                    rows += 1

        logging.info(f"Report written to {output_csv} ({rows} rows)")
