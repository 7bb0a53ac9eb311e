import csv
from pathlib import Path
from datetime import timedelta
from ix_match.models import ClassificationReport, CorrelatedPair
from ix_match.reporting import ReportWriter


def sample_report():
    return ClassificationReport(
        rgb_total=3,
        nir_total=2,
        matched_pairs=(
            CorrelatedPair(Path("/rgb/210101_120000000.iiq"), Path("/nir/210101_120000100.iiq"),
                           timedelta(milliseconds=100)),
        ),
        unmatched_rgb=(Path("/rgb/210101_120001000.iiq"),),
        unmatched_nir=(Path("/nir/210101_120005000.iiq"),),
        empty_rgb=(Path("/rgb/210101_130000000.iiq"),),
    )


def test_report_counts():
    report = sample_report()

    assert report.matched_count == 1
    assert report.matched_rgb == (Path("/rgb/210101_120000000.iiq"),)
    assert report.matched_nir == (Path("/nir/210101_120000100.iiq"),)
    assert report.empty_rgb_count == 1
    assert report.empty_nir_count == 0


def test_summary_lines():
    lines = ReportWriter(sample_report()).summary_lines()

    assert "RGB files:     3" in lines
    assert "Matched pairs: 1" in lines
    assert "Unmatched:     1 RGB / 1 NIR" in lines
    assert "Empty:         1 RGB / 0 NIR" in lines


def test_write_csv(tmp_path):
    output_csv = tmp_path / "report.csv"

    ReportWriter(sample_report()).write_csv(output_csv)

    with open(output_csv, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 5
    matched = [r for r in rows if r["Status"] == "matched"]
    assert {r["Stream"] for r in matched} == {"RGB", "NIR"}
    assert all(r["Delta (ms)"] == "100" for r in matched)

    rgb_row = next(r for r in matched if r["Stream"] == "RGB")
    assert Path(rgb_row["Partner"]) == Path("/nir/210101_120000100.iiq")

    statuses = [(r["Stream"], r["Status"]) for r in rows if r["Status"] != "matched"]
    assert statuses == [("RGB", "unmatched"), ("NIR", "unmatched"), ("RGB", "empty")]


def test_report_keeps_explicit_empty_counts():
    report = ClassificationReport(rgb_total=2, nir_total=1, empty_rgb_count=1, empty_nir_count=0)

    assert report.empty_rgb == ()
    assert report.empty_rgb_count == 1
    assert report.empty_nir_count == 0
