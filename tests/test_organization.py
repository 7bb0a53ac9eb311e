import pytest
from pathlib import Path
from datetime import timedelta
from ix_match.organization.mover import FileMover
from ix_match.models import ClassificationReport, CorrelatedPair
from ix_match.exceptions import FileOperationError


def test_move_files(tmp_path):
    source_dir = tmp_path / "source"
    dest_dir = tmp_path / "dest"
    source_dir.mkdir()

    paths = [source_dir / "file1.iiq", source_dir / "file2.iiq"]
    for p in paths:
        p.write_text("content")

    moved = FileMover().move_files(paths, dest_dir)

    assert moved == [dest_dir / "file1.iiq", dest_dir / "file2.iiq"]
    for p in paths:
        assert not p.exists()
        assert (dest_dir / p.name).read_text() == "content"


def test_move_files_nothing_to_do_creates_nothing(tmp_path):
    dest_dir = tmp_path / "unmatched"
    assert FileMover().move_files([], dest_dir) == []
    assert not dest_dir.exists()


def test_move_files_skips_files_already_in_place(tmp_path):
    p = tmp_path / "file.iiq"
    p.write_text("content")

    assert FileMover().move_files([p], tmp_path) == []
    assert p.exists()


def test_move_files_moves_repeated_path_once(tmp_path):
    src = tmp_path / "nested" / "file.iiq"
    src.parent.mkdir()
    src.write_text("content")

    moved = FileMover().move_files([src, src], tmp_path)

    assert moved == [tmp_path / "file.iiq"]
    assert (tmp_path / "file.iiq").exists()


def test_move_files_dry_run(tmp_path):
    src = tmp_path / "file.iiq"
    src.write_text("content")
    dest_dir = tmp_path / "unmatched"

    moved = FileMover().move_files([src], dest_dir, dry_run=True)

    assert moved == [dest_dir / "file.iiq"]
    assert src.exists()
    assert not dest_dir.exists()


def test_move_files_missing_source(tmp_path):
    with pytest.raises(FileOperationError):
        FileMover().move_files([tmp_path / "gone.iiq"], tmp_path / "dest")


def test_apply_report(tmp_path):
    rgb_dir = tmp_path / "rgb"
    nir_dir = tmp_path / "nir"
    for d in (rgb_dir, nir_dir, rgb_dir / "sub"):
        d.mkdir()

    matched_rgb = rgb_dir / "sub" / "a.iiq"
    matched_nir = nir_dir / "b.iiq"
    stray_rgb = rgb_dir / "c.iiq"
    empty_nir = nir_dir / "d.iiq"
    for p in (matched_rgb, matched_nir, stray_rgb):
        p.write_text("content")
    empty_nir.write_bytes(b"")

    report = ClassificationReport(
        rgb_total=2,
        nir_total=2,
        matched_pairs=(CorrelatedPair(matched_rgb, matched_nir, timedelta(milliseconds=10)),),
        unmatched_rgb=(stray_rgb,),
        empty_nir=(empty_nir,),
    )

    FileMover().apply(report, rgb_dir, nir_dir)

    assert (rgb_dir / "a.iiq").exists()
    assert matched_nir.exists()
    assert (rgb_dir / "unmatched" / "c.iiq").exists()
    assert (nir_dir / "empty" / "d.iiq").exists()
    assert not (nir_dir / "unmatched").exists()
    assert not (rgb_dir / "empty").exists()
