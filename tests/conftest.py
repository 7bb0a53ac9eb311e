import pytest
from pathlib import Path


@pytest.fixture
def camera_dirs(tmp_path):
    """Returns empty (rgb_dir, nir_dir) camera directories."""
    rgb_dir = tmp_path / "C01_RGB"
    nir_dir = tmp_path / "C02_NIR"
    rgb_dir.mkdir()
    nir_dir.mkdir()
    return rgb_dir, nir_dir


@pytest.fixture
def make_iiq():
    """Factory writing a capture file; pass content=b"" for a zero-byte file."""
    def _make(directory: Path, stem: str, content: bytes = b"content") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        p = directory / f"{stem}.iiq"
        p.write_bytes(content)
        return p
    return _make
