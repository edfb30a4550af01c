"""Tests for scratch directory initialization."""

from transcription_relay.infrastructure import ensure_scratch_dir


def test_creates_nested_directory(tmp_path):
    target = tmp_path / "a" / "b" / "uploads"

    result = ensure_scratch_dir(target)

    assert result == target.resolve()
    assert target.is_dir()


def test_is_idempotent(tmp_path):
    target = tmp_path / "uploads"
    ensure_scratch_dir(target)
    (target / "keep.webm").write_bytes(b"x")

    ensure_scratch_dir(target)

    assert (target / "keep.webm").exists()


def test_relative_path_resolved_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = ensure_scratch_dir("uploads")

    assert result == (tmp_path / "uploads").resolve()
    assert result.is_absolute()
