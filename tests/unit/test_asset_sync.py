"""Unit tests for the asset synchronizer."""

import os
import stat

import pytest

from texprofiles.contexts.export.asset_sync import (
    copy_missing_assets,
    list_assets,
    sync_assets,
)
from texprofiles.contexts.export.document import Document


@pytest.fixture
def template_dir(tmp_path):
    path = tmp_path / "templates"
    path.mkdir()
    (path / "a.sty").write_bytes(b"\\ProvidesPackage{a}\n")
    (path / "b.cls").write_bytes(b"\\ProvidesClass{b}\n")
    (path / "notes.org").write_text("not an asset\n")
    (path / "nested.sty").mkdir()
    return path


@pytest.fixture
def target_dir(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.mark.unit
def test_list_assets_filters_by_extension(template_dir):
    assert [path.name for path in list_assets(template_dir)] == ["a.sty", "b.cls"]


@pytest.mark.unit
def test_copies_missing_assets_byte_identical(template_dir, target_dir):
    """Test every .sty/.cls file absent at the target is copied verbatim."""
    result = copy_missing_assets(template_dir, target_dir)

    assert sorted(path.name for path in result.copied) == ["a.sty", "b.cls"]
    assert result.skipped == []
    for name in ("a.sty", "b.cls"):
        assert (target_dir / name).read_bytes() == (template_dir / name).read_bytes()
    assert not (target_dir / "notes.org").exists()


@pytest.mark.unit
def test_never_overwrites_existing_file(template_dir, target_dir):
    """Test a pre-existing destination keeps its own content."""
    (template_dir / "a.sty").write_text("Y")
    (target_dir / "a.sty").write_text("X")

    result = copy_missing_assets(template_dir, target_dir)

    assert (target_dir / "a.sty").read_text() == "X"
    assert [path.name for path in result.skipped] == ["a.sty"]
    assert [path.name for path in result.copied] == ["b.cls"]


@pytest.mark.unit
@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_copy_preserves_permission_bits(template_dir, target_dir):
    (template_dir / "b.cls").chmod(0o640)

    copy_missing_assets(template_dir, target_dir)

    assert stat.S_IMODE((target_dir / "b.cls").stat().st_mode) == 0o640


@pytest.mark.unit
def test_missing_template_dir_is_noop(tmp_path, target_dir):
    result = copy_missing_assets(tmp_path / "absent", target_dir)

    assert result.template_dir_found is False
    assert result.copied == []
    assert list(target_dir.iterdir()) == []


@pytest.mark.unit
def test_sync_assets_targets_document_directory(template_dir, target_dir):
    document = Document.from_file(_write(target_dir / "doc.org", "plain\n"))

    assert sync_assets(document, "latex", template_dir=template_dir) is None
    assert (target_dir / "a.sty").exists()
    assert (target_dir / "b.cls").exists()


@pytest.mark.unit
def test_sync_assets_runs_without_profile(template_dir, target_dir):
    """Test assets are copied even when the document declares no profile."""
    document = Document.from_file(_write(target_dir / "doc.org", "#+LATEX_CLASS: article\n"))

    sync_assets(document, "html", template_dir=template_dir)

    assert (target_dir / "a.sty").exists()


@pytest.mark.unit
def test_sync_assets_unsaved_document_uses_cwd(template_dir, target_dir, monkeypatch):
    monkeypatch.chdir(target_dir)

    sync_assets(Document(text="x"), "latex", template_dir=template_dir)

    assert (target_dir / "b.cls").exists()


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path
