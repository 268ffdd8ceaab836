"""Unit tests for export configuration loading."""

from pathlib import Path

import pytest

from texprofiles.config import (
    DEFAULT_MACRO_FILE,
    DEFAULT_SKELETON_FILES,
    DEFAULT_TEMPLATE_DIR,
    load_config,
)

ENV_VARS = [
    "TEXPROFILES_TEMPLATE_DIR",
    "TEXPROFILES_MACRO_FILE",
    "TEXPROFILES_REPORT_SKELETON",
    "TEXPROFILES_BOOK_SKELETON",
    "TEXPROFILES_CONFIG",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
def test_defaults_point_at_bundled_files():
    config = load_config()

    assert config.template_dir == DEFAULT_TEMPLATE_DIR
    assert config.macro_file == DEFAULT_MACRO_FILE
    assert dict(config.skeleton_files) == DEFAULT_SKELETON_FILES


@pytest.mark.unit
def test_bundled_files_exist():
    assert (DEFAULT_TEMPLATE_DIR / "tpreport.cls").exists()
    assert (DEFAULT_TEMPLATE_DIR / "tpbook.cls").exists()
    assert DEFAULT_MACRO_FILE.exists()
    for path in DEFAULT_SKELETON_FILES.values():
        assert path.exists()


@pytest.mark.unit
def test_environment_overrides_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("TEXPROFILES_TEMPLATE_DIR", str(tmp_path / "tpl"))
    monkeypatch.setenv("TEXPROFILES_BOOK_SKELETON", str(tmp_path / "book.org"))

    config = load_config()

    assert config.template_dir == tmp_path / "tpl"
    assert config.skeleton_files["book"] == tmp_path / "book.org"
    assert config.skeleton_files["report"] == DEFAULT_SKELETON_FILES["report"]
    assert config.macro_file == DEFAULT_MACRO_FILE


@pytest.mark.unit
def test_yaml_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TEXPROFILES_MACRO_FILE", str(tmp_path / "env-macros.org"))
    config_file = tmp_path / "texprofiles.yaml"
    config_file.write_text(
        f"macro_file: {tmp_path / 'yaml-macros.org'}\n"
        f"skeletons:\n  report: {tmp_path / 'r.org'}\n"
    )

    config = load_config(config_file)

    assert config.macro_file == tmp_path / "yaml-macros.org"
    assert config.skeleton_files["report"] == tmp_path / "r.org"


@pytest.mark.unit
def test_config_file_from_environment(monkeypatch, tmp_path):
    config_file = tmp_path / "texprofiles.yaml"
    config_file.write_text(f"template_dir: {tmp_path / 'from-yaml'}\n")
    monkeypatch.setenv("TEXPROFILES_CONFIG", str(config_file))

    assert load_config().template_dir == tmp_path / "from-yaml"


@pytest.mark.unit
def test_explicit_overrides_win(tmp_path):
    config_file = tmp_path / "texprofiles.yaml"
    config_file.write_text(f"template_dir: {tmp_path / 'from-yaml'}\n")

    config = load_config(config_file, template_dir=tmp_path / "explicit", macro_file=None)

    assert config.template_dir == tmp_path / "explicit"
    assert config.macro_file == DEFAULT_MACRO_FILE


@pytest.mark.unit
def test_unknown_yaml_keys_rejected(tmp_path):
    config_file = tmp_path / "texprofiles.yaml"
    config_file.write_text("template_directory: typo\n")

    with pytest.raises(ValueError, match="template_directory"):
        load_config(config_file)


@pytest.mark.unit
def test_missing_yaml_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")

