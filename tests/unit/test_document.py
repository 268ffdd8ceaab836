"""Unit tests for the export Document model."""

from pathlib import Path

import pytest

from texprofiles.contexts.export.document import Document


@pytest.mark.unit
def test_profile_name_reads_latex_class():
    document = Document(text="#+TITLE: Notes\n#+LATEX_CLASS: report\n\nBody\n")
    assert document.profile_name == "report"


@pytest.mark.unit
def test_profile_name_first_occurrence_wins():
    document = Document(text="#+LATEX_CLASS: book\n#+LATEX_CLASS: report\n")
    assert document.profile_name == "book"


@pytest.mark.unit
def test_profile_name_absent():
    document = Document(text="#+TITLE: Notes\nBody\n")
    assert document.profile_name is None


@pytest.mark.unit
def test_keyword_is_case_insensitive_and_stripped():
    document = Document(text="#+latex_class:   report   \n")
    assert document.keyword("LATEX_CLASS") == "report"


@pytest.mark.unit
def test_keyword_does_not_match_longer_names():
    document = Document(text="#+LATEX_CLASS_OPTIONS: [11pt]\n")
    assert document.profile_name is None


@pytest.mark.unit
def test_directory_defaults_to_cwd_for_unsaved_document():
    assert Document(text="").directory == Path.cwd()


@pytest.mark.unit
def test_from_file_and_save(tmp_path):
    source = tmp_path / "notes.org"
    source.write_text("#+LATEX_CLASS: book\n", encoding="utf-8")

    document = Document.from_file(source)
    assert document.path == source
    assert document.directory == tmp_path.resolve()
    assert document.name == "notes.org"

    document.text = "changed\n"
    document.save()
    assert source.read_text(encoding="utf-8") == "changed\n"


@pytest.mark.unit
def test_save_without_path_raises():
    with pytest.raises(ValueError, match="no path"):
        Document(text="x").save()


@pytest.mark.unit
def test_profile_name_with_crlf_line_endings():
    document = Document(text="#+LATEX_CLASS: report\r\nBody\r\n")
    assert document.profile_name == "report"
