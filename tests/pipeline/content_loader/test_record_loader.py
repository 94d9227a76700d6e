"""Tests for loading a directory of content files."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.exceptions import (
    IoFailureError,
    MalformedDocumentError,
    RenderFailureError,
    SchemaViolationError,
)
from src.pipeline.content_loader import loader
from src.pipeline.content_loader.loader import is_content_file, load_record, load_records


def test_load_records_keys_identifiers_and_bodies(write_video, content_dir):
    path = write_video("alpha-talk.md", title="Alpha Talk", body="Hello <b>x</b>")
    records = load_records(content_dir)
    assert list(records) == [str(path)]
    record = records[str(path)]
    assert record.identifier == "alpha-talk"
    assert record.title == "Alpha Talk"
    assert "<b>x</b>" in record.body


def test_load_records_skips_swap_files_and_skeleton(write_video, content_dir):
    write_video("a.md", title="A")
    write_video("b.md", title="B")
    write_video("skeleton.md", text="not a valid document")
    write_video(".a.md.swp", text="binary junk")
    write_video("c.swp", text="binary junk")
    records = load_records(content_dir)
    assert len(records) == 5 - 3
    assert {r.identifier for r in records.values()} == {"a", "b"}


def test_load_records_skeleton_only_is_empty(write_video, content_dir):
    write_video("skeleton.md", text="documentation only")
    assert load_records(content_dir) == {}


def test_load_records_aborts_on_malformed_file(write_video, content_dir):
    write_video("good.md", title="Good")
    write_video("bad.md", text="---\ntitle: only one delimiter\n")
    with pytest.raises(MalformedDocumentError) as excinfo:
        load_records(content_dir)
    assert excinfo.value.path == str(content_dir / "bad.md")


def test_load_records_aborts_on_schema_violation(write_video, content_dir, make_doc):
    write_video("bad.md", text=make_doc().replace("quality: Good", "quality: Great"))
    with pytest.raises(SchemaViolationError) as excinfo:
        load_records(content_dir)
    assert excinfo.value.path == str(content_dir / "bad.md")


def test_load_records_aborts_on_render_failure(write_video, content_dir, monkeypatch):
    write_video("a.md")

    def bad(text, source=None):
        raise RenderFailureError("broken", context={"path": str(source)})

    monkeypatch.setattr(loader, "render_markdown", bad)
    with pytest.raises(RenderFailureError):
        load_records(content_dir)


def test_load_records_unreadable_file(content_dir):
    (content_dir / "latin1.md").write_bytes(b"---\ntitle: caf\xe9\n---\n")
    with pytest.raises(IoFailureError) as excinfo:
        load_records(content_dir)
    assert excinfo.value.path == str(content_dir / "latin1.md")


def test_load_records_subdirectory_is_fatal(content_dir):
    (content_dir / "drafts").mkdir()
    with pytest.raises(IoFailureError):
        load_records(content_dir)


def test_load_records_missing_directory(tmp_path: Path):
    with pytest.raises(IoFailureError) as excinfo:
        load_records(tmp_path / "nope")
    assert "nope" in excinfo.value.message


def test_is_content_file():
    assert is_content_file(Path("talk.md"))
    assert is_content_file(Path("notes"))
    assert not is_content_file(Path("talk.md.swp"))
    assert not is_content_file(Path("skeleton.md"))
    assert is_content_file(Path("skeleton.md.bak"))


def test_loaded_record_is_immutable(write_video):
    record = load_record(write_video("a.md"))
    with pytest.raises(ValidationError):
        record.title = "Changed"  # type: ignore[misc]
