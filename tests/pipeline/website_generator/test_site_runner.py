"""End-to-end tests for building the listing page."""

from pathlib import Path

import pytest

from src.config import PROJECT_ROOT
from src.exceptions import MalformedDocumentError
from src.pipeline.content_loader.front_matter import split_front_matter
from src.pipeline.content_loader.metadata import parse_metadata
from src.pipeline.website_generator.runner import build_page, run_from_config


def test_build_page_orders_by_title(write_video, content_dir, template_dir):
    write_video("zebra.md", title="Zebra Talk")
    write_video("alpha.md", title="Alpha Talk")
    html = build_page(content_dir, template_dir)
    assert html.index("Alpha Talk") < html.index("Zebra Talk")
    assert html.startswith("<header>Rust Videos</header>")


def test_build_page_skeleton_only_renders_empty_listing(write_video, content_dir, template_dir):
    write_video("skeleton.md", text="documentation only")
    html = build_page(content_dir, template_dir)
    assert "<li>" not in html
    assert html.endswith("<footer></footer>")


def test_run_from_config_writes_nothing_on_malformed_file(write_video, content_dir, template_dir, tmp_path):
    write_video("good.md", title="Good")
    write_video("bad.md", text="---\ntitle: broken\n")
    output_dir = tmp_path / "_site"
    with pytest.raises(MalformedDocumentError):
        run_from_config(content_dir, template_dir, output_dir)
    assert not output_dir.exists()


def test_run_from_config_writes_index(write_video, content_dir, template_dir, tmp_path):
    write_video("alpha.md", title="Alpha Talk")
    output_file = run_from_config(content_dir, template_dir, tmp_path / "_site")
    assert output_file == tmp_path / "_site" / "index.html"
    assert "<li>Alpha Talk</li>" in output_file.read_text(encoding="utf-8")


def test_build_page_with_shipped_templates_and_content():
    html = build_page(PROJECT_ROOT / "data" / "videos", PROJECT_ROOT / "templates")
    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert html.index("Ownership Explained") < html.index("Rust in Production")
    assert "<abbr title=\"OpenTelemetry\">OTel</abbr>" in html
    assert "</html>" in html


def test_build_page_shipped_templates_empty_listing(tmp_path: Path):
    empty = tmp_path / "videos"
    empty.mkdir()
    html = build_page(empty, PROJECT_ROOT / "templates")
    assert "No videos yet." in html


def test_shipped_skeleton_example_is_valid_front_matter():
    skeleton = PROJECT_ROOT / "data" / "videos" / "skeleton.md"
    metadata, _body = split_front_matter(skeleton.read_text(encoding="utf-8"), skeleton)
    record = parse_metadata(metadata, skeleton)
    assert record.title == "Rust in Production"
    assert record.duration == 1800
