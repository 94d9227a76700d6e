"""Global configuration constants for the project.

Defines paths, filenames and rendering options used across the content
loader, the website generator and the command-line entry point.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Content sources
CONTENT_DIR: Path = PROJECT_ROOT / "data" / "videos"
FRONT_MATTER_DELIMITER: str = "---"
SKIPPED_EXTENSIONS: frozenset[str] = frozenset({"swp"})
SKELETON_FILENAME: str = "skeleton.md"

# Markdown conversion (GitHub-flavoured subset of markdown2 extras)
MARKDOWN_EXTRAS: list[str] = [
    "fenced-code-blocks",
    "tables",
    "strike",
    "task_list",
    "cuddled-lists",
    "footnotes",
    "link-patterns",
]

# Templates
TEMPLATE_DIR: Path = PROJECT_ROOT / "templates"
INDEX_TEMPLATE_NAME: str = "index.html"
FRAGMENT_NAMES: dict[str, str] = {
    "header": "incl/header.html",
    "navigation": "incl/navigation.html",
    "footer": "incl/footer.html",
}

# Website generation defaults
PAGE_TITLE: str = "Rust Videos"
OUTPUT_DIR: Path = PROJECT_ROOT / "_site"
OUTPUT_HTML_FILENAME: str = "index.html"

# CLI defaults and logging
LOG_FILENAME_GENERATE_SITE: str = "generate_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
