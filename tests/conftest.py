"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides fixtures that build content and template directories in
  ``tmp_path``.
"""

import os
import signal
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TEST_TIMEOUT", "10"))

VALID_METADATA = """
title: {title}
quality: Good
contributors:
  - Ferris Crab
date: 2023-05-01
duration: 1800
language: English
external_link: https://example.org/watch?v=1
"""


def _timeout_handler(signum, frame):
    """Test Timeout handler."""
    raise TimeoutError(f"Test exceeded {_TEST_TIMEOUT} seconds timeout")


def pytest_runtest_setup(item):
    """Test Pytest runtest setup."""
    if hasattr(signal, "SIGALRM"):
        signal.signal(signal.SIGALRM, _timeout_handler)
        signal.alarm(_TEST_TIMEOUT)


def pytest_runtest_teardown(item, nextitem):
    """Test Pytest runtest teardown."""
    if hasattr(signal, "SIGALRM"):
        signal.alarm(0)


def make_document(title: str = "Alpha Talk", body: str = "Hello *world*") -> str:
    """Return a valid content document with the given title and body."""
    return "---" + VALID_METADATA.format(title=title) + "---\n" + body + "\n"


@pytest.fixture
def make_doc():
    return make_document


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "videos"
    directory.mkdir()
    return directory


@pytest.fixture
def write_video(content_dir: Path):
    """Write a content file into ``content_dir`` and return its path."""

    def _write(name: str, text: str | None = None, **kwargs: str) -> Path:
        path = content_dir / name
        path.write_text(text if text is not None else make_document(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A minimal template directory with the three fragments."""
    directory = tmp_path / "templates"
    (directory / "incl").mkdir(parents=True)
    (directory / "incl" / "header.html").write_text("<header>{{ title }}</header>", encoding="utf-8")
    (directory / "incl" / "navigation.html").write_text("<nav></nav>", encoding="utf-8")
    (directory / "incl" / "footer.html").write_text("<footer></footer>", encoding="utf-8")
    (directory / "index.html").write_text(
        '{% include "incl/header.html" %}'
        '{% for video in videos %}<li>{{ video.title }}</li>{% endfor %}'
        '{% include "incl/footer.html" %}',
        encoding="utf-8",
    )
    return directory
