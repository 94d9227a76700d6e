"""Build the listing page from content files and templates.

This module provides the headless runner that chains the content loader,
the record ordering and the page renderer. It is intended for programmatic
invocation; the command-line wrapper lives in ``src/generate_site.py``.

Every failure propagates unchanged: the runner never writes partial output
and never substitutes fallback HTML.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from src.pipeline.website_generator.runner import run_from_config
    output_file = run_from_config()

Explicit path usage::

    from pathlib import Path
    from src.pipeline.website_generator.runner import build_page

    html = build_page(Path("data/videos"), Path("templates"))
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.config import (
    CONTENT_DIR,
    INDEX_TEMPLATE_NAME,
    OUTPUT_DIR,
    OUTPUT_HTML_FILENAME,
    PAGE_TITLE,
    TEMPLATE_DIR,
)
from src.pipeline.content_loader import load_records

from .data_aggregator import build_context
from .renderer import load_fragments, load_template, render_page, write_html_output

logger = logging.getLogger(__name__)


def build_page(
    content_dir: Path,
    template_dir: Path,
    page_title: str = PAGE_TITLE,
) -> str:
    """Load all records and render the listing page.

    Parameters
    ----------
    content_dir : pathlib.Path
        Directory of Markdown content files.
    template_dir : pathlib.Path
        Directory holding ``index.html`` and the ``incl/`` fragments.
    page_title : str, optional
        Title exposed to the template as ``title``.

    Returns
    -------
    str
        The rendered page.

    Raises
    ------
    src.exceptions.AppError
        Any loader, template or rendering error, unmodified.
    """
    records = load_records(content_dir)
    context = build_context(records, page_title)
    template_path = template_dir / INDEX_TEMPLATE_NAME
    template_text = load_template(template_path)
    fragments = load_fragments(template_dir)
    html = render_page(template_text, fragments, context, str(template_path))
    logger.info("Rendered %s with %d videos", template_path, len(context["videos"]))
    return html


def run_from_config(
    content_dir: Path | None = None,
    template_dir: Path | None = None,
    output_dir: Path | None = None,
) -> Path:
    """Build the page and write it to ``output_dir``.

    If any argument is ``None``, project-level defaults from
    ``src.config`` are used. The page is rendered completely before the
    output directory is touched, so a failed build leaves no output file.

    Parameters
    ----------
    content_dir : pathlib.Path or None, optional
        Defaults to ``CONTENT_DIR``.
    template_dir : pathlib.Path or None, optional
        Defaults to ``TEMPLATE_DIR``.
    output_dir : pathlib.Path or None, optional
        Defaults to ``OUTPUT_DIR``.

    Returns
    -------
    pathlib.Path
        Path of the written HTML file.

    Raises
    ------
    src.exceptions.AppError
        Any build or write error.
    """
    content_dir = Path(content_dir) if content_dir is not None else CONTENT_DIR
    template_dir = Path(template_dir) if template_dir is not None else TEMPLATE_DIR
    output_dir = Path(output_dir) if output_dir is not None else OUTPUT_DIR
    html = build_page(content_dir, template_dir)
    output_file = output_dir / OUTPUT_HTML_FILENAME
    write_html_output(html, output_file)
    return output_file


__all__ = ["build_page", "run_from_config"]
