"""Website Generator Pipeline Module.

Summary
-------
Import surface for turning loaded records into the static listing page.

This initializer contains no application logic: it only defines the package
boundary, imports the public symbols from its submodules and exposes them
through ``__all__``.

- ``data_aggregator``: record ordering and rendering-context assembly.
- ``renderer``: fragment loading, Jinja2 page rendering and HTML output.
- ``runner``: headless orchestration of load, order, render and write.

Usage
-----
    >>> from pathlib import Path
    >>> from src.pipeline.website_generator import build_page
    >>> html = build_page(Path("data/videos"), Path("templates"))
"""

from .data_aggregator import build_context, serialize_record, sort_records
from .renderer import (
    FragmentSet,
    load_fragments,
    load_template,
    render_page,
    write_html_output,
)
from .runner import build_page, run_from_config

__all__ = [
    "FragmentSet",
    "build_context",
    "build_page",
    "load_fragments",
    "load_template",
    "render_page",
    "run_from_config",
    "serialize_record",
    "sort_records",
    "write_html_output",
]
