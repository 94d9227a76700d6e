"""Order loaded records and assemble the page rendering context.

This module sits between the content loader and the page renderer. It
contains no I/O: it takes the mapping produced by
``src.pipeline.content_loader.load_records`` and returns plain data ready
for the template.

Ordering
--------
Records are sorted by ``title`` with Python's stable sort, comparing code
points (case-sensitive, so ``"Zebra"`` sorts before ``"alpha"``). Equal
titles keep the mapping's insertion order, which is the filesystem
enumeration order and therefore platform dependent.

Usage
-----
>>> from pathlib import Path
>>> from src.pipeline.content_loader import load_records
>>> context = build_context(load_records(Path("data/videos")))
>>> sorted(context)
['content', 'title', 'videos']
"""

from __future__ import annotations

from typing import Any, Mapping

from src.config import PAGE_TITLE
from src.pipeline.content_loader import Record


def sort_records(records: Mapping[str, Record]) -> list[Record]:
    """Return the records ordered by title, ties in insertion order."""
    return sorted(records.values(), key=lambda record: record.title)


def serialize_record(record: Record) -> dict[str, Any]:
    """Convert a record into template-friendly plain data.

    Enumeration fields become their member names (``"Good"``, ``"English"``).
    """
    return record.model_dump(mode="json")


def build_context(
    records: Mapping[str, Record], page_title: str = PAGE_TITLE
) -> dict[str, Any]:
    """Build the rendering context for the listing page.

    Parameters
    ----------
    records : Mapping[str, Record]
        Loaded records keyed by source path.
    page_title : str, optional
        Title of the page, defaults to ``PAGE_TITLE`` from ``src/config.py``.

    Returns
    -------
    dict[str, Any]
        ``title``, ``videos`` (sorted, serialized records) and an empty
        ``content`` slot used by the shared page layout.
    """
    return {
        "title": page_title,
        "videos": [serialize_record(record) for record in sort_records(records)],
        "content": "",
    }
