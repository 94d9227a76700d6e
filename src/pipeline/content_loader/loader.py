"""Load every content file of a directory into validated records.

The loader is the single entry point from the filesystem into the build:
it enumerates the content directory (non-recursive), skips editor swap
files and the documentation skeleton, and runs each remaining file through
the front-matter splitter, the metadata parser and the Markdown renderer.

The first failure aborts the whole load. A content tree that cannot be
read or parsed is a defect in the build input, and publishing a page with
entries silently missing is worse than publishing nothing.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.config import SKELETON_FILENAME, SKIPPED_EXTENSIONS
from src.exceptions import IoFailureError

from .front_matter import split_front_matter
from .markdown_renderer import render_markdown
from .metadata import parse_metadata
from .schema import Record

logger = logging.getLogger(__name__)


def is_content_file(path: Path) -> bool:
    """Return ``False`` for swap files and the skeleton document."""
    if path.suffix.lstrip(".") in SKIPPED_EXTENSIONS:
        return False
    return path.name != SKELETON_FILENAME


def read_source(path: Path) -> str:
    """Read a source file fully as UTF-8 text.

    Raises
    ------
    IoFailureError
        If the file cannot be opened or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoFailureError(
            f"Could not read file {path}: {exc}", context={"path": str(path)}
        ) from exc


def load_record(path: Path) -> Record:
    """Build one fully populated ``Record`` from a content file.

    Parameters
    ----------
    path : Path
        Content file to load.

    Returns
    -------
    Record
        Record with ``identifier`` set to the filename stem and ``body``
        set to the rendered HTML.

    Raises
    ------
    IoFailureError, MalformedDocumentError, SchemaViolationError, RenderFailureError
        Propagated unchanged from the individual steps.
    """
    content = read_source(path)
    metadata, body = split_front_matter(content, path)
    record = parse_metadata(metadata, path)
    return record.model_copy(
        update={"identifier": path.stem, "body": render_markdown(body, path)}
    )


def load_records(source_dir: Path) -> dict[str, Record]:
    """Load all content files of ``source_dir`` keyed by their path string.

    Entries are visited in filesystem enumeration order, which is also the
    insertion order of the returned mapping.

    Parameters
    ----------
    source_dir : Path
        Directory holding the content files.

    Returns
    -------
    dict[str, Record]
        One record per non-skipped directory entry.

    Raises
    ------
    IoFailureError
        If the directory cannot be listed or an entry cannot be read.
    MalformedDocumentError, SchemaViolationError, RenderFailureError
        If any entry fails to parse or render.

    Examples
    --------
    >>> from pathlib import Path
    >>> records = load_records(Path("data/videos"))
    >>> all(r.identifier for r in records.values())
    True
    """
    try:
        entries = list(source_dir.iterdir())
    except OSError as exc:
        raise IoFailureError(
            f"Could not list content directory {source_dir}: {exc}",
            context={"path": str(source_dir)},
        ) from exc

    records: dict[str, Record] = {}
    for path in entries:
        if not is_content_file(path):
            logger.debug("Skipping non-content file %s", path)
            continue
        records[str(path)] = load_record(path)
    logger.info("Loaded %d records from %s", len(records), source_dir)
    return records
