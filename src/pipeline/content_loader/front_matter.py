"""Front-matter splitting for content documents.

A content document has the shape ``<preamble>---<metadata>---<body>``. The
preamble is ignored; the metadata block is YAML and the body is Markdown.
"""

from __future__ import annotations

from pathlib import Path

from src.config import FRONT_MATTER_DELIMITER
from src.exceptions import MalformedDocumentError


def split_front_matter(
    text: str, source: Path | str | None = None
) -> tuple[str, str]:
    """Split raw document text into its metadata block and body block.

    The text is split on every occurrence of the delimiter, so the
    delimiter must occur exactly twice in the whole document, including
    the body.

    Parameters
    ----------
    text : str
        Full document text.
    source : Path or str or None, optional
        Path of the document, used only in error context.

    Returns
    -------
    tuple[str, str]
        The metadata block and the body block, unstripped.

    Raises
    ------
    MalformedDocumentError
        If the delimiter does not occur exactly twice.

    Examples
    --------
    >>> split_front_matter("---\\ntitle: x\\n---\\nHello")
    ('\\ntitle: x\\n', '\\nHello')
    """
    parts = text.split(FRONT_MATTER_DELIMITER)
    if len(parts) != 3:
        raise MalformedDocumentError(
            f"{source or '<document>'} does not have front matter: expected "
            f"2 '{FRONT_MATTER_DELIMITER}' delimiters, found {len(parts) - 1}",
            context={
                "path": None if source is None else str(source),
                "delimiter_count": len(parts) - 1,
            },
        )
    _preamble, metadata, body = parts
    return metadata, body
