"""Markdown-to-HTML conversion for content bodies.

Uses ``markdown2`` with a GitHub-flavoured set of extras: fenced code,
tables, strikethrough, task lists, footnotes, and bare ``http(s)://`` and
``www.`` URLs turned into links. Raw HTML in the source is passed through
unescaped, and link protocols are not filtered: the content directory is
build input under the site owner's control.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import cast

import markdown2

from src.config import MARKDOWN_EXTRAS
from src.exceptions import RenderFailureError

BARE_URL = re.compile(
    r"(?<![\w/@.:(<>\"'=])(?:https?://|www\.)[^\s<>\"'()\[\]]*[^\s<>\"'()\[\].,;:!?*_~]"
)


def _url_href(match: re.Match[str]) -> str:
    url = match.group(0)
    return url if url.startswith("http") else f"http://{url}"


LINK_PATTERNS = [(BARE_URL, _url_href)]


def render_markdown(text: str, source: Path | str | None = None) -> str:
    r"""Convert a Markdown body block to HTML.

    Parameters
    ----------
    text : str
        Markdown source, possibly containing raw HTML.
    source : Path or str or None, optional
        Path of the document, used only in error context.

    Returns
    -------
    str
        Rendered HTML. Identical input always yields identical output.

    Raises
    ------
    RenderFailureError
        If ``markdown2`` fails to convert the text.

    Examples
    --------
    >>> render_markdown("Some <b>bold</b> text")
    '<p>Some <b>bold</b> text</p>\n'
    """
    try:
        html = markdown2.markdown(
            text,
            extras=list(MARKDOWN_EXTRAS),
            link_patterns=LINK_PATTERNS,
            # None keeps raw HTML; "escape"/"replace" would neutralize it.
            safe_mode=None,
        )
    except Exception as exc:
        location = str(source) if source is not None else None
        raise RenderFailureError(
            f"{location or '<document>'}: Markdown conversion failed: {exc}",
            context={"path": location},
        ) from exc
    return str(cast(str, html))
