"""Content Loader Pipeline Module.

Turns a directory of Markdown files with YAML front matter into validated,
rendered ``Record`` objects. Each file passes through three steps:

- ``front_matter``: split the raw text into metadata and body blocks.
- ``metadata``: decode and validate the metadata against the closed schema.
- ``markdown_renderer``: convert the body to HTML.

``loader`` runs these steps over a whole directory and stops at the first
failure. The package does not write files and knows nothing about page
templates; see ``src.pipeline.website_generator`` for that.

Examples
--------
>>> from pathlib import Path
>>> from src.pipeline.content_loader import load_records
>>> records = load_records(Path("data/videos"))
"""

from .front_matter import split_front_matter
from .loader import is_content_file, load_record, load_records, read_source
from .markdown_renderer import render_markdown
from .metadata import decode_metadata_block, parse_metadata
from .schema import Language, Quality, Record, metadata_fields

__all__ = [
    "Language",
    "Quality",
    "Record",
    "decode_metadata_block",
    "is_content_file",
    "load_record",
    "load_records",
    "metadata_fields",
    "parse_metadata",
    "read_source",
    "render_markdown",
    "split_front_matter",
]
