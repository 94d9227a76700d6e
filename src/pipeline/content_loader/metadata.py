"""Decode YAML front matter into validated ``Record`` instances.

The metadata block is parsed with a restricted PyYAML safe loader and
validated against the closed ``Record`` schema. Any decoding or validation
problem is reported as a ``SchemaViolationError`` whose context lists the
offending fields, so a broken content file can be fixed without guessing.

Unquoted scalars are read as text: dates, floats and booleans stay strings,
and integer-looking scalars become ``IntegerText`` so that ``title: 1984``
is a title while ``duration: 1800`` is still a number. Repeated keys are
rejected.
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.exceptions import SchemaViolationError

from .schema import DERIVED_FIELDS, IntegerText, Record

_TEXT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)
_INT_TAG = "tag:yaml.org,2002:int"
_MERGE_TAG = "tag:yaml.org,2002:merge"


class DuplicateKeyError(yaml.constructor.ConstructorError):
    """A mapping key occurs more than once."""

    def __init__(self, key: Any, node: yaml.Node, key_node: yaml.Node) -> None:
        super().__init__(
            "while constructing a mapping",
            node.start_mark,
            f"found duplicate key {key!r}",
            key_node.start_mark,
        )
        self.key = key


class FrontMatterLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps plain scalars as text and rejects repeated keys."""

    def construct_mapping(self, node, deep=False):
        seen: set[Any] = set()
        for key_node, _value_node in node.value:
            if key_node.tag == _MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise DuplicateKeyError(key, node, key_node)
            seen.add(key)
        return super().construct_mapping(node, deep=deep)

    def construct_integer_text(self, node):
        return IntegerText(self.construct_scalar(node))


FrontMatterLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_constructor(_INT_TAG, FrontMatterLoader.construct_integer_text)


def decode_metadata_block(block: str, source: Path | str | None = None) -> dict[str, Any]:
    """Parse a metadata block into a plain mapping.

    Raises
    ------
    SchemaViolationError
        If the block is not valid YAML, repeats a key, or does not decode
        to a mapping.
    """
    location = str(source) if source is not None else None
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)
    except DuplicateKeyError as exc:
        raise SchemaViolationError(
            f"{location or '<document>'}: duplicate field {exc.key!r} in front matter",
            context={
                "path": location,
                "errors": [
                    {"field": str(exc.key), "type": "duplicate_key", "message": "duplicate field"}
                ],
            },
        ) from exc
    except yaml.YAMLError as exc:
        raise SchemaViolationError(
            f"{location or '<document>'}: front matter is not valid YAML: {exc}",
            context={"path": location},
        ) from exc
    if not isinstance(data, dict):
        raise SchemaViolationError(
            f"{location or '<document>'}: front matter must be a mapping, "
            f"got {type(data).__name__}",
            context={"path": location},
        )
    return data


def _describe_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "<root>",
            "type": error["type"],
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def parse_metadata(block: str, source: Path | str | None = None) -> Record:
    """Decode a metadata block into a validated ``Record``.

    ``identifier`` and ``body`` are derived by the caller and may not
    appear in the block; they are left empty on the returned record.

    Parameters
    ----------
    block : str
        YAML text between the two front-matter delimiters.
    source : Path or str or None, optional
        Path of the document, used only in error context.

    Returns
    -------
    Record
        Validated record with empty derived fields.

    Raises
    ------
    SchemaViolationError
        For invalid YAML, unknown keys, missing keys, enumeration values
        outside the declared set, or wrongly typed values.

    Examples
    --------
    >>> block = '''
    ... title: Alpha Talk
    ... quality: Good
    ... contributors: []
    ... date: 2023-05-01
    ... duration: 60
    ... language: English
    ... external_link: https://example.org
    ... '''
    >>> parse_metadata(block).date
    '2023-05-01'
    """
    location = str(source) if source is not None else None
    data = decode_metadata_block(block, source)

    derived = sorted(DERIVED_FIELDS.intersection(data))
    if derived:
        raise SchemaViolationError(
            f"{location or '<document>'}: derived field(s) not allowed in "
            f"front matter: {', '.join(derived)}",
            context={
                "path": location,
                "errors": [
                    {"field": name, "type": "extra_forbidden", "message": "derived field"}
                    for name in derived
                ],
            },
        )

    try:
        return Record.model_validate(data)
    except ValidationError as exc:
        errors = _describe_errors(exc)
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        raise SchemaViolationError(
            f"{location or '<document>'}: front matter violates schema: {summary}",
            context={"path": location, "errors": errors},
        ) from exc
