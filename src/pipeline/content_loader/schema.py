"""Record schema for one video entry of the listing site.

A ``Record`` mirrors the YAML front matter of a content file plus two
derived fields filled in by the loader: ``identifier`` (the filename stem)
and ``body`` (the rendered HTML). The schema is closed: undeclared keys are
rejected, every metadata field is required, and enumerations only accept
their declared members.

Examples
--------
>>> record = Record(
...     title="Alpha Talk",
...     quality="Good",
...     contributors=["Ferris"],
...     date="2023-05-01",
...     duration=1800,
...     language="English",
...     external_link="https://example.org/watch?v=1",
... )
>>> record.quality is Quality.GOOD
True
>>> record.identifier
''
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DERIVED_FIELDS: frozenset[str] = frozenset({"identifier", "body"})

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class IntegerText(str):
    """An unquoted YAML scalar that looks like an integer, kept as its text.

    Text fields accept it as written; ``duration`` converts it when it is a
    plain decimal number. Quoted scalars stay ordinary ``str`` and are
    never converted.
    """


class Quality(str, Enum):
    """Recording quality of a video."""

    BAD = "Bad"
    GOOD = "Good"


class Language(str, Enum):
    """Spoken language of a video."""

    ENGLISH = "English"


class Record(BaseModel):
    """One parsed, validated and rendered content item.

    Instances are frozen; the loader sets the derived fields through
    ``model_copy(update=...)`` right after decoding.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    identifier: str = ""
    body: str = ""

    title: str
    quality: Quality
    contributors: list[str]
    date: str
    duration: int = Field(strict=True, ge=0)
    language: Language
    external_link: str

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_integer_text(cls, value: Any) -> Any:
        if isinstance(value, IntegerText) and _DECIMAL.fullmatch(value):
            return int(value)
        return value


def metadata_fields() -> frozenset[str]:
    """Return the field names accepted in a front-matter block."""
    return frozenset(Record.model_fields) - DERIVED_FIELDS
