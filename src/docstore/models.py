"""Document data contract: documents, embedded authors, and search filters"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Naive timestamps are taken to be UTC so they compare with aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ConflictPolicy(str, Enum):
    """What save does when the document id is already stored"""
    replace = "replace"     # overwrite the record, keeping the stored `created`
    reject = "reject"       # skip the write and return the input unchanged
    error = "error"         # raise IdConflictError


class Author(BaseModel):
    """Embedded author value; has no lifecycle outside its document."""
    id: str
    name: str


class Document(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: str = ""                    # empty means "assign one on save"
    title: str
    content: str
    author: Author | None = None
    created: datetime = Field(default_factory=_utcnow)

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Independently optional filters, ANDed together.

    None (or an empty collection) leaves a filter unconstrained. Within one
    filter the values are ORed: a title matches if it starts with any prefix.
    Both snake_case names and the camelCase aliases are accepted.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    title_prefixes:    set[str] | None = Field(default=None, alias="titlePrefixes")
    contains_contents: set[str] | None = Field(default=None, alias="containsContents")
    author_ids:        set[str] | None = Field(default=None, alias="authorIds")
    created_from:      datetime | None = Field(default=None, alias="createdFrom", description="Inclusive lower bound")
    created_to:        datetime | None = Field(default=None, alias="createdTo", description="Inclusive upper bound")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
