"""
Query modifiers: content negotiation, structural level/extent and paging.

All values are immutable; the shared DEFAULT/ALL instances mean
"no constraint" and render to nothing.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class Content(Enum):
    """Representation of a resource returned by the service."""

    DEFAULT = "default"
    METADATA = "metadata"
    PATH = "path"
    REFERENCE = "reference"
    VALUE = "value"


class Level(Enum):
    """How deep nested structures are included."""

    DEFAULT = "default"
    DEEP = "deep"
    CORE = "core"


class Extent(Enum):
    """Whether BLOB values are included."""

    DEFAULT = "default"
    WITHOUT_BLOB_VALUE = "without_blob_value"
    WITH_BLOB_VALUE = "with_blob_value"


class QueryModifier(BaseModel):
    """Structural query modifier, a (level, extent) pair."""

    level: Level = Level.DEFAULT
    extent: Extent = Extent.DEFAULT

    DEFAULT: ClassVar["QueryModifier"]
    MINIMAL: ClassVar["QueryModifier"]
    MAXIMAL: ClassVar["QueryModifier"]

    model_config = {"frozen": True}


QueryModifier.DEFAULT = QueryModifier()
QueryModifier.MINIMAL = QueryModifier(level=Level.CORE, extent=Extent.WITHOUT_BLOB_VALUE)
QueryModifier.MAXIMAL = QueryModifier(level=Level.DEEP, extent=Extent.WITH_BLOB_VALUE)


class PagingInfo(BaseModel):
    """
    Paging parameters for list operations.

    ``limit`` is the maximum page size, ``cursor`` the opaque continuation
    token returned in the previous page's metadata.
    """

    DEFAULT_LIMIT: ClassVar[int | None] = None

    limit: int | None = Field(default=None, gt=0)
    cursor: str | None = None

    ALL: ClassVar["PagingInfo"]

    model_config = {"frozen": True}

    def has_limit(self) -> bool:
        return self.limit != self.DEFAULT_LIMIT


PagingInfo.ALL = PagingInfo()
