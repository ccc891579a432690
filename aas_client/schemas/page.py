"""
Pydantic models for paged list responses.

The service wraps list results as
``{"result": [...], "paging_metadata": {"cursor": "..."}}``.
"""

from typing import Any

from pydantic import BaseModel, Field


class PagingMetadata(BaseModel):
    """Paging metadata of a result page."""

    cursor: str | None = None

    model_config = {"extra": "allow"}


class Page(BaseModel):
    """One page of results."""

    result: list[Any] = Field(default_factory=list)
    paging_metadata: PagingMetadata = Field(default_factory=PagingMetadata)

    @property
    def cursor(self) -> str | None:
        """Cursor for the next page, None on the last page."""
        return self.paging_metadata.cursor

    def has_more(self) -> bool:
        return self.paging_metadata.cursor is not None
