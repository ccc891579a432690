"""
Pydantic schemas for response values.
"""

from aas_client.schemas.files import InMemoryFile, TypedInMemoryFile
from aas_client.schemas.page import Page, PagingMetadata

__all__ = [
    "InMemoryFile",
    "TypedInMemoryFile",
    "Page",
    "PagingMetadata",
]
