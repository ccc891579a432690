"""
Pydantic models for files exchanged with the service (attachments,
thumbnails, AASX packages).
"""

from pydantic import BaseModel


class InMemoryFile(BaseModel):
    """File content held in memory together with its path or name."""

    path: str
    content: bytes

    model_config = {"frozen": True}


class TypedInMemoryFile(InMemoryFile):
    """In-memory file with a MIME content type."""

    content_type: str = "application/octet-stream"
