"""Shared request and response models for API endpoints.

This module contains models used by more than one route module and by the
client library, which re-exports them.
"""

from pydantic import BaseModel

from models.document import DirectoryEntry, Document


class OkResponse(BaseModel):
    """Acknowledgement returned by write and create endpoints.

    Attributes:
        ok: Always True on success.
    """

    ok: bool = True


class DrawingResponse(BaseModel):
    """Response model for reading a drawing.

    Attributes:
        data: The stored document, or a blank document if none exists yet.
    """

    data: Document


__all__ = [
    "DirectoryEntry",
    "Document",
    "DrawingResponse",
    "OkResponse",
]
