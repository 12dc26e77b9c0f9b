"""Client response models for the drawing store client.

This module re-exports the models shared with the API layer so client code
has a single import location.
"""

from api.models import DrawingResponse, OkResponse
from models.document import DirectoryEntry, Document, blank_document

__all__ = [
    "DirectoryEntry",
    "Document",
    "DrawingResponse",
    "OkResponse",
    "blank_document",
]
