"""Drawing document and directory entry models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DOCUMENT_TYPE = "excalidraw"
DOCUMENT_VERSION = 2
DEFAULT_BACKGROUND = "#ffffff"


class Document(BaseModel):
    """A persisted drawing.

    Elements and embedded files are opaque records owned by the canvas; the
    store only moves them around. Unknown top-level keys (``source`` and the
    like) are kept so a round trip never loses data.

    Args:
        type: Constant document tag, always "excalidraw".
        version: Document schema version.
        elements: Ordered drawable element records.
        app_state: Canvas settings (serialized as ``appState``).
        files: Embedded binary assets keyed by file id.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = DOCUMENT_TYPE
    version: int = DOCUMENT_VERSION
    elements: list[dict[str, Any]] = Field(default_factory=list)
    app_state: dict[str, Any] = Field(default_factory=dict, alias="appState")
    files: dict[str, Any] = Field(default_factory=dict)

    def without_collaborators(self) -> "Document":
        """Return a copy whose app state carries no ``collaborators`` field."""
        app_state = {k: v for k, v in self.app_state.items() if k != "collaborators"}
        return self.model_copy(update={"app_state": app_state})

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to the on-disk / wire JSON shape (camelCase keys)."""
        return self.model_dump(by_alias=True, mode="json")


def blank_document() -> Document:
    """Return a fresh canonical empty drawing."""
    return Document(app_state={"viewBackgroundColor": DEFAULT_BACKGROUND})


class DirectoryEntry(BaseModel):
    """One immediate child of a listed directory.

    Args:
        name: Entry name (no directory component).
        is_dir: Whether the entry is a directory (serialized as ``isDir``).
        size: Size in bytes as reported by stat.
        mtime: Last modification time (UTC).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    is_dir: bool = Field(alias="isDir")
    size: int
    mtime: datetime
