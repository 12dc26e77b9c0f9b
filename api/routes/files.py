"""Directory endpoints.

Provides the directory resource: listing the immediate children of a
directory and creating new drawing files that must not exist yet.
"""

from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.dependencies import DocumentStoreDep
from api.models import OkResponse
from api.utils import parse_json_body, require_virtual_path
from models.document import DirectoryEntry, Document

router = APIRouter(
    prefix="/api",
    tags=["files"],
)


@router.get("/files", response_model=list[DirectoryEntry])
def list_files(
    store: DocumentStoreDep,
    dir: str = Query(default="/", description="Absolute virtual directory path"),
) -> list[DirectoryEntry]:
    """List a directory.

    Only immediate children are returned, directories first. Every call
    reads the filesystem afresh.

    Args:
        store: The shared DocumentStore.
        dir: Absolute virtual path of the directory.

    Returns:
        One entry per child with name, isDir, size, and mtime.

    Raises:
        HTTPException: 400 if dir is not absolute.
    """
    virtual = require_virtual_path(dir, name="dir")
    return store.list(virtual)


@router.post(
    "/files",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_file(request: Request, store: DocumentStoreDep) -> OkResponse:
    """Create a new drawing file.

    The body is ``{"path": ..., "template": ...}``; the template is
    optional. Fails with 409 if anything already exists at the path; the
    existing file is never modified.

    Args:
        request: The incoming request.
        store: The shared DocumentStore.

    Returns:
        ``{"ok": true}`` with status 201.

    Raises:
        HTTPException: 400 if the body is not a JSON object, path is not an
            absolute string, or template is not a valid drawing document.
    """
    payload = parse_json_body(await request.body())
    if not isinstance(payload, dict):
        payload = {}

    path = payload.get("path")
    virtual = require_virtual_path(path if isinstance(path, str) else None)

    template = None
    if payload.get("template") is not None:
        try:
            template = Document.model_validate(payload["template"])
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid template: {e.error_count()} invalid field(s)",
            )

    await run_in_threadpool(store.create_exclusive, virtual, template)
    return OkResponse()
