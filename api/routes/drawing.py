"""Drawing document endpoints.

Provides the document resource: reading a drawing (or a blank one when
nothing is stored yet) and overwriting it with the editor's current scene.
"""

from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.dependencies import DocumentStoreDep
from api.models import DrawingResponse, OkResponse
from api.utils import parse_json_body, require_virtual_path
from models.document import Document, blank_document

router = APIRouter(
    prefix="/api",
    tags=["drawing"],
)

@router.get("/drawing", response_model=DrawingResponse)
def get_drawing(
    store: DocumentStoreDep,
    path: str | None = Query(
        default=None, description="Absolute virtual path of the drawing"
    ),
) -> DrawingResponse:
    """Read a drawing.

    A path with no backing file yields the blank document; nothing is
    created on disk.

    Args:
        store: The shared DocumentStore.
        path: Absolute virtual path of the drawing.

    Returns:
        The document wrapped in ``{"data": ...}``.

    Raises:
        HTTPException: 400 if path is missing or relative.
    """
    virtual = require_virtual_path(path)
    return DrawingResponse(data=store.read_or_default(virtual))


@router.put("/drawing", response_model=OkResponse)
async def put_drawing(
    request: Request,
    store: DocumentStoreDep,
    path: str | None = Query(
        default=None, description="Absolute virtual path of the drawing"
    ),
) -> OkResponse:
    """Overwrite a drawing with the request body.

    An empty (or ``null``) body stores the blank document.

    Args:
        request: The incoming request; its body is the document JSON.
        store: The shared DocumentStore.
        path: Absolute virtual path of the drawing.

    Returns:
        ``{"ok": true}`` once the file is written.

    Raises:
        HTTPException: 400 if path is missing or relative, or if the body
            is not a JSON document object.
    """
    virtual = require_virtual_path(path)
    payload = parse_json_body(await request.body())

    if payload is None:
        document = blank_document()
    elif not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a drawing document object",
        )
    else:
        try:
            document = Document.model_validate(payload)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid drawing document: {e.error_count()} invalid field(s)",
            )

    await run_in_threadpool(store.write, virtual, document)
    return OkResponse()

