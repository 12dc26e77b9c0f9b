"""Utility functions for API route handlers.

This module contains helpers shared by the drawing and files routes.
"""

import json
from collections.abc import Iterable
from typing import Any

from fastapi import HTTPException, status
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute

from models.sandbox import is_virtual_path


def require_virtual_path(value: str | None, name: str = "path") -> str:
    """Validate that a request carried an absolute virtual path.

    Args:
        value: The raw value from the query string or body.
        name: Parameter name, used in the error message.

    Returns:
        The validated virtual path.

    Raises:
        HTTPException: 400 if the value is missing or not absolute.
    """
    if not is_virtual_path(value):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} must be absolute like /team/foo.excalidraw",
        )
    return value


def parse_json_body(raw: bytes) -> Any:
    """Decode a raw request body as JSON.

    Args:
        raw: The request body bytes.

    Returns:
        The decoded value, or None for an empty body.

    Raises:
        HTTPException: 400 if the body is not valid JSON.
    """
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Request body is not valid JSON: {e}",
        )


# Order used when advertising methods in an Allow header
_METHOD_ORDER = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def allowed_methods(routes: Iterable[BaseRoute], path: str) -> list[str]:
    """Collect the methods every route matching ``path`` accepts.

    Args:
        routes: The application's routes.
        path: The request path.

    Returns:
        The methods in a stable order, for an ``Allow`` header.
    """
    methods: set[str] = set()
    for route in routes:
        if isinstance(route, APIRoute) and route.path_regex.match(path):
            methods.update(route.methods)
    return sorted(
        methods,
        key=lambda m: (_METHOD_ORDER.index(m) if m in _METHOD_ORDER else len(_METHOD_ORDER), m),
    )
