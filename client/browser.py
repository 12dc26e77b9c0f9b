"""Helpers for browsing and creating drawings in the store.

These back the "open drawing" dialog: path joining, breadcrumbs, ordering
and filtering of listings, and creating a new drawing in a directory.
"""

import re
from collections.abc import Iterable

from client._files import AsyncFilesClient, FilesClient
from client.models import DirectoryEntry

DRAWING_EXTENSION = ".excalidraw"
DEFAULT_DRAWING_NAME = "untitled.excalidraw"

_SLASHES = re.compile(r"/+")


def join_path(dir: str, name: str) -> str:
    """Join a virtual directory and a child name, collapsing repeated slashes."""
    if not dir.endswith("/"):
        dir += "/"
    joined = _SLASHES.sub("/", dir + name)
    return joined if joined.startswith("/") else "/" + joined


def breadcrumbs(dir: str) -> list[tuple[str, str]]:
    """Return (label, path) pairs from the root down to ``dir``.

    The first crumb is always ``("root", "/")``; every other path ends
    with a slash.
    """
    crumbs = [("root", "/")]
    current = "/"
    for segment in (part for part in dir.split("/") if part):
        current = join_path(current, segment) + "/"
        crumbs.append((segment, current))
    return crumbs


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Order entries with directories first, then by case-insensitive name."""
    return sorted(entries, key=lambda e: (not e.is_dir, e.name.lower(), e.name))


def filter_entries(entries: Iterable[DirectoryEntry], query: str) -> list[DirectoryEntry]:
    """Keep entries whose name contains ``query``, ignoring case.

    A blank query keeps everything.
    """
    needle = query.strip().lower()
    if not needle:
        return list(entries)
    return [e for e in entries if needle in e.name.lower()]


def ensure_extension(name: str) -> str:
    """Append the drawing extension unless the name already has it."""
    name = name.strip() or DEFAULT_DRAWING_NAME
    return name if name.endswith(DRAWING_EXTENSION) else name + DRAWING_EXTENSION


def create_drawing(files: FilesClient, dir: str, name: str) -> str:
    """Create a blank drawing named ``name`` inside ``dir``.

    Args:
        files: The files sub-client.
        dir: Virtual directory to create the drawing in.
        name: File name; the drawing extension is added if missing.

    Returns:
        The virtual path of the new drawing.

    Raises:
        ConflictError: If a file with that name already exists.
    """
    path = join_path(dir, ensure_extension(name))
    files.create(path)
    return path


async def create_drawing_async(files: AsyncFilesClient, dir: str, name: str) -> str:
    """Async variant of :func:`create_drawing`."""
    path = join_path(dir, ensure_extension(name))
    await files.create(path)
    return path
