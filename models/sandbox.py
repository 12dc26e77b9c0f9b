"""Path sandbox for the document store.

Maps user-supplied virtual paths (always absolute, like ``/team/plan.excalidraw``)
onto real filesystem paths confined to a configured root directory.
"""

import logging
import os
from pathlib import Path

from models.errors import InvalidPathError

logger = logging.getLogger(__name__)


def is_virtual_path(value: str | None) -> bool:
    """Return True if ``value`` is a non-empty absolute virtual path."""
    return bool(value) and value.startswith("/")


def resolve(root: Path | str, virtual: str) -> Path:
    """Resolve a virtual path to a real path inside ``root``.

    The virtual path is treated as relative to the root, never as a second
    absolute path, so ``/etc/passwd`` maps to ``<root>/etc/passwd``. The joined
    path is normalized lexically and must still lie under the canonical root.

    Args:
        root: The sandbox root directory.
        virtual: The virtual path, which must start with ``/``.

    Returns:
        The absolute resolved path (equal to the root for ``/``).

    Raises:
        InvalidPathError: If the path is relative, contains NUL bytes, or
            escapes the root after normalization.
    """
    if not is_virtual_path(virtual):
        raise InvalidPathError(
            f"Path must be absolute like /team/foo.excalidraw: {virtual!r}",
            virtual_path=virtual,
        )
    if "\x00" in virtual:
        raise InvalidPathError("Invalid path", virtual_path=virtual)

    base = Path(os.path.abspath(os.fspath(root)))
    full = Path(os.path.normpath(os.path.join(base, "." + virtual)))

    try:
        full.relative_to(base)
    except ValueError:
        logger.warning(f"Rejected path escaping sandbox root: {virtual!r}")
        raise InvalidPathError("Invalid path", virtual_path=virtual) from None

    return full
