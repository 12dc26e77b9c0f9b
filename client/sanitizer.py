"""Load-time normalization of drawing documents.

Collaborator presence is session-only data. Documents written by older
editors may still carry an ``appState.collaborators`` field, serialized as a
list of pairs, a plain object, or something else entirely. The canvas needs a
mapping it can iterate, so every loaded document goes through ``sanitize``
before it reaches the canvas.
"""

from collections.abc import Hashable, Mapping
from enum import Enum
from typing import Any

COLLABORATORS_KEY = "collaborators"


class CollaboratorsShape(str, Enum):
    """Recognized shapes of a stored collaborators value."""

    ABSENT = "absent"
    MAPPING = "mapping"
    PAIRS = "pairs"
    UNRECOGNIZED = "unrecognized"


def _is_pair(item: Any) -> bool:
    return (
        isinstance(item, (list, tuple))
        and len(item) == 2
        and isinstance(item[0], Hashable)
    )


def classify_collaborators(value: Any) -> CollaboratorsShape:
    """Classify a raw collaborators value.

    Args:
        value: The value found under ``appState.collaborators``.

    Returns:
        The shape the value was recognized as.
    """
    if isinstance(value, Mapping):
        return CollaboratorsShape.MAPPING
    if isinstance(value, (list, tuple)) and all(_is_pair(item) for item in value):
        return CollaboratorsShape.PAIRS
    if value is None or value is False or value == "" or value == 0:
        return CollaboratorsShape.ABSENT
    return CollaboratorsShape.UNRECOGNIZED


def normalize_collaborators(value: Any) -> dict[Any, Any]:
    """Turn any collaborators value into a plain dict.

    Args:
        value: The raw collaborators value.

    Returns:
        A new dict; empty for absent or unrecognized input.
    """
    shape = classify_collaborators(value)
    if shape is CollaboratorsShape.MAPPING:
        return dict(value)
    if shape is CollaboratorsShape.PAIRS:
        try:
            return {key: item for key, item in value}
        except TypeError:
            # tuples holding lists pass the Hashable check but still fail to hash
            return {}
    return {}


def sanitize(document: Any) -> dict[str, Any]:
    """Prepare a loaded document for the canvas.

    Never raises and never mutates its input. The result always has an
    ``appState`` dict whose ``collaborators`` entry is a dict.

    Args:
        document: The document as loaded from the store.

    Returns:
        A shallow copy of the document with a normalized app state.
    """
    out = dict(document) if isinstance(document, Mapping) else {}
    app_state = out.get("appState")
    app_state = dict(app_state) if isinstance(app_state, Mapping) else {}
    app_state[COLLABORATORS_KEY] = normalize_collaborators(
        app_state.get(COLLABORATORS_KEY)
    )
    out["appState"] = app_state
    return out
