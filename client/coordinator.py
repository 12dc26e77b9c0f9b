"""Save coordination between a drawing canvas and the store.

The SaveCoordinator owns the question "does the open drawing have unsaved
changes?". It listens to canvas change notifications, autosaves after a
quiet period, saves on demand (button or Ctrl/Cmd+S), and loads drawings
through the sanitizer before the canvas sees them.

State machine::

    idle ──change──> dirty ──save──> saving ──ok──> saved ──(delay)──> idle
                       ^                │
                       └────failure─────┘

Everything runs on one asyncio event loop. The only suspension point of a
save or load is the HTTP round trip.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from client.client import AsyncStoreClient
from client.models import Document
from client.sanitizer import COLLABORATORS_KEY, sanitize
from client.timer import DebounceTimer

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_DELAY = 10.0  # seconds of inactivity before an autosave
DEFAULT_SAVED_DISPLAY = 2.0  # seconds the "saved" state stays visible


class SaveState(str, Enum):
    """Save status of the open drawing."""

    IDLE = "idle"
    DIRTY = "dirty"
    SAVING = "saving"
    SAVED = "saved"


@runtime_checkable
class Canvas(Protocol):
    """The parts of a drawing canvas the coordinator reads from.

    A canvas that tracks soft-deleted elements may also provide
    ``get_scene_elements_including_deleted()``, which is preferred when present.
    """

    def get_scene_elements(self) -> list[dict[str, Any]]: ...

    def get_app_state(self) -> dict[str, Any]: ...

    def get_files(self) -> dict[str, Any]: ...


@dataclass
class KeyEvent:
    """A keyboard event as delivered by the UI layer."""

    key: str
    ctrl_key: bool = False
    meta_key: bool = False
    alt_key: bool = False
    shift_key: bool = False
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def is_save_shortcut(event: KeyEvent) -> bool:
    """Return True for Ctrl+S or Cmd+S (with or without Shift, never Alt)."""
    return (
        event.key.lower() == "s"
        and (event.ctrl_key or event.meta_key)
        and not event.alt_key
    )


StateListener = Callable[[SaveState, str | None], None]


class SaveCoordinator:
    """Track unsaved changes of one drawing and persist them.

    Attributes:
        path: Virtual path of the open drawing.
        status: Current SaveState.
        error: Message of the last failed load or save, if any.
        initial_data: The sanitized document from the last successful load.
        canvas: The attached canvas, if any.
    """

    def __init__(
        self,
        client: AsyncStoreClient,
        path: str,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        saved_display: float = DEFAULT_SAVED_DISPLAY,
        listener: StateListener | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            client: Store client used for loads and saves.
            path: Virtual path of the drawing to edit.
            debounce_delay: Quiet period after the last change before an
                autosave fires.
            saved_display: How long ``saved`` is shown before reverting to
                ``idle``.
            listener: Called with (status, error) after every state change.
        """
        self._client = client
        self.path = path
        self.status = SaveState.IDLE
        self.error: str | None = None
        self.initial_data: dict[str, Any] | None = None
        self.canvas: Canvas | None = None
        self._listener = listener

        self._debounce = DebounceTimer(debounce_delay, self._spawn_save)
        self._saved_timer = DebounceTimer(saved_display, self._clear_saved)
        self._tasks: set[asyncio.Task] = set()
        self._in_flight = False
        self._revision = 0
        self._load_token = 0

    # ===== Canvas wiring =====

    def attach(self, canvas: Canvas) -> None:
        """Attach the canvas handle saves read from."""
        self.canvas = canvas

    def detach(self) -> None:
        """Detach the canvas; later saves become no-ops."""
        self.canvas = None

    def on_canvas_change(self, *args: Any) -> None:
        """Handle a canvas change notification.

        Marks the drawing dirty and restarts the autosave timer. The canvas
        passes (elements, app_state, files); they are ignored since saves
        read fresh state from the canvas.
        """
        self._revision += 1
        self._saved_timer.cancel()
        self._set_status(SaveState.DIRTY)
        self._debounce.restart()

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Trigger a save on Ctrl/Cmd+S.

        Args:
            event: The keyboard event.

        Returns:
            True if the event was the save shortcut. Its default action is
            prevented in that case.
        """
        if not is_save_shortcut(event):
            return False
        event.prevent_default()
        self._spawn_save()
        return True

    # ===== Save / load =====

    async def save(self) -> bool:
        """Save the canvas to the store.

        Does nothing without an attached canvas or while another save is in
        flight. Failures are recorded in ``error`` and leave the drawing
        dirty; nothing is retried automatically.

        Returns:
            True if the drawing was written.
        """
        if self.canvas is None:
            return False
        if self._in_flight:
            logger.debug(f"Save of {self.path} already in flight, skipping")
            return False

        self._in_flight = True
        self._debounce.cancel()
        started_revision = self._revision
        path = self.path
        self._set_status(SaveState.SAVING)
        try:
            document = self._snapshot(self.canvas)
            await self._client.drawing.put(path, document)
        except asyncio.CancelledError:
            self._set_status(SaveState.DIRTY)
            raise
        except Exception as e:
            self.error = getattr(e, "message", None) or str(e) or type(e).__name__
            logger.warning(f"Save of {path} failed: {self.error}")
            self._set_status(SaveState.DIRTY)
            return False
        finally:
            self._in_flight = False

        self.error = None
        if self._revision != started_revision:
            # edited while the request was in flight; a timer that fired
            # meanwhile was skipped, so make sure one is pending
            self._set_status(SaveState.DIRTY)
            if not self._debounce.pending:
                self._debounce.restart()
        else:
            logger.info(f"Saved {path}")
            self._set_status(SaveState.SAVED)
            self._saved_timer.restart()
        return True

    async def load(self, path: str | None = None) -> dict[str, Any] | None:
        """Load a drawing and prepare it as the canvas's initial data.

        Switching to a new path cancels pending autosave of the old one.
        If the path changes again before the response arrives, the response
        is discarded.

        Args:
            path: Path to open; reloads the current path when omitted.

        Returns:
            The sanitized document, or None on failure or a stale response.
        """
        if path is not None and path != self.path:
            self._debounce.cancel()
            self._saved_timer.cancel()
            self.path = path
            self.initial_data = None
            self.error = None
            self._set_status(SaveState.IDLE)

        self._load_token += 1
        token = self._load_token
        target = self.path
        try:
            data = await self._client.drawing.get(target)
        except Exception as e:
            if self._is_current(token, target):
                self.error = getattr(e, "message", None) or str(e) or "Failed to load"
                logger.warning(f"Load of {target} failed: {self.error}")
                self._notify()
            return None

        if not self._is_current(token, target):
            logger.debug(f"Discarding stale load of {target}")
            return None

        self.initial_data = sanitize(data)
        return self.initial_data

    async def drain(self) -> None:
        """Wait for saves started by timers or shortcuts to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Cancel pending timers. In-flight requests are left to finish."""
        self._debounce.cancel()
        self._saved_timer.cancel()

    # ===== Internals =====

    def _snapshot(self, canvas: Canvas) -> Document:
        including_deleted = getattr(canvas, "get_scene_elements_including_deleted", None)
        if callable(including_deleted):
            elements = including_deleted()
        else:
            elements = canvas.get_scene_elements()
        app_state = {
            k: v
            for k, v in (canvas.get_app_state() or {}).items()
            if k != COLLABORATORS_KEY
        }
        return Document(
            elements=list(elements or []),
            app_state=app_state,
            files=dict(canvas.get_files() or {}),
        )

    def _spawn_save(self) -> None:
        task = asyncio.ensure_future(self.save())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _clear_saved(self) -> None:
        if self.status is SaveState.SAVED:
            self._set_status(SaveState.IDLE)

    def _is_current(self, token: int, target: str) -> bool:
        return token == self._load_token and target == self.path

    def _set_status(self, status: SaveState) -> None:
        self.status = status
        self._notify()

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self.status, self.error)
