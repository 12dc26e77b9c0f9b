"""Settings loader for the drawing store server."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_DRAWINGS_ROOT = "/srv/excalidraw/drawings"


@dataclass(frozen=True)
class Settings:
    drawings_root: Path
    create_root: bool
    log_level: int


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    drawings_root = Path(
        os.environ.get("DRAWINGS_ROOT", DEFAULT_DRAWINGS_ROOT)
    ).expanduser()
    create_root = _parse_bool(
        os.environ.get("DRAWINGS_CREATE_ROOT", "true"), "DRAWINGS_CREATE_ROOT"
    )
    log_level = _parse_log_level(
        os.environ.get("DRAWINGS_LOG_LEVEL", "INFO"), "DRAWINGS_LOG_LEVEL"
    )

    return Settings(
        drawings_root=drawings_root,
        create_root=create_root,
        log_level=log_level,
    )


def _parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value}")


def _parse_log_level(value: str, name: str) -> int:
    normalized = value.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    level = logging.getLevelName(normalized)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level for {name}: {value}")
    return level
