"""Read/write primitives for settings.json (untyped JSON, other keys preserved)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..errors import SettingsCorruptedError, SettingsUnreadableError, UnexpectedStructureError

logger = logging.getLogger(__name__)


def read_settings(path: Path) -> dict[str, Any] | None:
    """Read settings.json.

    Returns None only when the file does not exist.

    Raises:
        SettingsUnreadableError: The file exists but could not be read.
        SettingsCorruptedError: The file is not UTF-8 JSON with an object at the top.
    """
    try:
        raw = path.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        raise SettingsUnreadableError(path=path) from e
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SettingsCorruptedError(path=path) from e
    if not isinstance(data, dict):
        raise SettingsCorruptedError(path=path)
    return data


def read_settings_or_empty(path: Path) -> dict[str, Any]:
    settings = read_settings(path)
    return settings if settings is not None else {}


def write_settings(path: Path, settings: dict[str, Any]) -> None:
    """Serialize with sorted keys and replace `path` atomically."""
    _atomic_write(path, json.dumps(settings, indent=2, sort_keys=True, ensure_ascii=False) + "\n")
    logger.debug("Wrote %s", path)


def _atomic_write(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def hook_array(settings: dict[str, Any], kind: str) -> list[Any] | None:
    """Return `settings["hooks"][kind]` if both levels have the expected shape."""
    hooks = settings.get("hooks")
    if not isinstance(hooks, dict):
        return None
    array = hooks.get(kind)
    if not isinstance(array, list):
        return None
    return array


def writable_hook_array(settings: dict[str, Any], kind: str, path: Path | None = None) -> list[Any]:
    """Return `settings["hooks"][kind]`, creating missing levels in place.

    Raises:
        UnexpectedStructureError: `hooks` exists but is not an object, or
            `hooks[kind]` exists but is not an array.
    """
    hooks = settings.setdefault("hooks", {})
    if not isinstance(hooks, dict):
        raise UnexpectedStructureError("hooks", path=path)
    array = hooks.setdefault(kind, [])
    if not isinstance(array, list):
        raise UnexpectedStructureError(f"hooks.{kind}", path=path)
    return array
