from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class HookManagerError(Exception):
    """Base class for every error raised or returned by HookManager.

    Attributes:
        path: The settings or lock file involved, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class SettingsCorruptedError(HookManagerError):
    """Raised when settings.json exists but is not a valid JSON object."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__("Claude Code settings.json is corrupted or not valid JSON.", path=path)


class SettingsUnreadableError(HookManagerError):
    """Raised when settings.json exists but cannot be read (permissions, I/O)."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__(
            "Could not read Claude Code settings.json. Check file permissions.", path=path
        )


class UnexpectedStructureError(HookManagerError):
    """Raised when `hooks` is not an object or `hooks[<kind>]` is not an array."""

    def __init__(self, key: str, path: Path | None = None) -> None:
        self.key = key
        super().__init__(
            f"Claude Code settings.json has unexpected structure at {key!r}.", path=path
        )


class NotifierNotFoundError(HookManagerError):
    """Raised when the notifier path provider cannot locate the app's executable."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name
        super().__init__(f"Could not find {app_name} app bundle or notifier CLI.")


class SettingsLockTimeoutError(HookManagerError):
    """Raised when the settings lock cannot be acquired in time.

    Attributes:
        timeout: Seconds spent waiting before giving up.
    """

    def __init__(self, path: Path, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:g}s waiting for lock on {path}", path=path)
