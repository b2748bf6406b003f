"""HookManager: install, detect, repair and remove one app's hook in settings.json."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..errors import HookManagerError, NotifierNotFoundError
from ..models.hook import HookKind, HookMatcherEntry, PreToolUseIdentity, UserPromptSubmitIdentity
from ._lock import DEFAULT_LOCK_TIMEOUT, coordinated_access
from ._matching import find_all_indices, find_first_index, matching_commands, remove_indices
from ._notifier import default_notifier_path_provider
from ._settings import (
    hook_array,
    read_settings,
    read_settings_or_empty,
    writable_hook_array,
    write_settings,
)

if TYPE_CHECKING:
    from ..models.hook import AnyHookIdentity
    from ._notifier import NotifierPathProvider

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"


@dataclass
class HookStatus:
    """Snapshot of this app's entries in settings.json, taken from a single read.

    Attributes:
        matching_indices: Positions in `hooks[<kind>]` of entries that are ours.
        commands: Our command strings across those entries, in array order.
        notifier_path: What the notifier provider returned, if anything.
        has_current_path: Some matching command equals `notifier_path` exactly.
    """

    matching_indices: list[int] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    notifier_path: str | None = None
    has_current_path: bool = False

    @property
    def configured(self) -> bool:
        return bool(self.matching_indices)

    @property
    def needs_update(self) -> bool:
        """Duplicates exist, or no entry points at the current notifier."""
        if self.notifier_path is None or not self.matching_indices:
            return False
        return len(self.matching_indices) > 1 or not self.has_current_path


class HookManager:
    """Manages one app's hook entry in Claude Code's settings.json.

    Configuration is fixed at construction. Every mutating call takes an
    exclusive cross-process lock around its whole read-modify-write, so
    several apps can share the file. Queries read without locking and
    report False instead of raising when the file is unreadable or the
    notifier provider fails.
    """

    def __init__(
        self,
        identity: AnyHookIdentity,
        claude_dir: Path | None = None,
        notifier_path_provider: NotifierPathProvider | None = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
    ) -> None:
        if not isinstance(identity, (UserPromptSubmitIdentity, PreToolUseIdentity)):
            raise TypeError(
                f"Expected a UserPromptSubmit or PreToolUse identity, got {type(identity).__name__}"
            )
        self._identity = identity
        self._claude_dir = Path(claude_dir) if claude_dir is not None else Path.home() / ".claude"
        self._notifier_path_provider = notifier_path_provider or default_notifier_path_provider
        self._lock_timeout = lock_timeout

    @property
    def identity(self) -> AnyHookIdentity:
        return self._identity

    @property
    def claude_dir(self) -> Path:
        return self._claude_dir

    @property
    def settings_path(self) -> Path:
        return self._claude_dir / SETTINGS_FILENAME

    @property
    def _kind(self) -> str:
        return HookKind(self._identity.kind).value

    # --- queries ---

    def is_claude_code_installed(self) -> bool:
        return self._claude_dir.is_dir()

    def validate_settings(self) -> HookManagerError | None:
        """Return the read error for settings.json, or None if it is absent or valid."""
        try:
            read_settings(self.settings_path)
        except HookManagerError as e:
            return e
        return None

    def is_hook_configured(self) -> bool:
        array = self._read_hook_array_quietly()
        return array is not None and find_first_index(self._identity, array) is not None

    def needs_hook_update(self) -> bool:
        return self.hook_status().needs_update

    def hook_status(self) -> HookStatus:
        array = self._read_hook_array_quietly()
        if array is None:
            return HookStatus()
        status = HookStatus(notifier_path=self._resolve_notifier_quietly())
        for index, entry in enumerate(array):
            commands = matching_commands(self._identity, entry)
            if not commands:
                continue
            status.matching_indices.append(index)
            status.commands.extend(commands)
        status.has_current_path = (
            status.notifier_path is not None and status.notifier_path in status.commands
        )
        return status

    # --- mutations ---

    def install_hook(self) -> None:
        """Append this app's entry unless one is already present.

        Raises:
            NotifierNotFoundError: The notifier provider returned None.
            SettingsCorruptedError, SettingsUnreadableError: settings.json is bad.
            UnexpectedStructureError: `hooks` or `hooks[<kind>]` has the wrong JSON type.
            SettingsLockTimeoutError: Another writer held the lock too long.
        """
        notifier_path = self._require_notifier_path()
        self._claude_dir.mkdir(parents=True, exist_ok=True)
        with self._coordinated():
            settings = read_settings_or_empty(self.settings_path)
            existing = hook_array(settings, self._kind)
            if existing is not None and find_first_index(self._identity, existing) is not None:
                logger.debug("%s hook already configured", self._identity.app_name)
                return
            array = writable_hook_array(settings, self._kind, path=self.settings_path)
            array.append(self._new_entry(notifier_path))
            write_settings(self.settings_path, settings)
            logger.debug("Installed %s hook -> %s", self._identity.app_name, notifier_path)

    def remove_hook(self) -> None:
        """Remove every entry that belongs to this app; other elements keep their order."""
        if not self._claude_dir.is_dir():
            return
        with self._coordinated():
            settings = read_settings(self.settings_path)
            if settings is None:
                return
            array = hook_array(settings, self._kind)
            if array is None:
                return
            indices = find_all_indices(self._identity, array)
            if not indices:
                return
            remove_indices(array, indices)
            write_settings(self.settings_path, settings)
            logger.debug("Removed %d %s hook entries", len(indices), self._identity.app_name)

    def cleanup_and_install_hook(self) -> None:
        """Replace all of this app's entries with one fresh entry, in one locked step.

        Collapses duplicates and fixes stale paths. Raises like install_hook.
        """
        notifier_path = self._require_notifier_path()
        self._claude_dir.mkdir(parents=True, exist_ok=True)
        with self._coordinated():
            settings = read_settings_or_empty(self.settings_path)
            array = writable_hook_array(settings, self._kind, path=self.settings_path)
            indices = find_all_indices(self._identity, array)
            remove_indices(array, indices)
            array.append(self._new_entry(notifier_path))
            write_settings(self.settings_path, settings)
            logger.debug(
                "Reinstalled %s hook -> %s (replaced %d)",
                self._identity.app_name,
                notifier_path,
                len(indices),
            )

    # --- helpers ---

    def _coordinated(self) -> AbstractContextManager[None]:
        return coordinated_access(self.settings_path, timeout=self._lock_timeout)

    def _require_notifier_path(self) -> str:
        path = self._notifier_path_provider()
        if path is None:
            raise NotifierNotFoundError(self._identity.app_name)
        return path

    def _new_entry(self, notifier_path: str) -> dict[str, Any]:
        return HookMatcherEntry.for_identity(self._identity, notifier_path).to_json()

    def _resolve_notifier_quietly(self) -> str | None:
        try:
            return self._notifier_path_provider()
        except Exception:
            logger.debug("Notifier provider failed; treating as absent", exc_info=True)
            return None

    def _read_hook_array_quietly(self) -> list[Any] | None:
        try:
            settings = read_settings(self.settings_path)
        except HookManagerError:
            return None
        if settings is None:
            return None
        return hook_array(settings, self._kind)
