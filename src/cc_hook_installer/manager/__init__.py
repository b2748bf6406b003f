"""Hook management API: detect, install, repair and remove an app's hook."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ._lock import DEFAULT_LOCK_TIMEOUT, coordinated_access
from ._manager import HookManager, HookStatus
from ._notifier import (
    NotifierPathProvider,
    bundle_notifier_path,
    constant_provider,
    default_notifier_path_provider,
)
from ._settings import read_settings, write_settings

if TYPE_CHECKING:
    from ..models.hook import AnyHookIdentity


def make_hook_manager(
    identity: AnyHookIdentity,
    claude_dir: Path | None = None,
    notifier_path: str | NotifierPathProvider | None = None,
) -> HookManager:
    """Build a HookManager for the current user.

    claude_dir: defaults to ~/.claude
    notifier_path: a fixed path, a provider callable, or None to locate the
        notifier from the running application's install location
    """
    claude_dir = Path(claude_dir) if claude_dir is not None else Path.home() / ".claude"
    if isinstance(notifier_path, str):
        provider = constant_provider(notifier_path)
    else:
        provider = notifier_path or default_notifier_path_provider
    return HookManager(identity, claude_dir=claude_dir, notifier_path_provider=provider)


__all__ = [
    "DEFAULT_LOCK_TIMEOUT",
    "HookManager",
    "HookStatus",
    "NotifierPathProvider",
    "bundle_notifier_path",
    "constant_provider",
    "coordinated_access",
    "default_notifier_path_provider",
    "make_hook_manager",
    "read_settings",
    "write_settings",
]
