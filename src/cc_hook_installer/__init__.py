"""Safe, idempotent registration of app hooks in Claude Code's settings.json."""

import logging

from .errors import (
    HookManagerError,
    NotifierNotFoundError,
    SettingsCorruptedError,
    SettingsLockTimeoutError,
    SettingsUnreadableError,
    UnexpectedStructureError,
)
from .manager import (
    HookManager,
    HookStatus,
    bundle_notifier_path,
    default_notifier_path_provider,
    make_hook_manager,
)
from .models import (
    AnyHookIdentity,
    HookCommand,
    HookIdentity,
    HookKind,
    HookMatcherEntry,
    PreToolUseIdentity,
    UserPromptSubmitIdentity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnyHookIdentity",
    "HookCommand",
    "HookIdentity",
    "HookKind",
    "HookManager",
    "HookManagerError",
    "HookMatcherEntry",
    "HookStatus",
    "NotifierNotFoundError",
    "PreToolUseIdentity",
    "SettingsCorruptedError",
    "SettingsLockTimeoutError",
    "SettingsUnreadableError",
    "UnexpectedStructureError",
    "UserPromptSubmitIdentity",
    "bundle_notifier_path",
    "default_notifier_path_provider",
    "make_hook_manager",
]
