from .hook import (
    AnyHookIdentity,
    HookCommand,
    HookIdentity,
    HookKind,
    HookMatcherEntry,
    PreToolUseIdentity,
    UserPromptSubmitIdentity,
)

__all__ = [
    "AnyHookIdentity",
    "HookCommand",
    "HookIdentity",
    "HookKind",
    "HookMatcherEntry",
    "PreToolUseIdentity",
    "UserPromptSubmitIdentity",
]
