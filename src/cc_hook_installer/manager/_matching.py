"""Recognize an app's own entries inside a `hooks[<kind>]` array."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..models.hook import HookKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.hook import AnyHookIdentity


def entry_commands(entry: dict[str, Any]) -> Iterator[str]:
    """Yield every command string of an entry, flat shape first, then nested."""
    command = entry.get("command")
    if isinstance(command, str):
        yield command
    nested = entry.get("hooks")
    if isinstance(nested, list):
        for hook in nested:
            if isinstance(hook, dict) and isinstance(hook.get("command"), str):
                yield hook["command"]


def matching_commands(identity: AnyHookIdentity, entry: Any) -> list[str]:
    """Commands in `entry` that belong to `identity`. Empty if the entry is not ours."""
    if not isinstance(entry, dict):
        return []
    if identity.kind == HookKind.PRE_TOOL_USE:
        matcher = entry.get("matcher")
        if not isinstance(matcher, str) or matcher != identity.matcher:
            return []
    return [c for c in entry_commands(entry) if identity.matches_command(c)]


def find_all_indices(identity: AnyHookIdentity, array: list[Any]) -> list[int]:
    """Ascending indices of every entry that belongs to `identity`, each index once."""
    return [i for i, entry in enumerate(array) if matching_commands(identity, entry)]


def find_first_index(identity: AnyHookIdentity, array: list[Any]) -> int | None:
    indices = find_all_indices(identity, array)
    return indices[0] if indices else None


def remove_indices(array: list[Any], indices: list[int]) -> None:
    # Reverse order keeps the remaining indices valid.
    for index in reversed(indices):
        del array[index]
