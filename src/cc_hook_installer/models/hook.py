"""Hook identity (what an app registers) and the entry shape written to settings.json."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Iterable


class HookKind(str, Enum):
    """Lifecycle point a hook is registered for. Values are settings.json keys."""

    USER_PROMPT_SUBMIT = "UserPromptSubmit"
    PRE_TOOL_USE = "PreToolUse"


class HookIdentity(BaseModel):
    """One app's hook registration. Build with the `for_*` factories.

    Each kind is its own subclass carrying exactly the fields valid for it, so a
    UserPromptSubmit identity with a matcher cannot be constructed.

    Attributes:
        app_name: Used in error messages only.
        identifiers: Case-insensitive substrings that recognize this app's
            command among other apps' entries. Several identifiers let old and
            new install paths match at the same time.
    """

    model_config = ConfigDict(frozen=True)
    app_name: str
    identifiers: tuple[Annotated[str, Field(min_length=1)], ...] = Field(min_length=1)

    def __init__(self, **data: Any) -> None:
        if type(self) is HookIdentity:
            raise TypeError(
                "HookIdentity is abstract; use for_user_prompt_submit() or for_pre_tool_use()"
            )
        super().__init__(**data)

    @classmethod
    def for_user_prompt_submit(
        cls, app_name: str, identifiers: Iterable[str]
    ) -> UserPromptSubmitIdentity:
        return UserPromptSubmitIdentity(app_name=app_name, identifiers=_as_tuple(identifiers))

    @classmethod
    def for_pre_tool_use(
        cls,
        app_name: str,
        identifiers: Iterable[str],
        matcher: str,
        timeout_seconds: int | None = 10,
    ) -> PreToolUseIdentity:
        return PreToolUseIdentity(
            app_name=app_name,
            identifiers=_as_tuple(identifiers),
            matcher=matcher,
            timeout_seconds=timeout_seconds,
        )

    def matches_command(self, command: str) -> bool:
        lowered = command.lower()
        return any(identifier.lower() in lowered for identifier in self.identifiers)


class UserPromptSubmitIdentity(HookIdentity):
    kind: Literal[HookKind.USER_PROMPT_SUBMIT] = HookKind.USER_PROMPT_SUBMIT
    matcher: None = None
    timeout_seconds: None = None


class PreToolUseIdentity(HookIdentity):
    """PreToolUse registration; only entries with an equal `matcher` can be ours."""

    kind: Literal[HookKind.PRE_TOOL_USE] = HookKind.PRE_TOOL_USE
    matcher: str
    timeout_seconds: int | None = 10


AnyHookIdentity = Annotated[
    UserPromptSubmitIdentity | PreToolUseIdentity,
    Field(discriminator="kind"),
]


def _as_tuple(identifiers: Iterable[str]) -> tuple[str, ...]:
    # A bare string would otherwise be split into characters.
    if isinstance(identifiers, str):
        return (identifiers,)
    return tuple(identifiers)


class HookCommand(BaseModel):
    """Inner `{"command", "type", "timeout"?}` object of a nested entry."""

    type: Literal["command"] = "command"
    command: str
    timeout: int | None = None


class HookMatcherEntry(BaseModel):
    """Nested-shape element of a `hooks[<kind>]` array. The only shape ever written."""

    matcher: str | None = None
    hooks: list[HookCommand]

    @classmethod
    def for_identity(
        cls, identity: UserPromptSubmitIdentity | PreToolUseIdentity, notifier_path: str
    ) -> HookMatcherEntry:
        command = HookCommand(command=notifier_path, timeout=identity.timeout_seconds)
        return cls(matcher=identity.matcher, hooks=[command])

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
