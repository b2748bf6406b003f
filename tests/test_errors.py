from pathlib import Path

import pytest

from cc_hook_installer.errors import (
    HookManagerError,
    NotifierNotFoundError,
    SettingsCorruptedError,
    SettingsLockTimeoutError,
    SettingsUnreadableError,
    UnexpectedStructureError,
)


def test_corrupted_message():
    err = SettingsCorruptedError()
    assert str(err) == "Claude Code settings.json is corrupted or not valid JSON."
    assert err.path is None


def test_unreadable_with_path():
    p = Path("/some/settings.json")
    err = SettingsUnreadableError(path=p)
    assert err.path == p
    assert "Check file permissions" in str(err)


def test_unexpected_structure_names_key():
    err = UnexpectedStructureError("hooks.PreToolUse")
    assert err.key == "hooks.PreToolUse"
    assert "hooks.PreToolUse" in str(err)


def test_notifier_not_found_carries_app_name():
    err = NotifierNotFoundError("TestApp")
    assert err.app_name == "TestApp"
    assert str(err) == "Could not find TestApp app bundle or notifier CLI."


def test_lock_timeout_message():
    err = SettingsLockTimeoutError(Path("/x/settings.json.lock"), 0.5)
    assert err.timeout == 0.5
    assert "0.5s" in str(err)


@pytest.mark.parametrize(
    "err",
    [
        SettingsCorruptedError(),
        SettingsUnreadableError(),
        UnexpectedStructureError("hooks"),
        NotifierNotFoundError("TestApp"),
        SettingsLockTimeoutError(Path("/x"), 1.0),
    ],
)
def test_all_errors_share_base(err):
    with pytest.raises(HookManagerError):
        raise err
