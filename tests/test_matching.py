"""Tests for entry recognition over raw hook arrays."""

from cc_hook_installer.manager._matching import (
    entry_commands,
    find_all_indices,
    find_first_index,
    matching_commands,
    remove_indices,
)
from cc_hook_installer.models.hook import HookIdentity

UPS = HookIdentity.for_user_prompt_submit("TestApp", ["TestApp.app"])
PTU = HookIdentity.for_pre_tool_use("PlanApp", ["PlanApp.app"], matcher="ExitPlanMode")


def _nested(command, matcher=None):
    entry = {"hooks": [{"command": command, "type": "command"}]}
    if matcher is not None:
        entry["matcher"] = matcher
    return entry


def test_entry_commands_flat_then_nested():
    entry = {
        "command": "/flat",
        "hooks": [
            {"command": "/a"},
            "junk",
            {"type": "command"},
            {"command": 5},
            {"command": "/b"},
        ],
    }
    assert list(entry_commands(entry)) == ["/flat", "/a", "/b"]


def test_nested_hooks_not_a_list_is_ignored():
    assert list(entry_commands({"hooks": {"command": "/a"}})) == []


def test_flat_entry_matches():
    entry = {"command": "/Applications/TestApp.app/Contents/MacOS/notifier", "type": "command"}
    assert matching_commands(UPS, entry) == [entry["command"]]


def test_non_dict_elements_skipped():
    array = ["a string", 123, None, ["nested"], _nested("/x/TestApp.app/notifier")]
    assert find_all_indices(UPS, array) == [4]


def test_all_indices_ascending():
    array = [
        _nested("/old/TestApp.app/notifier"),
        _nested("/other/app"),
        {"command": "/new/testapp.app/notifier"},
    ]
    assert find_all_indices(UPS, array) == [0, 2]
    assert find_first_index(UPS, array) == 0


def test_no_match_returns_none():
    assert find_first_index(UPS, [_nested("/other/app")]) is None
    assert find_first_index(UPS, []) is None


def test_entry_matching_both_shapes_counts_once():
    entry = {
        "command": "/x/TestApp.app/notifier",
        "hooks": [{"command": "/x/TestApp.app/notifier"}],
    }
    assert find_all_indices(UPS, [entry]) == [0]
    assert len(matching_commands(UPS, entry)) == 2


def test_pre_tool_use_requires_equal_matcher():
    array = [
        _nested("/x/PlanApp.app/notifier", matcher="DifferentMatcher"),
        _nested("/x/PlanApp.app/notifier"),
        _nested("/x/PlanApp.app/notifier", matcher="exitplanmode"),
        {"matcher": 7, "hooks": [{"command": "/x/PlanApp.app/notifier"}]},
        _nested("/x/PlanApp.app/notifier", matcher="ExitPlanMode"),
    ]
    assert find_all_indices(PTU, array) == [4]


def test_user_prompt_submit_ignores_matcher():
    array = [_nested("/x/TestApp.app/notifier", matcher="Anything")]
    assert find_all_indices(UPS, array) == [0]


def test_remove_indices_preserves_order():
    array = ["a", 1, "b", 2, "c"]
    remove_indices(array, [1, 3])
    assert array == ["a", "b", "c"]
