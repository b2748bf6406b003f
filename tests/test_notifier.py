import sys

from cc_hook_installer.manager._notifier import (
    bundle_notifier_path,
    constant_provider,
    default_notifier_path_provider,
)


def _make_bundle(tmp_path):
    macos = tmp_path / "TestApp.app" / "Contents" / "MacOS"
    macos.mkdir(parents=True)
    (macos / "TestApp").write_text("")
    (macos / "notifier").write_text("")
    return tmp_path / "TestApp.app"


def test_bundle_notifier_path_exists(tmp_path):
    bundle = _make_bundle(tmp_path)
    assert bundle_notifier_path(bundle) == str(bundle / "Contents" / "MacOS" / "notifier")


def test_bundle_notifier_path_missing(tmp_path):
    bundle = _make_bundle(tmp_path)
    assert bundle_notifier_path(bundle, name="other") is None


def test_default_provider_inside_bundle(tmp_path, monkeypatch):
    bundle = _make_bundle(tmp_path).resolve()
    monkeypatch.setattr(sys, "executable", str(bundle / "Contents" / "MacOS" / "TestApp"))
    assert default_notifier_path_provider() == str(bundle / "Contents" / "MacOS" / "notifier")


def test_default_provider_beside_script(tmp_path, monkeypatch):
    (tmp_path / "notifier").write_text("")
    monkeypatch.setattr(sys, "executable", str(tmp_path / "python"))
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "app.py")])
    assert default_notifier_path_provider() == str((tmp_path / "notifier").resolve())


def test_default_provider_not_found(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "executable", str(tmp_path / "python"))
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "app.py")])
    assert default_notifier_path_provider() is None


def test_constant_provider():
    assert constant_provider("/x/notifier")() == "/x/notifier"
    assert constant_provider(None)() is None
