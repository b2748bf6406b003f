"""Default lookup of the notifier executable written into hook commands."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

NotifierPathProvider = Callable[[], str | None]

DEFAULT_NOTIFIER_NAME = "notifier"


def bundle_notifier_path(bundle_path: Path, name: str = DEFAULT_NOTIFIER_NAME) -> str | None:
    """`<bundle>/Contents/MacOS/<name>` if that file exists."""
    candidate = Path(bundle_path) / "Contents" / "MacOS" / name
    return str(candidate) if candidate.is_file() else None


def _enclosing_app_bundle(path: Path) -> Path | None:
    for parent in path.parents:
        if parent.suffix == ".app":
            return parent
    return None


def default_notifier_path_provider() -> str | None:
    """Locate the notifier from the running application's install location.

    Inside a macOS `.app` bundle this is `Contents/MacOS/notifier`; otherwise
    a `notifier` file next to the launched script.
    """
    bundle = _enclosing_app_bundle(Path(sys.executable).resolve())
    if bundle is not None:
        return bundle_notifier_path(bundle)
    if not sys.argv or not sys.argv[0]:
        return None
    candidate = Path(sys.argv[0]).resolve().parent / DEFAULT_NOTIFIER_NAME
    return str(candidate) if candidate.is_file() else None


def constant_provider(path: str | None) -> NotifierPathProvider:
    return lambda: path
