"""Cross-process exclusive access to settings.json via an advisory lock file."""

from __future__ import annotations

import fcntl
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..errors import SettingsLockTimeoutError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 10.0
_POLL_INTERVAL = 0.05


def lock_path_for(path: Path) -> Path:
    return path.with_name(path.name + ".lock")


@contextmanager
def coordinated_access(path: Path, timeout: float = DEFAULT_LOCK_TIMEOUT) -> Iterator[None]:
    """Hold an exclusive flock on `<path>.lock` for the duration of the block.

    Each call opens its own descriptor, so two calls in the same process block
    each other exactly like calls from different processes. The lock file's
    directory must already exist.

    Raises:
        SettingsLockTimeoutError: The lock was not acquired within `timeout` seconds.
    """
    lock_file = lock_path_for(path)
    with open(lock_file, "a") as f:
        deadline = time.monotonic() + timeout
        while True:
            try:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except BlockingIOError:
                if time.monotonic() >= deadline:
                    raise SettingsLockTimeoutError(lock_file, timeout) from None
                time.sleep(_POLL_INTERVAL)
        logger.debug("Acquired lock %s", lock_file)
        try:
            yield
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
            logger.debug("Released lock %s", lock_file)
