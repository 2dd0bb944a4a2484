"""Small file-system helpers used for writing receipts."""

from __future__ import annotations

import os
import time
from contextlib import suppress

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_iso() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(TIMESTAMP_FORMAT, time.localtime())


def parent_dir(path: str) -> str:
    """Return everything before the last ``/`` or ``\\`` in ``path``, or ``""``."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return "" if cut < 0 else path[:cut]


def ensure_dir(directory: str | os.PathLike) -> None:
    """Create ``directory`` and its parents where missing; failures are ignored."""
    directory = os.fspath(directory)
    if not directory:
        return
    with suppress(OSError):
        os.makedirs(directory, exist_ok=True)


def write_text(path: str | os.PathLike, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories first."""
    path = os.fspath(path)
    ensure_dir(parent_dir(path))
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        raise OSError(f"Failed to open: {path}") from exc