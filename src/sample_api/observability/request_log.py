"""Reading back the append-only request log."""

from __future__ import annotations

from collections import deque
from pathlib import Path


def recent_lines(path: Path, limit: int = 50) -> list[str]:
    """Return the last ``limit`` non-blank lines of ``path``.

    A missing file yields an empty list; any other I/O error propagates.
    """
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as fh:
        tail = deque((line.rstrip("\n") for line in fh if line.strip()), maxlen=limit)
    return list(tail)
