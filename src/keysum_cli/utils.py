from __future__ import annotations
from pathlib import Path
from typing import Optional
import sys


def read_input(path: Optional[Path]) -> str:
    """Read a UTF-8 text file, or stdin when no path (or "-") is given."""
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def clamp_text(text: str, limit: int) -> str:
    if limit <= 0:
        return text
    return text[:limit]
