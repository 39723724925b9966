"""Baseline: Python's built-in `sorted` (Timsort). Takes no config."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._config import check_config

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    check_config("builtin_timsort", config)
    return sorted(a)
