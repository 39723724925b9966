"""
Selection sort, measure-based.

Repeats `select` on the shrinking remainder until it is empty. Takes no
config and always returns a sorted permutation of its input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from selsort.core import sort as _selsort

from ._config import check_config

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    check_config("selection_sort", config)
    return _selsort(a)
