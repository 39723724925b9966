"""Shared config checking for algorithm modules."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


def check_config(
    algo: str, config: Optional[Dict[str, Any]], allowed: Iterable[str] = ()
) -> Dict[str, Any]:
    """Return `config` as a dict, raising ValueError on anything unexpected."""
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{algo}: config must be a dict or None; got {type(config).__name__}")
    unknown = sorted(set(config) - set(allowed))
    if unknown:
        raise ValueError(f"{algo}: unknown config keys {unknown}")
    return config
