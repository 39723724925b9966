"""
Timing harness for the algorithms in `selsort.algorithms`.

One sample is one call to `sort(a, config=...)` timed with
`time.perf_counter_ns`. Copying the input, warmup and GC handling all happen
outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # one entry per completed call
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # set when status == "error"
        "timed_out_on_repeat": int | None,  # 0-based index of the slow call
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[int]],
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
) -> Dict[str, Any]:
    """
    Collect up to `repeats` timings of ``algo_fn(a, config=config)``.

    Sampling stops early when one call takes longer than `timeout_seconds`
    (status "timeout") or raises (status "error"). Samples gathered before
    that point are kept. With `defensive_copy` every call, warmup included,
    gets its own copy of `a`. With `disable_gc` the collector is run once and
    switched off for the timed loop, then switched back on only if it was on.

    Raises
    ------
    ValueError
        If `repeats` is negative or `timeout_seconds` is not positive.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples: List[int] = []
    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": samples,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    def _arg() -> List[int]:
        return list(a) if defensive_copy else a

    if warmup and repeats > 0:
        try:
            algo_fn(_arg(), config=config)
        except Exception as e:
            result.update(status="error", error=f"warmup failed: {e!r}")
            return result

    limit_ns = int(timeout_seconds * 1e9)
    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        for r in range(repeats):
            arg = _arg()
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                elapsed = time.perf_counter_ns() - t0
            except Exception as e:
                result.update(status="error", error=f"run failed at repeat {r}: {e!r}")
                break
            samples.append(elapsed)
            if elapsed > limit_ns:
                result.update(status="timeout", timed_out_on_repeat=r)
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result
