"""Stderr logging and LangSmith tracing for lesson phases."""

import functools
import sys
import time
from typing import Any, Callable, TypeVar

from langsmith import traceable

F = TypeVar("F", bound=Callable[..., Any])

PREFIXES = {
    "info": "ℹ️",
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "start": "🚀",
    "end": "🏁",
    "red": "🔴",
    "green": "🟢",
}


def _log(message: str, level: str = "info", node: str = "node") -> None:
    print(f"{PREFIXES.get(level, '')} [{node}] {message}", file=sys.stderr, flush=True)


def format_elapsed(elapsed: float) -> str:
    """Seconds above one second, milliseconds below."""
    return f"{elapsed:.2f}s" if elapsed >= 1 else f"{elapsed * 1000:.0f}ms"


def describe_stage(state: dict) -> str:
    """'stage 2/3 (numeric-strings)' for the stage a state points at."""
    stages = state.get("lesson", {}).get("stages", [])
    index = state.get("stage_index", 0)
    if not stages:
        return "no lesson"
    if index >= len(stages):
        return f"all {len(stages)} stages"
    return f"stage {index + 1}/{len(stages)} ({stages[index].get('name', '?')})"


def traced_node(phase: str) -> Callable[[F], F]:
    """Trace a workflow node in LangSmith and log its stage, timing and verdict.

    A node reports its verdict through a ``<phase>_ok`` key; when present it
    is logged as passed or failed.

    Example:
        @traced_node("green")
        def green_node(state: LessonState) -> dict:
            ...
    """

    def decorator(func: F) -> F:
        traced_func = traceable(name=phase, run_type="chain")(func)

        @functools.wraps(func)
        def wrapper(state: dict, *args: Any, **kwargs: Any) -> dict:
            _log(f"Starting {describe_stage(state)}", "start", phase)
            start_time = time.perf_counter()

            try:
                result = traced_func(state, *args, **kwargs)
            except Exception as e:
                elapsed = format_elapsed(time.perf_counter() - start_time)
                _log(f"Failed after {elapsed}: {e}", "error", phase)
                raise

            elapsed = format_elapsed(time.perf_counter() - start_time)
            verdict = result.get(f"{phase}_ok") if isinstance(result, dict) else None
            if verdict is None:
                _log(f"Completed in {elapsed}", "success", phase)
            elif verdict:
                _log(f"Passed in {elapsed}", "success", phase)
            else:
                _log(f"Did not pass ({elapsed})", "warning", phase)
            return result

        return wrapper  # type: ignore

    return decorator


def log_node_event(node: str, event: str, level: str = "info", **data: Any) -> None:
    """Log a custom event from within a node.

    Example:
        log_node_event("red", "new tests fail as expected", "red", stage="two-numbers")
    """
    if data:
        data_str = ", ".join(f"{k}={v}" for k, v in data.items())
        event = f"{event} ({data_str})"
    _log(event, level, node)
