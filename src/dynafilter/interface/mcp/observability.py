"""Tool call logging and in-memory counters for the MCP surface."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

_LOGGER = logging.getLogger("dynafilter.mcp")

# tool_calls / errors: per-tool counts; records_matched: per-tool sum of matched_count
METRICS: dict[str, dict[str, int]] = {"tool_calls": {}, "errors": {}, "records_matched": {}}


def _bump(counter: str, tool: str, amount: int = 1) -> None:
    METRICS[counter][tool] = METRICS[counter].get(tool, 0) + amount


def log_tool_invocation(
    tool: str,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured log line for a tool call and update the counters."""
    payload: dict[str, Any] = {
        "tool": tool,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.log(logging.WARNING if error else logging.INFO, "tool_invocation", extra=payload)

    _bump("tool_calls", tool)
    if error:
        _bump("errors", tool)
    matched = payload.get("matched_count")
    if isinstance(matched, int):
        _bump("records_matched", tool, matched)


@contextmanager
def tool_timer(tool: str) -> Iterator[dict[str, Any]]:
    """Time a tool body and log it on exit.

    The yielded dict is the log payload: set ``error`` to mark the call failed,
    anything else is logged as an extra field. An exception escaping the body
    is recorded by type name and re-raised.
    """
    report: dict[str, Any] = {}
    start = time.monotonic()
    try:
        yield report
    except Exception as exc:
        report["error"] = type(exc).__name__
        raise
    finally:
        error = report.pop("error", None)
        log_tool_invocation(tool, (time.monotonic() - start) * 1000, error=error, extra=report or None)


def metrics_snapshot() -> dict[str, dict[str, int]]:
    return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    for counters in METRICS.values():
        counters.clear()
