from __future__ import annotations

from connchk.checks.results import CheckResult


def format_success(description: str, latency_ms: int) -> str:
    return f"Successfully connected to {description} in {latency_ms}ms"


def format_failure(description: str, detail: str) -> str:
    return f"Failed to connect to {description} with: {detail}"


def format_result(description: str, res: CheckResult) -> str:
    if res.ok:
        return format_success(description, res.latency_ms)
    return format_failure(description, res.error or "unknown error")
