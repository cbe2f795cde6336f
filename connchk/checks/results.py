from __future__ import annotations

from dataclasses import dataclass


class CheckFailure(RuntimeError):
    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.status_code = status_code


@dataclass
class CheckResult:
    ok: bool
    latency_ms: int
    status_code: int | None = None
    error: str | None = None
