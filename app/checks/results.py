from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CheckResult:
    success: bool
    http_status: int = 0
    body: str | None = None
    error: str | None = None
