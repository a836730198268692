from __future__ import annotations

from datetime import datetime

from app.checks.results import CheckResult


def status_class(res: CheckResult) -> str:
    return "status-healthy" if res.success else "status-error"


def status_label(res: CheckResult, ok_text: str) -> str:
    if res.success:
        return f"✅ {ok_text}"
    return f"❌ Error: {res.http_status}"


def format_checked_at(ts: datetime) -> str:
    # Local server time, e.g. "2024-05-01 13:37:00 CEST"
    return ts.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()
