from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.checks.results import CheckResult


class StatusReport(BaseModel):
    health: CheckResult
    token: CheckResult
    cors: CheckResult
    checked_at: datetime = Field(default_factory=lambda: datetime.now().astimezone())
