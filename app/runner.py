from __future__ import annotations

from app.checks.http_check import run_cors_preflight, run_get
from app.config import settings
from app.models import StatusReport


def run_status_checks() -> StatusReport:
    # Probes run one after another; each blocks until it completes or times out.
    health = run_get(settings.HEALTH_URL)
    token = run_get(settings.TOKEN_URL)
    cors = run_cors_preflight(settings.CONTACT_URL, origin=settings.CORS_ORIGIN)
    return StatusReport(health=health, token=token, cors=cors)
