import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from app.config import settings
from app.rendering import render_status_page
from app.runner import run_status_checks

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Contact Form Status",
    version="1.0.0",
    description=(
        "Server-rendered status page that probes the local contact-form "
        "service's health, token and CORS preflight endpoints."
    ),
)


@app.get(
    "/",
    response_class=HTMLResponse,
    tags=["status"],
    summary="Status Page",
    description="Runs the three probes and renders the results. Always returns 200.",
)
def status_page() -> HTMLResponse:
    report = run_status_checks()
    logger.info(
        "Status page rendered: health=%s token=%s cors=%s",
        "ok" if report.health.success else report.health.http_status,
        "ok" if report.token.success else report.token.http_status,
        "ok" if report.cors.success else report.cors.http_status,
    )
    return HTMLResponse(
        content=render_status_page(report),
        status_code=200,
        media_type="text/html; charset=UTF-8",
    )


def run() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
