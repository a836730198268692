from __future__ import annotations

import html
from string import Template

from app.checks.results import CheckResult
from app.config import settings
from app.formatting import format_checked_at, status_class, status_label
from app.models import StatusReport

PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
    <title>Contact Form Status</title>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
        body {
            font-family: system-ui, -apple-system, sans-serif;
            max-width: 600px;
            margin: 50px auto;
            padding: 20px;
            background: #f5f5f5;
        }
        .status-card {
            background: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        h1 { color: #333; margin-bottom: 30px; }
        .status-item {
            margin: 20px 0;
            padding: 15px;
            border-radius: 5px;
            display: flex;
            justify-content: space-between;
            align-items: center;
        }
        .status-healthy { background: #d4edda; color: #155724; }
        .status-error { background: #f8d7da; color: #721c24; }
        .timestamp { font-size: 0.9em; color: #666; margin-top: 20px; }
        button {
            background: #007bff;
            color: white;
            border: none;
            padding: 10px 20px;
            border-radius: 5px;
            cursor: pointer;
            font-size: 16px;
        }
        button:hover { background: #0056b3; }
        .details {
            margin-top: 20px;
            padding: 15px;
            background: #f8f9fa;
            border-radius: 5px;
            font-size: 0.9em;
        }
    </style>
</head>
<body>
    <div class="status-card">
        <h1>🔍 Contact Form Status</h1>
$rows
        <div class="timestamp">
            Last checked: $checked_at
        </div>

        <button onclick="location.reload()">Refresh Status</button>

        <div class="details">
            <strong>Service Details:</strong><br>
$health_body
            <strong>Service URLs:</strong><br>
$service_urls
        </div>
    </div>
</body>
</html>
"""
)

ROW_TEMPLATE = Template(
    """        <div class="status-item $css_class">
            <span>$name</span>
            <span>$label</span>
        </div>
"""
)


def _render_row(name: str, res: CheckResult, ok_text: str) -> str:
    return ROW_TEMPLATE.substitute(
        css_class=status_class(res),
        name=html.escape(name),
        label=html.escape(status_label(res, ok_text)),
    )


def _render_health_body(res: CheckResult) -> str:
    if not res.success:
        return ""
    body = html.escape(res.body or "")
    return f"            Health Response: <code>{body}</code><br>\n"


def render_status_page(report: StatusReport) -> str:
    """
    Pure function from a StatusReport to the full HTML document.
    The health response body is shown only when the health check succeeded.
    """
    rows = "".join(
        [
            _render_row("Health Check", report.health, "Healthy"),
            _render_row("Token Endpoint", report.token, "Working"),
            _render_row("CORS Configuration", report.cors, "Configured"),
        ]
    )
    service_urls = "<br>\n".join(
        f"            <code>{html.escape(url)}</code>" for url in settings.PUBLIC_SERVICE_URLS
    )
    return PAGE_TEMPLATE.substitute(
        rows=rows,
        checked_at=html.escape(format_checked_at(report.checked_at)),
        health_body=_render_health_body(report.health),
        service_urls=service_urls,
    )
