from __future__ import annotations

import logging
import time
from typing import Iterable

import requests

from app.checks.results import CheckResult
from app.config import settings

logger = logging.getLogger(__name__)

# Single-byte reads so a trickling body cannot hold a read past the deadline.
READ_CHUNK_BYTES = 1


def _failure(method: str, url: str, error: str) -> CheckResult:
    logger.warning("Probe %s %s failed: %s", method, url, error)
    return CheckResult(success=False, http_status=0, error=error)


def run_probe(
    url: str,
    method: str = "GET",
    headers: dict[str, str] | None = None,
    expected_statuses: Iterable[int] = (200,),
) -> CheckResult:
    """
    Issue a single request and normalize the outcome into a CheckResult.
    Transport errors never propagate; they come back with http_status=0.
    The whole exchange, body included, is bounded by PROBE_TIMEOUT_S.
    """
    total_s = settings.PROBE_TIMEOUT_S
    deadline = time.perf_counter() + total_s
    try:
        r = requests.request(
            method,
            url,
            headers=headers,
            timeout=(settings.PROBE_CONNECT_TIMEOUT_S, total_s),
            allow_redirects=False,
            stream=True,
        )
        try:
            chunks: list[bytes] = []
            for chunk in r.iter_content(chunk_size=READ_CHUNK_BYTES):
                if time.perf_counter() > deadline:
                    return _failure(method, url, f"Timeout: no complete response within {total_s}s")
                chunks.append(chunk)
        finally:
            r.close()
    except requests.RequestException as e:
        return _failure(method, url, f"{e.__class__.__name__}: {e}")

    if time.perf_counter() > deadline:
        return _failure(method, url, f"Timeout: no complete response within {total_s}s")

    body = b"".join(chunks).decode(r.encoding or "utf-8", errors="replace")
    ok = r.status_code in tuple(expected_statuses)
    if ok:
        logger.debug("Probe %s %s returned HTTP %s", method, url, r.status_code)
    else:
        logger.warning("Probe %s %s returned unexpected HTTP %s", method, url, r.status_code)
    return CheckResult(success=ok, http_status=r.status_code, body=body)


def run_get(url: str) -> CheckResult:
    return run_probe(url)


def run_cors_preflight(url: str, origin: str) -> CheckResult:
    return run_probe(
        url,
        method="OPTIONS",
        headers={"Origin": origin},
        expected_statuses=(200, 204),
    )
