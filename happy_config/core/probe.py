"""
SOLE RESPONSIBILITY: Confirms a candidate URL points at a compatible Happy server
with one best-effort GET. No retries, no backoff, no timeout override.
"""

import logging
import time
from typing import Optional

import httpx

from .error_codes import ErrorKind
from .models import ProbeResult

logger = logging.getLogger(__name__)

SERVER_GREETING = "Welcome to Happy Server!"
PROBE_HEADERS = {"Accept": "text/plain"}


async def probe_server(url: str, client: Optional[httpx.AsyncClient] = None) -> ProbeResult:
    """
    Issue a single GET to url and check the body for the server greeting.

    Args:
        url: Syntactically validated server URL
        client: Optional client to reuse; a short-lived one is created otherwise

    Returns:
        ProbeResult with ok=True, or the ErrorKind describing the failure
    """
    url = url.strip()
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            return await _probe(own_client, url)
    return await _probe(client, url)


async def _probe(client: httpx.AsyncClient, url: str) -> ProbeResult:
    logger.debug(f"Probing server {url}")
    start = time.monotonic()

    try:
        response = await client.get(url, headers=PROBE_HEADERS)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"Probe of {url} failed: {type(e).__name__}: {e}")
        return ProbeResult(ok=False, error=ErrorKind.CONNECTION_FAILED)

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.debug(
        f"Probe of {url} returned {response.status_code} in {elapsed_ms}ms "
        f"(content-type={response.headers.get('content-type')}, server={response.headers.get('server')})"
    )

    if not response.is_success:
        return ProbeResult(ok=False, error=ErrorKind.SERVER_ERROR, status_code=response.status_code, elapsed_ms=elapsed_ms)

    text = response.text
    logger.debug(f"Probe response preview: {text[:100]!r}")

    if SERVER_GREETING not in text:
        logger.warning(f"Server at {url} did not send the expected greeting")
        return ProbeResult(
            ok=False,
            error=ErrorKind.NOT_A_COMPATIBLE_SERVER,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )

    return ProbeResult(ok=True, status_code=response.status_code, elapsed_ms=elapsed_ms)
