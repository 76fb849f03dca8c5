"""
SOLE RESPONSIBILITY: Synchronous, I/O-free syntax checks for candidate server URLs.
"""

import logging

import httpx

from .error_codes import ErrorKind
from .models import ValidationResult

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")
MAX_PORT = 65535
# WHATWG forbidden domain code points; "%" catches a space httpx percent-encoded
FORBIDDEN_HOST_CHARS = set("#%/:<>?@[\\]^|")


def parse_absolute_url(raw: str) -> httpx.URL:
    """
    Parse raw text as an absolute URL.
    Raises httpx.InvalidURL when the text has no scheme, or names a web scheme
    without a host.
    """
    url = httpx.URL(raw.strip())
    if not url.scheme:
        raise httpx.InvalidURL(f"Missing scheme in {raw!r}")
    if url.scheme in SUPPORTED_SCHEMES and not url.host:
        raise httpx.InvalidURL(f"Missing host in {raw!r}")
    if url.port is not None and not 0 <= url.port <= MAX_PORT:
        raise httpx.InvalidURL(f"Port out of range in {raw!r}")
    # IPv6 literals are checked by httpx itself
    if ":" not in url.host and any(c.isspace() or c in FORBIDDEN_HOST_CHARS for c in url.host):
        raise httpx.InvalidURL(f"Invalid host in {raw!r}")
    return url


def validate_server_url(candidate: str) -> ValidationResult:
    """
    Check that candidate is a non-empty absolute http(s) URL.
    Path and query are allowed; nothing is fetched.
    """
    logger.debug(f"Validating server URL: {candidate!r}")

    if not candidate or not candidate.strip():
        logger.debug("Server URL is empty")
        return ValidationResult(valid=False, error=ErrorKind.EMPTY_URL)

    try:
        url = parse_absolute_url(candidate)
    except httpx.InvalidURL as e:
        logger.debug(f"Server URL parsing failed: {e}")
        return ValidationResult(valid=False, error=ErrorKind.MALFORMED_URL)

    logger.debug(f"Parsed server URL: scheme={url.scheme} host={url.host} port={url.port} path={url.path}")

    if url.scheme not in SUPPORTED_SCHEMES:
        logger.debug(f"Unsupported scheme: {url.scheme}")
        return ValidationResult(valid=False, error=ErrorKind.UNSUPPORTED_SCHEME)

    return ValidationResult(valid=True)
