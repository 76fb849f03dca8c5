"""
SOLE RESPONSIBILITY: Defines the Pydantic data contracts returned by the validator,
the prober and the config store.
"""

from typing import Optional

from pydantic import BaseModel

from .error_codes import ErrorKind


class ValidationResult(BaseModel):
    """Outcome of a purely syntactic server URL check."""

    valid: bool
    error: Optional[ErrorKind] = None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


class ProbeResult(BaseModel):
    """Outcome of a single liveness round trip to a candidate server."""

    ok: bool
    error: Optional[ErrorKind] = None
    status_code: Optional[int] = None  # None when no response was received
    elapsed_ms: Optional[int] = None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


class ResolvedServerInfo(BaseModel):
    """Host details derived from the effective server URL, never stored."""

    hostname: str
    port: Optional[int] = None
    is_custom: bool
