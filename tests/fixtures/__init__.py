"""
Test fixtures and utilities for Happy Config testing.
"""

from .mocks import *
from .sample_data import *

__all__ = [
    "MockConfirm",
    "MockProber",
    "RecordingHandler",
    "make_client",
    "VALID_URLS",
    "INVALID_URLS",
    "GREETING_BODY",
]
