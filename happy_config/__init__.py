"""Happy Config - server URL settings for the Happy client.

Validates, probes and persists a custom backend server override.
"""

# Package metadata
__version__ = "0.3.0"
