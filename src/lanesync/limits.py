"""Numeric limits and timeouts - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_build() -> bool:
    """Check if this is a debug/dev build.

    Debug mode is enabled when:
    1. LANESYNC_DEBUG env var is set to "1" or "true" (explicit override)
    2. Version contains "dev", "a", "b" or "rc" (pre-release)
    """
    env_debug = os.environ.get("LANESYNC_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False

    try:
        from importlib.metadata import version

        pkg_version = version("lanesync")
    except Exception:
        pkg_version = "dev"

    version_lower = pkg_version.lower()
    return any(indicator in version_lower for indicator in ("dev", "a", "b", "rc"))


DEBUG_BUILD: bool = _is_debug_build()
"""True for pre-release/dev builds, False for production releases."""


HTTP_TIMEOUT = 10.0
SHUTDOWN_TIMEOUT = 5.0

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_NOTIFICATIONS = 200
