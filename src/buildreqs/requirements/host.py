"""Host operating system gate."""

from __future__ import annotations

import sys

from buildreqs.exceptions import PlatformUnsupportedError

__all__ = [
    "REQUIRED_PLATFORM",
    "PLATFORM_UNSUPPORTED_MESSAGE",
    "current_platform",
    "check_os",
]

REQUIRED_PLATFORM = "darwin"

PLATFORM_UNSUPPORTED_MESSAGE = "Cordova tooling for OSX requires Apple OS X"


def current_platform() -> str:
    """Platform identifier of the running interpreter (e.g., "darwin")."""
    return sys.platform


async def check_os(platform: str | None = None) -> str:
    """Check that the host runs Apple OS X.

    Only inspects the platform identifier; never starts a process.

    Args:
        platform: Platform identifier to check. Defaults to current_platform().

    Returns:
        The platform identifier.

    Raises:
        PlatformUnsupportedError: On any other operating system.
    """
    platform = platform if platform is not None else current_platform()
    if platform != REQUIRED_PLATFORM:
        raise PlatformUnsupportedError(PLATFORM_UNSUPPORTED_MESSAGE, platform=platform)
    return platform
