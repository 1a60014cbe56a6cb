"""
Platform identification
"""

import sys
from enum import Enum
from typing import Optional


class Platform(Enum):
    """Platforms with distinct desktop handling"""
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"


def detect_platform(platform_name: Optional[str] = None) -> Platform:
    """
    Map a ``sys.platform`` value to a Platform

    Cygwin and MSYS report their own platform names and are treated as
    OTHER, since they have no native user32 bindings.
    """
    if platform_name is None:
        platform_name = sys.platform

    if platform_name == "win32":
        return Platform.WINDOWS
    if platform_name == "darwin":
        return Platform.MACOS
    return Platform.OTHER
