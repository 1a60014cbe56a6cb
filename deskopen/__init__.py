"""
deskopen

Detect a graphical desktop and open URLs and files with the platform's
helper programs.
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0+unknown"

from .desktop import (
    hasdesktop,
    detect_desktop,
    browse_url,
    open_file,
    get_browser_command,
    get_open_command,
    get_strategy,
    set_strategy,
)
from .models import DetectionResult
from .platforms import Platform, detect_platform
from .strategies import (
    DesktopStrategy,
    WindowsStrategy,
    MacStrategy,
    OtherStrategy,
    strategy_for,
)
from .exceptions import DeskopenException, QueryError
from .config import Config
from .logger import Logger, LogLevel, get_logger

__all__ = [
    "hasdesktop",
    "detect_desktop",
    "browse_url",
    "open_file",
    "get_browser_command",
    "get_open_command",
    "get_strategy",
    "set_strategy",
    "DetectionResult",
    "Platform",
    "detect_platform",
    "DesktopStrategy",
    "WindowsStrategy",
    "MacStrategy",
    "OtherStrategy",
    "strategy_for",
    "DeskopenException",
    "QueryError",
    "Config",
    "Logger",
    "LogLevel",
    "get_logger",
]
