"""
Per-platform desktop strategies

Each platform exposes desktop presence and "open" helpers differently,
so every platform gets its own strategy. Only the native mechanism of the
running platform is consulted; an X server running on Windows or macOS,
for example, is ignored.
"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from . import macos, win32
from .launcher import find_first_existing, run_helper
from .logger import get_logger
from .models import DetectionResult
from .platforms import Platform, detect_platform


class DesktopStrategy(ABC):
    """Desktop detection and launching for one platform"""

    platform: Platform

    @abstractmethod
    def detect(self) -> DetectionResult:
        """Query whether a graphical desktop is available"""
        ...

    @abstractmethod
    def browser_command(self, url: str) -> Optional[List[str]]:
        """Command that displays url in a web browser, or None"""
        ...

    @abstractmethod
    def open_command(self, path: str) -> Optional[List[str]]:
        """Command that opens path with its default application, or None"""
        ...

    def has_desktop(self) -> bool:
        """
        Reduce detect() to a boolean

        Query errors count as "no desktop" after being logged. Strategies
        whose queries fail loudly raise from detect() instead.
        """
        result = self.detect()
        if result.is_error:
            get_logger().error("%s query failed with status %d",
                               result.method, result.error_code)
            return False
        return result.available

    def browse_url(self, url: str) -> bool:
        """Display url or a local path in a web browser"""
        command = self.browser_command(url)
        if command is None:
            get_logger().error("Cannot find a web browser to display %s", url)
            return False
        return run_helper(command)

    def open_file(self, path: str) -> bool:
        """Open path with the application associated with its type"""
        command = self.open_command(path)
        if command is None:
            get_logger().error("Cannot find an application to open %s", path)
            return False
        return run_helper(command)


class WindowsStrategy(DesktopStrategy):
    """Window station check and url.dll handlers"""

    platform = Platform.WINDOWS
    RUNDLL = "rundll32.exe"

    def __init__(self, user32=None):
        self.user32 = user32

    def detect(self) -> DetectionResult:
        # QueryError propagates
        name = win32.window_station_name(self.user32)
        get_logger().debug("Window station: %s", name)
        return DetectionResult.detected(win32.is_interactive_station(name),
                                        method="GetProcessWindowStation")

    def browser_command(self, url: str) -> Optional[List[str]]:
        return [self.RUNDLL, "url.dll,OpenURL", url]

    def open_command(self, path: str) -> Optional[List[str]]:
        return [self.RUNDLL, "url.dll,FileProtocolHandler", path]


class MacStrategy(DesktopStrategy):
    """Security session check and /usr/bin/open"""

    platform = Platform.MACOS
    OPEN = "/usr/bin/open"
    # Safari is named explicitly; other default browsers may refuse local
    # files carrying the com.apple.quarantine attribute.
    BROWSER_APP = "safari"

    def __init__(self, security=None):
        self.security = security

    def detect(self) -> DetectionResult:
        status, attrs = macos.session_attributes(self.security)
        if status != macos.ERR_SESSION_SUCCESS:
            return DetectionResult.query_error(status, method="SessionGetInfo")
        return DetectionResult.detected(macos.has_graphic_access(attrs),
                                        method="SessionGetInfo")

    def browser_command(self, url: str) -> Optional[List[str]]:
        return [self.OPEN, "-a", self.BROWSER_APP, url]

    def open_command(self, path: str) -> Optional[List[str]]:
        return [self.OPEN, path]


class OtherStrategy(DesktopStrategy):
    """Display environment variables and helpers at fixed paths"""

    platform = Platform.OTHER
    DISPLAY_VARIABLES: Tuple[str, ...] = ("DISPLAY", "WAYLAND_DISPLAY")
    BROWSERS: Tuple[str, ...] = (
        "/usr/bin/xdg-open",
        "/usr/bin/firefox",
        "/usr/bin/google-chrome",
    )
    HANDLERS: Tuple[str, ...] = (
        "/usr/bin/xdg-open",
        "/usr/bin/run-mailcap",
    )

    def detect(self) -> DetectionResult:
        available = any(os.environ.get(name, "") for name in self.DISPLAY_VARIABLES)
        return DetectionResult.detected(available, method="environment")

    def browser_command(self, url: str) -> Optional[List[str]]:
        browser = find_first_existing(self.BROWSERS)
        if browser is None:
            return None
        return [browser, url]

    def open_command(self, path: str) -> Optional[List[str]]:
        handler = find_first_existing(self.HANDLERS)
        if handler is None:
            return None
        return [handler, path]


_STRATEGIES = {
    Platform.WINDOWS: WindowsStrategy,
    Platform.MACOS: MacStrategy,
    Platform.OTHER: OtherStrategy,
}


def strategy_for(platform: Optional[Platform] = None) -> DesktopStrategy:
    """Build the strategy for a platform (the running one by default)"""
    if platform is None:
        platform = detect_platform()
    strategy = _STRATEGIES[platform]()
    get_logger().debug("Using %s", type(strategy).__name__)
    return strategy
