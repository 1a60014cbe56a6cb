"""
Basic desktop interactions, such as opening a URL in a web browser

Example::

    from deskopen import hasdesktop, browse_url

    if hasdesktop():
        browse_url("https://www.python.org/")
    else:
        print("No desktop environment available")
"""

from typing import List, Optional

from .models import DetectionResult
from .strategies import DesktopStrategy, strategy_for

_strategy: Optional[DesktopStrategy] = None


def get_strategy() -> DesktopStrategy:
    """Get the strategy for the running platform, chosen on first use"""
    global _strategy
    if _strategy is None:
        _strategy = strategy_for()
    return _strategy


def set_strategy(strategy: Optional[DesktopStrategy]) -> None:
    """Replace the active strategy; None re-selects on next use"""
    global _strategy
    _strategy = strategy


def detect_desktop() -> DetectionResult:
    """
    Query desktop availability with an explicit result

    On macOS a failed session query is reported through
    ``DetectionResult.error_code`` rather than raised.

    Raises:
        QueryError: on Windows, if the window station cannot be queried
    """
    return get_strategy().detect()


def hasdesktop() -> bool:
    """
    Check whether the current process appears to have a graphical desktop

    The check is a platform-dependent heuristic:

    - Windows: the process runs in the window station ``WinSta0``
    - macOS: the has-graphic-access bit is set in the caller's security
      session attributes
    - other platforms: ``DISPLAY`` or ``WAYLAND_DISPLAY`` is non-empty

    Only the native GUI interface of each platform is checked; an X11
    server on Windows or macOS is ignored.

    Returns:
        True if a desktop is likely available. A failed macOS query is
        logged and reported as False.

    Raises:
        QueryError: on Windows, if the window station cannot be queried
    """
    return get_strategy().has_desktop()


def browse_url(url: str) -> bool:
    """
    Launch a web browser to display a URL or filesystem path

    Success depends on access to a desktop environment, see hasdesktop().

    Returns:
        True if the launched helper exited successfully
    """
    return get_strategy().browse_url(url)


def open_file(path: str) -> bool:
    """
    Open a file with the application associated with its type

    Returns:
        True if the launched helper exited successfully
    """
    return get_strategy().open_file(path)


def get_browser_command(url: str) -> Optional[List[str]]:
    """Command browse_url() would run, or None if no browser is found"""
    return get_strategy().browser_command(url)


def get_open_command(path: str) -> Optional[List[str]]:
    """Command open_file() would run, or None if no handler is found"""
    return get_strategy().open_command(path)
