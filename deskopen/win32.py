"""
Window station queries for Microsoft Windows

A process attached to the interactive window station ``WinSta0`` can
show windows on the user's desktop. Services and scheduled tasks run in
other, non-interactive stations.
"""

import ctypes
from typing import Optional

from .exceptions import QueryError

# [MS-DTYP] / winuser.h
UOI_NAME = 2
NAME_BUFFER_SIZE = 80
INTERACTIVE_WINDOW_STATION = "WinSta0"

BOOL = ctypes.c_int
DWORD = ctypes.c_ulong
HWINSTA = ctypes.c_void_p

_user32 = None


def _load_user32():
    """Load user32.dll with argument types declared"""
    global _user32
    if _user32 is None:
        user32 = ctypes.WinDLL("user32", use_last_error=True)
        user32.GetProcessWindowStation.argtypes = []
        user32.GetProcessWindowStation.restype = HWINSTA
        user32.GetUserObjectInformationA.argtypes = [
            HWINSTA, ctypes.c_int, ctypes.c_void_p, DWORD, ctypes.POINTER(DWORD),
        ]
        user32.GetUserObjectInformationA.restype = BOOL
        _user32 = user32
    return _user32


def _last_error() -> int:
    return ctypes.get_last_error()


def decode_object_name(raw: bytes) -> str:
    """
    Extract the NUL-terminated name from a GetUserObjectInformationA buffer

    Only the first NAME_BUFFER_SIZE bytes are considered and the last of
    them is treated as a terminator even if the call filled it.
    """
    raw = bytes(raw[:NAME_BUFFER_SIZE])
    if len(raw) == NAME_BUFFER_SIZE:
        raw = raw[:-1]
    name, _, _ = raw.partition(b"\0")
    return name.decode("ascii", errors="replace")


def window_station_name(user32=None) -> str:
    """
    Query the name of the window station of the current process

    Args:
        user32: user32 bindings; loaded from the system when omitted

    Returns:
        Window station name

    Raises:
        QueryError: if either native call fails
    """
    if user32 is None:
        user32 = _load_user32()

    hwinsta = user32.GetProcessWindowStation()
    if not hwinsta:
        raise QueryError("GetProcessWindowStation", _last_error())

    buf = ctypes.create_string_buffer(NAME_BUFFER_SIZE)
    needed = DWORD(0)
    ok = user32.GetUserObjectInformationA(
        hwinsta, UOI_NAME, buf, ctypes.sizeof(buf), ctypes.byref(needed)
    )
    if not ok:
        raise QueryError("GetUserObjectInformationA", _last_error())

    return decode_object_name(buf.raw)


def is_interactive_station(name: Optional[str]) -> bool:
    """Exact, case-sensitive match against the interactive station name"""
    return name == INTERACTIVE_WINDOW_STATION
