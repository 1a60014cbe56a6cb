"""
Security session queries for macOS
"""

import ctypes
import ctypes.util
from typing import Tuple

# Security/AuthSession.h
CALLER_SECURITY_SESSION = 0xFFFFFFFF
SESSION_HAS_GRAPHIC_ACCESS = 0x10
ERR_SESSION_SUCCESS = 0
ERR_SESSION_INTERNAL = -60008

_security = None


def _load_security():
    """Load the Security framework with argument types declared"""
    global _security
    if _security is None:
        path = ctypes.util.find_library("Security")
        if not path:
            raise OSError("Security framework not found")
        security = ctypes.CDLL(path)
        security.SessionGetInfo.argtypes = [
            ctypes.c_uint32, ctypes.c_void_p, ctypes.POINTER(ctypes.c_uint32),
        ]
        security.SessionGetInfo.restype = ctypes.c_int32
        _security = security
    return _security


def session_attributes(security=None) -> Tuple[int, int]:
    """
    Query the attribute bits of the caller's security session

    Args:
        security: Security framework bindings; loaded when omitted

    Returns:
        (status, attributes). attributes is only meaningful when status
        equals ERR_SESSION_SUCCESS.
    """
    if security is None:
        try:
            security = _load_security()
        except OSError:
            return ERR_SESSION_INTERNAL, 0

    attrs = ctypes.c_uint32(0)
    status = security.SessionGetInfo(CALLER_SECURITY_SESSION, None, ctypes.byref(attrs))
    return int(status), attrs.value


def has_graphic_access(attributes: int) -> bool:
    """Check the has-graphic-access bit of session attributes"""
    return (attributes & SESSION_HAS_GRAPHIC_ACCESS) != 0
