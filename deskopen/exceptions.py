"""
Exceptions raised by deskopen
"""

from typing import Optional


class DeskopenException(Exception):
    """Base exception for deskopen errors"""
    pass


class QueryError(DeskopenException, OSError):
    """
    A desktop query failed at the operating system level

    This is distinct from "no desktop": the native call itself did not
    produce an answer.
    """

    def __init__(self, function: str, code: Optional[int] = None, message: Optional[str] = None):
        self.function = function
        self.code = code
        if message is None:
            message = f"{function} failed"
            if code is not None:
                message += f" (error {code})"
        super().__init__(message)
