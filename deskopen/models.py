"""
Data models for desktop detection
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a desktop query"""
    available: bool
    method: str = ""
    error_code: Optional[int] = None

    @classmethod
    def detected(cls, available: bool, method: str = "") -> 'DetectionResult':
        """Create a conclusive result"""
        return cls(available=bool(available), method=method)

    @classmethod
    def query_error(cls, code: int, method: str = "") -> 'DetectionResult':
        """Create a result for a query that did not produce an answer"""
        return cls(available=False, method=method, error_code=code)

    @property
    def is_error(self) -> bool:
        return self.error_code is not None

    def __bool__(self) -> bool:
        return self.available

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            'available': self.available,
            'method': self.method,
            'error_code': self.error_code,
        }
