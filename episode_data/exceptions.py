"""
Exceptions raised by the episode data layer.
"""
from typing import Optional


class ServiceError(Exception):
    """Base exception for all service errors"""
    status_code = 500


class NotFoundError(ServiceError):
    """Raised when no episode, topic or sheet data matches a request"""
    status_code = 404


class UpstreamUnavailableError(ServiceError):
    """Raised when an external capability is unreachable or rejects a call"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


class SheetsError(UpstreamUnavailableError):
    """Raised when Google Sheets API operations fail"""
    pass
