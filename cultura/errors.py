"""Error taxonomy for CULTURA services"""

from typing import Dict, Optional


class CulturaError(Exception):
    """Base class for all CULTURA errors"""


class ConfigurationError(CulturaError, ValueError):
    """
    Programmer error: unsupported language code, wrong input type,
    broken static data. Always reported to the immediate caller.
    """


class ServiceError(CulturaError):
    """
    A remote service failed. Recoverable: callers fall back to the next
    strategy and log the failure instead of surfacing it.
    """

    code = "SERVICE_ERROR"
    default_message = "The service is currently unavailable."

    def __init__(self, message: str = "", code: str = None, details: Optional[Dict] = None):
        super().__init__(message or self.default_message)
        if code:
            self.code = code
        self.details = details or {}

    @property
    def user_message(self) -> str:
        """Human-readable message suitable for display"""
        return str(self)

    @property
    def status(self) -> Optional[int]:
        return self.details.get("status")


class NetworkError(ServiceError):
    """Timeout or connection failure"""

    code = "NETWORK_ERROR"
    default_message = "Could not reach the service. Please check your connection."


class AuthenticationError(ServiceError):
    """Missing, invalid or rejected credentials"""

    code = "AUTH_ERROR"
    default_message = "Authentication failed. Please check your API credentials."


class RateLimitError(ServiceError):
    """HTTP 429 from a remote service"""

    code = "RATE_LIMIT_ERROR"
    default_message = "Rate limit exceeded. Please try again in a moment."
