"""
Custom exception hierarchy for the resume client.
"""

from typing import Dict, Any, Optional

class ResumeClientException(Exception):
    """Base exception for the resume client."""
    def __init__(self, message: str, context: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

class BackendError(ResumeClientException):
    """Raised when the backend answers with a non-success status."""
    def __init__(self, message: str, status_code: Optional[int] = None, context: Dict[str, Any] = None):
        super().__init__(message, context)
        self.status_code = status_code

class BackendUnavailableError(BackendError):
    """Raised when the backend cannot be reached."""
    pass

class MalformedResponseError(BackendError):
    """Raised when a success response cannot be parsed into the expected shape."""
    pass

class ConfigurationError(ResumeClientException):
    """Raised when there are configuration issues."""
    pass
