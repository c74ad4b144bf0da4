"""
Async client for the Resume AI backend.
"""

from resume_client.services.resume_api_client import ResumeAPIClient
from resume_client.services.legacy_client import LegacyResumeClient
from resume_client.exceptions import (
    ResumeClientException,
    BackendError,
    BackendUnavailableError,
    MalformedResponseError,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "ResumeAPIClient",
    "LegacyResumeClient",
    "ResumeClientException",
    "BackendError",
    "BackendUnavailableError",
    "MalformedResponseError",
    "ConfigurationError",
]
