from .resume_api_client import ResumeAPIClient
from .legacy_client import LegacyResumeClient

__all__ = ["ResumeAPIClient", "LegacyResumeClient"]
