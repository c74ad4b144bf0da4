import os
from dotenv import load_dotenv
from typing import Dict, List, Any, Optional
from functools import lru_cache

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    """Read a float env var, treating unset or empty as None."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


class Settings:
    # Backend Settings
    RESUME_API_BASE_URL: str = os.getenv("RESUME_API_BASE_URL", "http://localhost:8080/api")
    # No timeout unless one is configured
    RESUME_API_TIMEOUT: Optional[float] = _optional_float("RESUME_API_TIMEOUT")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    @property
    def api_base_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.RESUME_API_BASE_URL.rstrip("/")

    @property
    def client_config(self) -> Dict[str, Any]:
        """Get HTTP client configuration."""
        return {
            "base_url": self.api_base_url,
            "timeout": self.RESUME_API_TIMEOUT,
        }

    def validate_configuration(self) -> List[str]:
        """Validate configuration and return list of issues."""
        issues = []
        if not self.RESUME_API_BASE_URL.strip():
            issues.append("RESUME_API_BASE_URL must not be empty")
        elif not self.RESUME_API_BASE_URL.startswith(("http://", "https://")):
            issues.append("RESUME_API_BASE_URL must start with http:// or https://")
        if self.RESUME_API_TIMEOUT is not None and self.RESUME_API_TIMEOUT <= 0:
            issues.append("RESUME_API_TIMEOUT must be positive when set")
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            issues.append(f"Unknown LOG_LEVEL: {self.LOG_LEVEL}")
        return issues


@lru_cache()
def get_settings():
    return Settings()
