"""
Test configuration for resume client tests.

Provides the mocked httpx client and response builders shared by unit tests.
"""
# Set test environment variables BEFORE any imports that might use them
import os
os.environ.setdefault("RESUME_API_BASE_URL", "http://test-backend:8080/api")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

BASE_URL = "http://test-backend:8080/api"


def make_response(status_code: int = 200, json_body=None, invalid_json: bool = False):
    """Build a mock httpx.Response with the given status and JSON body."""
    response = MagicMock()
    response.status_code = status_code
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient for resume client tests."""
    with patch("resume_client.services.resume_api_client.httpx.AsyncClient") as mock_class:
        mock_client = MagicMock()
        mock_client.get = AsyncMock()
        mock_client.post = AsyncMock()
        mock_client.aclose = AsyncMock()
        mock_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def api_client(mock_httpx_client):
    """ResumeAPIClient wired to the mocked httpx client."""
    from resume_client.services.resume_api_client import ResumeAPIClient
    return ResumeAPIClient(base_url=BASE_URL)


@pytest.fixture
def analysis_payload():
    """Backend analysis with work experience and skills, no education."""
    return {
        "success": True,
        "message": "Phân tích CV thành công",
        "data": {
            "kinh_nghiem_lam_viec": {
                "noi_dung": "Backend developer at Acme\nBuilt payment APIs",
                "de_xuat": "Quantify the payment volume",
                "ly_do": "Numbers make impact concrete",
            },
            "ky_nang": {
                "noi_dung": "Python, FastAPI",
                "de_xuat": "Group skills by category",
                "ly_do": "Easier to scan",
            },
        },
    }
