"""
Unit tests for the legacy compatibility client.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from resume_client.services.legacy_client import LegacyResumeClient, join_resume_sections
from resume_client.models.schemas import JobMatchSummary
from resume_client.exceptions import BackendError
from tests.conftest import BASE_URL, make_response


@pytest.fixture
def legacy_client(api_client):
    return LegacyResumeClient(api_client)


class TestJoinResumeSections:

    @pytest.mark.unit
    def test_sections_joined_in_order(self):
        assert join_resume_sections({"exp": "line1\nline2", "edu": "x"}) == "line1\nline2\nx"

    @pytest.mark.unit
    def test_empty_mapping(self):
        assert join_resume_sections({}) == ""


class TestLegacyAnalyzeResume:
    """Test cases for the old improvements layout."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_joined_text_sent_to_backend(self, legacy_client, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, {"data": {}})

        await legacy_client.analyze_resume({"exp": "line1\nline2", "edu": "x"})

        args, kwargs = mock_httpx_client.post.call_args
        assert args[0] == f"{BASE_URL}/resume/analyze-text"
        assert kwargs["json"]["text"] == "line1\nline2\nx"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_improvements_only_for_present_sections(self, legacy_client, mock_httpx_client, analysis_payload):
        """Education is absent, so only two improvements come back."""
        mock_httpx_client.post.return_value = make_response(200, analysis_payload)
        content = {"experience": "Backend developer at Acme", "skills": "Python"}

        result = await legacy_client.analyze_resume(content)

        assert result["improvements"] == [
            {
                "section": "Kinh nghiệm làm việc",
                "original": "Backend developer at Acme",
                "suggestion": "Quantify the payment volume",
                "reason": "Numbers make impact concrete",
            },
            {
                "section": "Kỹ năng",
                "original": "Python, FastAPI",
                "suggestion": "Group skills by category",
                "reason": "Easier to scan",
            },
        ]
        assert result["improvedContent"] is content

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_original_is_empty_for_blank_content(self, legacy_client, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, {
            "data": {"hoc_van": {"noi_dung": "", "de_xuat": "Add your degree", "ly_do": "Missing"}}
        })

        result = await legacy_client.analyze_resume({"edu": ""})

        assert result["improvements"][0]["section"] == "Học vấn"
        assert result["improvements"][0]["original"] == ""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_backend_error_propagates(self, legacy_client, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(400, {"error": "Nội dung CV quá ngắn"})

        with pytest.raises(BackendError, match="Nội dung CV quá ngắn"):
            await legacy_client.analyze_resume({"exp": "short"})


class TestLegacyJobMatch:

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_overall_match_from_score(self):
        api_client = MagicMock()
        api_client.analyze_job_description = AsyncMock(
            return_value=JobMatchSummary(score=75.0, analysis="text")
        )
        legacy_client = LegacyResumeClient(api_client)

        result = await legacy_client.analyze_job_description({"a": "one", "b": "two"}, "JD")

        api_client.analyze_job_description.assert_awaited_once_with("JD", "one\ntwo")
        assert result["overallMatch"] == 0.75
        assert [m["skill"] for m in result["matches"]] == ["React", "JavaScript"]
        assert result["gaps"][0]["skill"] == "GraphQL"
        assert result["gaps"][0]["importance"] == "high"


class TestLegacyInterviewQuestions:

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_questions_get_fixed_hint(self, legacy_client, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, {
            "data": [
                {"id": 1, "question": "Q1", "expectedDuration": 120},
                {"id": 2, "question": "Q2", "expectedDuration": 120},
            ]
        })

        result = await legacy_client.get_interview_questions("Frontend Developer")

        assert result == [
            {"question": "Q1", "hint": "Hãy trả lời một cách tự tin và cụ thể."},
            {"question": "Q2", "hint": "Hãy trả lời một cách tự tin và cụ thể."},
        ]
        _, kwargs = mock_httpx_client.post.call_args
        assert kwargs["json"] == {"jobDescription": "Frontend Developer", "resumeText": ""}


class TestLegacyEvaluateAnswer:

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_evaluate_answer_makes_no_request(self, legacy_client, mock_httpx_client):
        result = await legacy_client.evaluate_answer("Q", "a" * 50)

        assert result["score"] == 50.0
        assert result["evaluation"] == "Câu trả lời tốt, có thể cải thiện thêm."
        assert len(result["improvementPoints"]) == 2
        mock_httpx_client.post.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_evaluate_answer_score_capped(self, legacy_client):
        result = await legacy_client.evaluate_answer("Q", "a" * 500)

        assert result["score"] == 100
