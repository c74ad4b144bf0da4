"""
Unit tests for user-facing message templates.
"""
import pytest

from resume_client.utils.message_templates import MessageTemplates
from resume_client.services.mock_logic import placeholder_answer_score, placeholder_skill_matches


class TestJobMatchSummary:

    @pytest.mark.unit
    def test_summary_layout(self):
        text = MessageTemplates.get_job_match_summary(82.345, "A", "S", "I")
        assert text == (
            "Dựa trên phân tích AI, CV của bạn phù hợp 82.3% với yêu cầu công việc.\n"
            "\n"
            "A\n"
            "\n"
            "Điểm mạnh:\n"
            "S\n"
            "\n"
            "Cần cải thiện:\n"
            "I"
        )

    @pytest.mark.unit
    def test_integer_score_gets_one_decimal(self):
        assert "70.0%" in MessageTemplates.get_job_match_summary(70, "", "", "")


class TestPlaceholders:

    @pytest.mark.unit
    def test_answer_score_scales_with_length(self):
        assert placeholder_answer_score("") == 0
        assert placeholder_answer_score("x" * 25) == 25.0
        assert placeholder_answer_score("x" * 250) == 100

    @pytest.mark.unit
    def test_skill_matches_are_copies(self):
        matches = placeholder_skill_matches()
        matches[0]["skill"] = "Changed"
        assert placeholder_skill_matches()[0]["skill"] == "React"
