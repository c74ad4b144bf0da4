"""
Compatibility layer for screens written against the old analysis API.

Old callers pass the resume as a mapping of section name to text and expect
the pre-migration response layout. Each call joins the sections, delegates to
``ResumeAPIClient`` and reshapes the result back.
"""

from typing import Any, Dict, List, Mapping
from resume_client.services.resume_api_client import ResumeAPIClient
from resume_client.services.mock_logic import (
    evaluate_mock_answer,
    placeholder_skill_gaps,
    placeholder_skill_matches,
)
from resume_client.utils.logger import get_logger
from resume_client.utils.message_templates import MessageTemplates

logger = get_logger(__name__)

SECTION_LABELS = {
    "work_experience": MessageTemplates.SECTION_WORK_EXPERIENCE,
    "education": MessageTemplates.SECTION_EDUCATION,
    "skills": MessageTemplates.SECTION_SKILLS,
}


def join_resume_sections(resume_content: Mapping[str, str]) -> str:
    """Join section texts in mapping order, one newline between sections."""
    return "\n".join(resume_content.values())


class LegacyResumeClient:
    """Old-style facade over ResumeAPIClient."""

    def __init__(self, api_client: ResumeAPIClient):
        self.api_client = api_client

    async def analyze_resume(self, resume_content: Mapping[str, str]) -> Dict[str, Any]:
        """
        Analyze a sectioned resume and return the old improvements layout.

        Returns:
            {"improvements": [...], "improvedContent": resume_content}; one
            improvement per section the backend reported on
        """
        analysis = await self.api_client.analyze_resume(join_resume_sections(resume_content))

        improvements: List[Dict[str, str]] = []
        for name, section in analysis.present_sections():
            improvements.append({
                "section": SECTION_LABELS[name],
                "original": section.first_line,
                "suggestion": section.suggestion,
                "reason": section.rationale,
            })

        logger.info(f"Legacy resume analysis produced {len(improvements)} improvements")
        return {
            "improvements": improvements,
            # Rewritten content is not produced yet; echo the input
            "improvedContent": resume_content,
        }

    async def analyze_job_description(self, resume_content: Mapping[str, str], job_description: str) -> Dict[str, Any]:
        """Job match in the old layout. Only overallMatch comes from the backend."""
        result = await self.api_client.analyze_job_description(job_description, join_resume_sections(resume_content))

        return {
            "matches": placeholder_skill_matches(),
            "gaps": placeholder_skill_gaps(),
            "overallMatch": result.score / 100,
        }

    async def get_interview_questions(self, job_type: str) -> List[Dict[str, str]]:
        questions = await self.api_client.generate_interview_questions(job_type)
        return [
            {"question": q.question, "hint": MessageTemplates.DEFAULT_QUESTION_HINT}
            for q in questions
        ]

    async def evaluate_answer(self, question: str, answer: str) -> Dict[str, Any]:
        """Placeholder evaluation; makes no backend call."""
        logger.debug("Evaluating answer with placeholder heuristic")
        return evaluate_mock_answer(question, answer)
