"""
Placeholder logic for legacy shim operations that have no backend endpoint yet.

Nothing here analyses anything. The values are fixed or derived from a length
heuristic so that legacy screens keep rendering.
"""

from typing import Any, Dict, List
from resume_client.utils.message_templates import MessageTemplates

# Fixed skill lists returned by the legacy job-match screen
PLACEHOLDER_SKILL_MATCHES = (
    {"skill": "React", "confidence": 0.9},
    {"skill": "JavaScript", "confidence": 0.95},
)
PLACEHOLDER_SKILL_GAPS = (
    {"skill": "GraphQL", "importance": "high", "suggestion": MessageTemplates.DEFAULT_GAP_SUGGESTION},
)


def placeholder_skill_matches() -> List[Dict[str, Any]]:
    """
    Skill matches for the legacy job-match view.

    TODO: Replace with skill extraction once the backend exposes a
    skill-matching endpoint.
    """
    return [dict(match) for match in PLACEHOLDER_SKILL_MATCHES]


def placeholder_skill_gaps() -> List[Dict[str, Any]]:
    return [dict(gap) for gap in PLACEHOLDER_SKILL_GAPS]


def placeholder_answer_score(answer: str) -> float:
    """Length heuristic: 100 characters or more scores 100."""
    return min(len(answer) / 100, 1) * 100


def evaluate_mock_answer(question: str, answer: str) -> Dict[str, Any]:
    """
    Evaluate an interview answer without calling the backend.

    TODO: Route through /mock-interview/submit once single-answer evaluation
    is available there.
    """
    return {
        "evaluation": MessageTemplates.DEFAULT_ANSWER_EVALUATION,
        "improvementPoints": list(MessageTemplates.DEFAULT_IMPROVEMENT_POINTS),
        "score": placeholder_answer_score(answer),
    }
