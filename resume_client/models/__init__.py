# Models package for Pydantic schemas

from .schemas import (
    AnalysisSection, AnalysisResult, InterviewQuestion, JobMatchResult, JobMatchSummary,
    ExtractedText, MockInterviewQuestion, PracticeQuestion, InterviewAnswer, MockInterviewSubmission
)

__all__ = [
    "AnalysisSection", "AnalysisResult", "InterviewQuestion", "JobMatchResult", "JobMatchSummary",
    "ExtractedText", "MockInterviewQuestion", "PracticeQuestion", "InterviewAnswer", "MockInterviewSubmission"
]
