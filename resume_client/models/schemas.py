from pydantic import BaseModel, ConfigDict, Field
from typing import Iterator, List, Optional, Tuple

# Response Models

class AnalysisSection(BaseModel):
    """One analysed resume dimension."""
    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(..., alias="noi_dung", description="Section content as found in the resume")
    suggestion: str = Field(..., alias="de_xuat", description="Suggested rewrite")
    rationale: str = Field(..., alias="ly_do", description="Why the rewrite is suggested")

    @property
    def first_line(self) -> str:
        return self.content.split("\n")[0]


class AnalysisResult(BaseModel):
    """Resume analysis; a missing section means nothing to report for it."""
    model_config = ConfigDict(populate_by_name=True)

    work_experience: Optional[AnalysisSection] = Field(None, alias="kinh_nghiem_lam_viec")
    education: Optional[AnalysisSection] = Field(None, alias="hoc_van")
    skills: Optional[AnalysisSection] = Field(None, alias="ky_nang")

    def present_sections(self) -> Iterator[Tuple[str, AnalysisSection]]:
        """Yield (name, section) for sections the backend returned, in display order."""
        for name in ("work_experience", "education", "skills"):
            section = getattr(self, name)
            if section is not None:
                yield name, section


class InterviewQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    question: str
    expected_duration: int = Field(..., alias="expectedDuration", description="Expected answer duration in seconds")


class JobMatchResult(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    score: float = Field(..., description="Match score, 0-100")
    analysis: str
    strengths: str
    improvements: str


class JobMatchSummary(BaseModel):
    """What the UI shows for a job match: the score and a formatted explanation."""
    score: float
    analysis: str


class ExtractedText(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    extracted_text: str = Field(..., alias="extractedText")
    filename: str


class MockInterviewQuestion(BaseModel):
    """Question as returned by the mock-interview endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(..., alias="questionText")
    hint: Optional[str] = ""


class PracticeQuestion(BaseModel):
    """Question shape consumed by the practice UI."""
    question: str
    hint: Optional[str] = ""


# Request Models

class InterviewAnswer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: int = Field(..., alias="questionId")
    question_text: str = Field(..., alias="questionText")
    answer_text: str = Field(..., alias="answerText")


class MockInterviewSubmission(BaseModel):
    position: str
    field: str
    level: str
    answers: List[InterviewAnswer] = Field(default_factory=list)
