"""
Resume AI Backend Client

Async HTTP client that forwards UI actions (resume upload, analysis, job
matching, interview practice) to the Resume AI backend and reshapes its JSON
into the models the UI consumes.

One request per call. No retries and no fallback: a failing backend surfaces
as a ``BackendError`` carrying the backend's own message when it sent one.
"""

from resume_client.utils.logger import get_logger
from resume_client.utils.message_templates import MessageTemplates
from resume_client.config import get_settings
from resume_client.exceptions import (
    BackendError,
    BackendUnavailableError,
    ConfigurationError,
    MalformedResponseError,
)
from resume_client.models.schemas import (
    AnalysisResult,
    ExtractedText,
    InterviewAnswer,
    InterviewQuestion,
    JobMatchResult,
    JobMatchSummary,
    MockInterviewQuestion,
    MockInterviewSubmission,
    PracticeQuestion,
)
from pydantic import BaseModel, ValidationError
from typing import Any, BinaryIO, Callable, List, Mapping, Optional, Sequence, Type, TypeVar, Union
import httpx

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
HealthObserver = Callable[[Exception], None]


def log_health_failure(error: Exception) -> None:
    """Default health observer: report unreachable backends in the log."""
    logger.warning(f"Backend health check failed: {error}")


class ResumeAPIClient:
    """
    HTTP client for the Resume AI backend.

    The base URL is injected (or read from settings) so tests and multiple
    environments can point the client anywhere. Use it as an async context
    manager, or call ``close()`` when done.
    """

    def __init__(
        self,
        base_url: str = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        health_observer: Optional[HealthObserver] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        if not self.base_url:
            raise ConfigurationError("Resume API base URL is not configured")
        self.timeout = timeout if timeout is not None else settings.RESUME_API_TIMEOUT
        self.health_observer = health_observer or log_health_failure

        # HTTP client
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.timeout)

        logger.info(f"Resume API client initialized: {self.base_url}")

    async def __aenter__(self) -> "ResumeAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ------------------------------------------------------------------
    # Resume endpoints
    # ------------------------------------------------------------------

    async def extract_text_from_file(
        self,
        content: Union[bytes, BinaryIO],
        filename: str,
        content_type: Optional[str] = None,
    ) -> ExtractedText:
        """
        Upload a resume file and get its plain text back (no AI analysis).

        Args:
            content: Raw file bytes or an open binary file
            filename: Original file name, forwarded to the backend
            content_type: Optional MIME type; guessed from the name when omitted

        Returns:
            ExtractedText with the extracted text and the stored filename
        """
        logger.info(f"Uploading resume file: {filename}")

        file_field = (filename, content, content_type) if content_type else (filename, content)
        response = await self._post(
            "/resume/upload",
            operation="upload",
            default_error=MessageTemplates.UPLOAD_FAILED,
            files={"file": file_field},
        )
        payload = self._parse_json(response, "upload")
        result = self._validate(ExtractedText, payload, "upload")

        logger.info(f"Extracted {len(result.extracted_text)} characters from {result.filename}")
        return result

    async def analyze_resume(self, resume_text: str, job_description: Optional[str] = None) -> AnalysisResult:
        """
        Analyze resume text, optionally against a job description.

        Args:
            resume_text: Plain resume text
            job_description: Job description; sent as null when omitted

        Returns:
            AnalysisResult with one optional entry per resume section
        """
        logger.info(f"Analyzing resume text ({len(resume_text)} chars), job description: {job_description is not None}")

        response = await self._post(
            "/resume/analyze-text",
            operation="analyze_resume",
            default_error=MessageTemplates.RESUME_ANALYSIS_FAILED,
            json={"text": resume_text, "jobDescription": job_description},
        )
        data = self._extract_data(self._parse_json(response, "analyze_resume"), "analyze_resume")
        result = self._validate(AnalysisResult, data, "analyze_resume")

        logger.info(f"Resume analysis returned sections: {[name for name, _ in result.present_sections()]}")
        return result

    async def analyze_job_description(self, job_description: str, resume_text: str) -> JobMatchSummary:
        """
        Score how well a resume matches a job description.

        Returns:
            JobMatchSummary whose ``analysis`` is the formatted multi-line text
            built from the backend's score, analysis, strengths and improvements
        """
        logger.info("Requesting job match analysis")

        response = await self._post(
            "/resume/job-match",
            operation="job_match",
            default_error=MessageTemplates.JOB_MATCH_FAILED,
            json={"jobDescription": job_description, "resumeText": resume_text},
        )
        data = self._extract_data(self._parse_json(response, "job_match"), "job_match")
        match = self._validate(JobMatchResult, data, "job_match")

        logger.info(f"Job match score: {match.score:.1f}")
        return JobMatchSummary(
            score=match.score,
            analysis=MessageTemplates.get_job_match_summary(
                match.score, match.analysis, match.strengths, match.improvements
            ),
        )

    async def generate_interview_questions(
        self,
        job_description: Optional[str] = None,
        resume_text: Optional[str] = None,
    ) -> List[InterviewQuestion]:
        """Generate interview questions from a job description and/or resume text."""
        logger.info("Generating interview questions")

        response = await self._post(
            "/resume/interview-questions",
            operation="interview_questions",
            default_error=MessageTemplates.QUESTION_GENERATION_FAILED,
            json={"jobDescription": job_description or "", "resumeText": resume_text or ""},
        )
        data = self._extract_data(self._parse_json(response, "interview_questions"), "interview_questions")
        questions = self._validate_list(InterviewQuestion, data, "interview_questions")

        logger.info(f"Generated {len(questions)} interview questions")
        return questions

    async def generate_interview_questions_from_resume(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
    ) -> List[InterviewQuestion]:
        """Generate interview questions grounded on the resume itself."""
        logger.info(f"Generating interview questions from resume ({len(resume_text)} chars)")

        response = await self._post(
            "/resume/generate-interview-questions",
            operation="resume_interview_questions",
            default_error=MessageTemplates.QUESTION_GENERATION_FAILED,
            json={"resumeText": resume_text, "jobDescription": job_description},
        )
        data = self._extract_data(
            self._parse_json(response, "resume_interview_questions"), "resume_interview_questions"
        )
        questions = self._validate_list(InterviewQuestion, data, "resume_interview_questions")

        logger.info(f"Generated {len(questions)} resume-based interview questions")
        return questions

    async def check_backend_health(self) -> bool:
        """
        Check if the backend is reachable and healthy.

        Network failures are reported to the health observer and turned into
        False; they never propagate.

        Returns:
            bool: True on a 2xx answer, False otherwise
        """
        try:
            response = await self.client.get(f"{self.base_url}/resume/health")
        except httpx.RequestError as e:
            self.health_observer(e)
            return False

        if self._is_success(response.status_code):
            logger.info("Backend is healthy")
            return True

        logger.warning(f"Backend health check failed: {response.status_code}")
        return False

    # ------------------------------------------------------------------
    # Mock interview endpoints
    # ------------------------------------------------------------------

    async def generate_interview_questions_from_backend(
        self, position: str, field: str, level: str
    ) -> List[PracticeQuestion]:
        """
        Generate mock interview questions for a position, field and level.

        Returns:
            Practice questions in backend order, ``questionText`` renamed to
            ``question``
        """
        logger.info(f"Generating mock interview questions: {position} / {field} / {level}")

        response = await self._post(
            "/mock-interview/questions",
            operation="mock_interview_questions",
            default_error=MessageTemplates.QUESTION_GENERATION_FAILED,
            json={"position": position, "field": field, "level": level},
        )
        payload = self._parse_json(response, "mock_interview_questions")
        questions = self._validate_list(MockInterviewQuestion, payload, "mock_interview_questions")

        logger.info(f"Received {len(questions)} mock interview questions")
        return [PracticeQuestion(question=q.question_text, hint=q.hint) for q in questions]

    async def submit_interview_answers(
        self,
        position: str,
        field: str,
        level: str,
        answers: Sequence[Union[InterviewAnswer, Mapping[str, Any]]],
    ) -> Any:
        """
        Submit mock interview answers for evaluation.

        Answers may be ``InterviewAnswer`` instances or dicts using either the
        wire names (``questionId``) or the attribute names (``question_id``).

        Returns:
            The backend's evaluation payload, unmodified
        """
        submission = MockInterviewSubmission(position=position, field=field, level=level, answers=list(answers))
        logger.info(f"Submitting {len(submission.answers)} mock interview answers")

        response = await self._post(
            "/mock-interview/submit",
            operation="mock_interview_submit",
            default_error=MessageTemplates.ANSWER_EVALUATION_FAILED,
            json=submission.model_dump(by_alias=True),
        )
        result = self._parse_json(response, "mock_interview_submit")

        logger.info("Mock interview answers evaluated")
        return result

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.info("Resume API client closed")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _is_success(status_code: int) -> bool:
        return 200 <= status_code < 300

    async def _post(self, path: str, operation: str, default_error: str, **kwargs) -> httpx.Response:
        """POST to the backend and raise a BackendError on failure."""
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.post(url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Failed to connect to backend ({operation}): {e}")
            raise BackendUnavailableError(
                default_error, context={"operation": operation, "url": url, "cause": str(e)}
            ) from e

        if not self._is_success(response.status_code):
            message = self._error_message(response, default_error)
            logger.error(f"Backend request failed ({operation}): {response.status_code} {message}")
            raise BackendError(
                message, status_code=response.status_code, context={"operation": operation, "url": url}
            )

        return response

    @staticmethod
    def _error_message(response: httpx.Response, default_error: str) -> str:
        """Use the backend's ``error`` field when it sent one."""
        try:
            body = response.json()
        except ValueError:
            return default_error
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, str) and error:
                return error
        return default_error

    @staticmethod
    def _parse_json(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Backend returned invalid JSON ({operation}): {e}")
            raise MalformedResponseError(
                MessageTemplates.MALFORMED_RESPONSE,
                status_code=response.status_code,
                context={"operation": operation},
            ) from e

    @staticmethod
    def _extract_data(payload: Any, operation: str) -> Any:
        """Unwrap the ``data`` envelope used by the /resume endpoints."""
        if not isinstance(payload, dict) or "data" not in payload:
            logger.error(f"Backend response has no 'data' field ({operation})")
            raise MalformedResponseError(
                MessageTemplates.MALFORMED_RESPONSE, context={"operation": operation, "reason": "missing data"}
            )
        return payload["data"]

    @staticmethod
    def _validate(model: Type[ModelT], payload: Any, operation: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Backend response failed validation ({operation}): {e}")
            raise MalformedResponseError(
                MessageTemplates.MALFORMED_RESPONSE, context={"operation": operation, "errors": e.errors()}
            ) from e

    @classmethod
    def _validate_list(cls, model: Type[ModelT], payload: Any, operation: str) -> List[ModelT]:
        if not isinstance(payload, list):
            logger.error(f"Expected a list from backend ({operation}), got {type(payload).__name__}")
            raise MalformedResponseError(
                MessageTemplates.MALFORMED_RESPONSE, context={"operation": operation, "reason": "not a list"}
            )
        return [cls._validate(model, item, operation) for item in payload]
