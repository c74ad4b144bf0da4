"""
Centralized user-facing texts.

The backend and the UI both speak Vietnamese, so default error messages and
the job-match summary are kept here verbatim rather than scattered across the
client.
"""


class MessageTemplates:
    """Localized texts shown to end users."""

    # Default error messages, used when the backend gives no ``error`` field
    UPLOAD_FAILED = "Lỗi upload file"
    RESUME_ANALYSIS_FAILED = "Lỗi phân tích CV"
    JOB_MATCH_FAILED = "Lỗi phân tích job match"
    QUESTION_GENERATION_FAILED = "Lỗi tạo câu hỏi phỏng vấn"
    ANSWER_EVALUATION_FAILED = "Lỗi đánh giá câu trả lời"
    MALFORMED_RESPONSE = "Phản hồi từ máy chủ không hợp lệ"
    BACKEND_UNAVAILABLE = "Không thể kết nối tới máy chủ"

    # Section labels used by the legacy improvements list
    SECTION_WORK_EXPERIENCE = "Kinh nghiệm làm việc"
    SECTION_EDUCATION = "Học vấn"
    SECTION_SKILLS = "Kỹ năng"

    # Placeholder texts for the legacy shim
    DEFAULT_QUESTION_HINT = "Hãy trả lời một cách tự tin và cụ thể."
    DEFAULT_ANSWER_EVALUATION = "Câu trả lời tốt, có thể cải thiện thêm."
    DEFAULT_IMPROVEMENT_POINTS = ("Thêm ví dụ cụ thể", "Sử dụng số liệu để minh họa")
    DEFAULT_GAP_SUGGESTION = "Cần học thêm GraphQL để phù hợp hơn với công việc."

    @staticmethod
    def get_job_match_summary(score: float, analysis: str, strengths: str, improvements: str) -> str:
        """Build the multi-line job-match text shown under the score gauge."""
        return (
            f"Dựa trên phân tích AI, CV của bạn phù hợp {score:.1f}% với yêu cầu công việc.\n"
            f"\n"
            f"{analysis}\n"
            f"\n"
            f"Điểm mạnh:\n"
            f"{strengths}\n"
            f"\n"
            f"Cần cải thiện:\n"
            f"{improvements}"
        )
