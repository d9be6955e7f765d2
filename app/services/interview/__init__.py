from .interview_service import InterviewService

__all__ = ["InterviewService"]
