from .transcript_turn import TranscriptTurn
from .feedback_request import FeedbackRequest
from .feedback_result import CategoryScore, FeedbackResult
from .feedback_record import FeedbackRecord, StoredFeedback
from .create_feedback_response import CreateFeedbackResponse

__all__ = [
    "TranscriptTurn",
    "FeedbackRequest",
    "CategoryScore",
    "FeedbackResult",
    "FeedbackRecord",
    "StoredFeedback",
    "CreateFeedbackResponse",
]
