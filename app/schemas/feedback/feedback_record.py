"""
Description:
Schema for the feedback document persisted in the `feedback` collection.

Dependencies:
- pydantic: For data validation and settings management.
- app.schemas.feedback.feedback_result: For the validated feedback fields.
"""
from datetime import datetime, timezone
from pydantic import Field
from typing import Optional
from app.schemas.feedback.feedback_result import FeedbackResult

def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

class FeedbackRecord(FeedbackResult):
    interviewId: str
    userId: str
    createdAt: str = Field(default_factory=utc_now_iso, description="ISO-8601 creation timestamp")
    isMockData: Optional[bool] = Field(None, description="True when the record holds fallback feedback")

    def to_document(self) -> dict:
        """Serialize for the document store, leaving `isMockData` out of real feedback."""
        return self.model_dump(exclude_none=True)

class StoredFeedback(FeedbackRecord):
    id: str
