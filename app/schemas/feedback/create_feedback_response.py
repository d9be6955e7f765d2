"""
Description:
Schema for the uniform result of a feedback generation attempt.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, Field
from typing import Optional

class CreateFeedbackResponse(BaseModel):
    success: bool
    feedbackId: Optional[str] = Field(None, description="Id of the stored feedback document")
    isMockData: Optional[bool] = Field(None, description="Set when the stored feedback is the fallback")
    error: Optional[str] = Field(None, description="Failure description when success is false")

    @classmethod
    def ok(cls, feedback_id: str, is_mock_data: bool = False) -> "CreateFeedbackResponse":
        return cls(success=True, feedbackId=feedback_id, isMockData=True if is_mock_data else None)

    @classmethod
    def failed(cls, error: str) -> "CreateFeedbackResponse":
        return cls(success=False, error=error)
