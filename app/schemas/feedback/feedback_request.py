"""
Description:
Schema for a feedback generation request.

A request carries the interview and user identifiers, the ordered transcript and,
optionally, the id of an existing feedback document to overwrite. `retryCount`
is the caller's attempt counter; `allowDegradedFallback` states explicitly
whether a mock result may be stored when the provider call fails. When the flag
is omitted it is derived from `retryCount > 0`.

Dependencies:
- pydantic: For data validation and settings management.
- app.schemas.feedback.transcript_turn: For the transcript turn schema.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from app.schemas.feedback.transcript_turn import TranscriptTurn

class FeedbackRequest(BaseModel):
    interviewId: str = Field(..., min_length=1, description="Interview the transcript belongs to")
    userId: str = Field(..., min_length=1, description="Candidate the feedback is for")
    transcript: List[TranscriptTurn] = Field(..., min_length=1, description="Ordered speaker turns")
    feedbackId: Optional[str] = Field(None, description="Existing feedback document to overwrite")
    retryCount: Optional[int] = Field(None, description="How many times the caller already tried")
    allowDegradedFallback: Optional[bool] = Field(None, description="Store mock feedback if the provider fails")

    @property
    def fallback_allowed(self) -> bool:
        if self.allowDegradedFallback is not None:
            return self.allowDegradedFallback
        return bool(self.retryCount and self.retryCount > 0)
