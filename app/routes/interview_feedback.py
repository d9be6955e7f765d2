"""
Interview Feedback API Route

Description:
This module defines the FastAPI routes for generating and reading interview feedback.

Arguments:
- POST body: a feedback request (interviewId, userId, transcript, optional feedbackId,
  retryCount and allowDegradedFallback).

Returns:
- POST: the uniform CreateFeedbackResponse, always with HTTP 200.
- GET: the stored feedback for an interview and user.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.services.feedback: For generating and storing feedback.
- app.core.route_limiters: For rate limiting functionality.
- loguru: For logging information about the request.
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, Request
from loguru import logger
from app.core.route_limiters import limiter
from app.database import get_firestore_client
from app.errors.exceptions import FeedbackNotFound
from app.schemas.feedback import CreateFeedbackResponse, StoredFeedback
from app.services.feedback import FeedbackService
from app.services.feedback.tools.feedback_repository import FeedbackRepository

router = APIRouter(
    prefix="/api",
    tags=["interview-feedback"],
    responses={404: {"description": "Not found"}}
)

def get_feedback_service() -> FeedbackService:
    return FeedbackService()

def get_feedback_repository() -> FeedbackRepository:
    return FeedbackRepository(get_firestore_client())


@router.post("/feedback", response_model=CreateFeedbackResponse, response_model_exclude_none=True)
@limiter.limit("10/minute")
async def create_feedback(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Score an interview transcript and store the feedback.

    Invalid input is reported in the body rather than as a 422 so that callers
    always receive the same result shape.
    """
    return await service.create_feedback(payload)


@router.get("/feedback", response_model=StoredFeedback, response_model_exclude_none=True)
async def get_feedback(
    interviewId: str = Query(..., min_length=1),
    userId: str = Query(..., min_length=1),
    repository: FeedbackRepository = Depends(get_feedback_repository),
):
    feedback = await repository.get_by_interview(interviewId, userId)
    if feedback is None:
        logger.info(f"No feedback for interview {interviewId} and user {userId}")
        raise FeedbackNotFound(interviewId)
    return feedback
