"""
Interviews API Routes

Description:
This module defines FastAPI routes for generating interviews and listing them.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.services.interview: For question generation and interview lookups.
- app.core.route_limiters: For rate limiting functionality.
"""
from typing import List
from fastapi import APIRouter, Depends, Query, Request
from app.core.route_limiters import limiter
from app.database import get_firestore_client
from app.errors.exceptions import InternalServerError, InterviewNotFound
from app.schemas.interview import GenerateInterviewRequest, GenerateInterviewResponse, Interview
from app.services.feedback.tools.feedback_repository import FeedbackRepository
from app.services.interview import InterviewService
from app.services.interview.tools.interview_repository import InterviewRepository

router = APIRouter(
    prefix="/api/interviews",
    tags=["interviews"],
    responses={404: {"description": "Not found"}}
)

def get_interview_service() -> InterviewService:
    db = get_firestore_client()
    return InterviewService(InterviewRepository(db), FeedbackRepository(db))


@router.post("/generate", response_model=GenerateInterviewResponse, response_model_exclude_none=True)
@limiter.limit("5/minute")
async def generate_interview(
    request: Request,
    body: GenerateInterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    result = await service.generate_interview(body)
    if not result.success:
        raise InternalServerError(result.error)
    return result


@router.get("/latest", response_model=List[Interview])
async def get_latest_interviews(
    userId: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    service: InterviewService = Depends(get_interview_service),
):
    return await service.get_latest_interviews(userId, limit=limit)


@router.get("/user/{user_id}", response_model=List[Interview])
async def get_interviews_by_user(user_id: str, service: InterviewService = Depends(get_interview_service)):
    return await service.get_interviews_by_user_id(user_id)


@router.get("/{interview_id}", response_model=Interview)
async def get_interview(interview_id: str, service: InterviewService = Depends(get_interview_service)):
    interview = await service.get_interview_by_id(interview_id)
    if interview is None:
        raise InterviewNotFound(interview_id)
    return interview
