"""
Interview Service Module

This module generates mock interviews and serves the interview and feedback
read paths used by the dashboard.

Question generation asks the provider for a JSON array of questions for a
role, level and tech stack and stores the result as a finalized interview with
a random cover image. Unlike feedback generation there is no schema depth and
no fallback: any failure is logged and reported as {"success": False, "error"}.

Dependencies:
- openai: For the AsyncOpenAI client type.
- loguru: For logging operations.
"""

import random
from datetime import datetime, timezone
from typing import Callable, List, Optional
from loguru import logger
from openai import AsyncOpenAI
from app.constants.feedback_constants import INTERVIEW_COVERS, QUESTIONS_MODEL
from app.core.ai_client_manager import get_question_generation_client
from app.core.secure_prompt_manager import SecurePromptManager, secure_prompt_manager
from app.errors.exceptions import FeedbackError, ParseError
from app.helper.parse_ai_json import parse_ai_json
from app.schemas.feedback.feedback_record import StoredFeedback
from app.schemas.interview.interview import GenerateInterviewRequest, GenerateInterviewResponse, Interview
from app.services.feedback.tools.feedback_repository import FeedbackRepository
from app.services.feedback.tools.provider_client import ProviderClient
from app.services.interview.tools.interview_repository import InterviewRepository

def get_random_interview_cover() -> str:
    return random.choice(INTERVIEW_COVERS)

def parse_questions(content: str) -> List[str]:
    """Decode the provider answer as a list of question strings."""
    questions = parse_ai_json(content, opener="[")
    if not isinstance(questions, list) or not all(isinstance(q, str) for q in questions):
        raise ParseError("Questions response is not a JSON array of strings")
    return [q.strip() for q in questions if q.strip()]

class InterviewService:
    def __init__(
        self,
        interviews: InterviewRepository,
        feedback: FeedbackRepository,
        client: Optional[AsyncOpenAI] = None,
        client_provider: Callable[[], AsyncOpenAI] = get_question_generation_client,
        prompts: Optional[SecurePromptManager] = None,
        log=None,
    ):
        self.interviews = interviews
        self.feedback = feedback
        self.client = client
        self.client_provider = client_provider
        self.prompts = prompts or secure_prompt_manager
        self.logger = log or logger.bind(component="interview_service")
        self.model = QUESTIONS_MODEL

    async def generate_interview(self, request: GenerateInterviewRequest) -> GenerateInterviewResponse:
        """
        Generate interview questions and store them as a finalized interview.

        Args:
            request: Role, level, tech stack, question balance and amount

        Returns:
            GenerateInterviewResponse: success with the new interview id, or the error
        """
        try:
            client = self.client if self.client is not None else self.client_provider()
            provider = ProviderClient(client, log=self.logger)
            prompt = self.prompts.get_question_generation_prompt(request)

            content = await provider.complete([{"role": "user", "content": prompt}], model=self.model)
            questions = parse_questions(content)
            self.logger.info(f"Generated {len(questions)} questions for {request.role} ({request.level})")

            interview = {
                "role": request.role,
                "type": request.type,
                "level": request.level,
                "techstack": [tech.strip() for tech in request.techstack.split(",") if tech.strip()],
                "questions": questions,
                "userId": request.userid,
                "finalized": True,
                "coverImage": get_random_interview_cover(),
                "createdAt": datetime.now(timezone.utc).isoformat(),
            }
            interview_id = await self.interviews.add(interview)
            return GenerateInterviewResponse(success=True, interviewId=interview_id)
        except FeedbackError as e:
            self.logger.error(f"Interview generation failed with {type(e).__name__}: {e.message}")
            return GenerateInterviewResponse(success=False, error=e.message)
        except Exception as e:
            self.logger.exception(f"Interview generation unexpected error: {e}")
            return GenerateInterviewResponse(success=False, error=str(e) or "Unknown error occurred")

    async def get_interview_by_id(self, interview_id: str) -> Optional[Interview]:
        return await self.interviews.get_by_id(interview_id)

    async def get_feedback_by_interview_id(self, interview_id: str, user_id: str) -> Optional[StoredFeedback]:
        return await self.feedback.get_by_interview(interview_id, user_id)

    async def get_interviews_by_user_id(self, user_id: str) -> List[Interview]:
        return await self.interviews.list_by_user(user_id)

    async def get_latest_interviews(self, user_id: str, limit: int = 20) -> List[Interview]:
        return await self.interviews.list_latest_finalized(user_id, limit=limit)
