"""
Feedback Service Module

This module turns a recorded interview transcript into a stored, scored feedback
document. It is the only entry point the rest of the application uses for
feedback generation and it never raises: every outcome is a
CreateFeedbackResponse, either {"success": True, "feedbackId": ...} or
{"success": False, "error": ...}.

Workflow:
1. Validate the request (no provider or store call when invalid)
2. Format the transcript
3. Call the provider inside its own failure boundary
4. Parse and schema-validate the answer
5. Create or overwrite the feedback document

When step 3 fails and the request allows degraded output, a fixed mock result
is stored instead and flagged with isMockData. A failure to store that mock is
logged and the original provider error is returned.

Dependencies:
- openai: For the AsyncOpenAI client type.
- pydantic: For request and record validation.
- loguru: For logging operations.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional
from loguru import logger
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError as PydanticValidationError
from app.constants.feedback_constants import FEEDBACK_MAX_TOKENS, FEEDBACK_MODEL, FEEDBACK_TEMPERATURE
from app.core.ai_client_manager import get_feedback_client
from app.core.secure_prompt_manager import SecurePromptManager, secure_prompt_manager
from app.database import get_firestore_client
from app.errors.exceptions import FeedbackError, ProviderError, SchemaError, ValidationError
from app.helper.parse_ai_json import parse_ai_json
from app.schemas.feedback import CreateFeedbackResponse, FeedbackRecord, FeedbackRequest
from app.services.feedback.tools.feedback_repository import FeedbackRepository
from app.services.feedback.tools.feedback_schema_validator import validate_feedback
from app.services.feedback.tools.mock_feedback import generate_mock_feedback
from app.services.feedback.tools.provider_client import ProviderClient
from app.services.feedback.tools.transcript_formatter import format_transcript

def validate_feedback_params(params: Any) -> FeedbackRequest:
    """
    Check a raw feedback request in a fixed order and build the typed request.

    Order: params present, interviewId present, userId present, transcript a
    non-empty sequence of turns.

    Raises:
        ValidationError: Describing the first failed check
    """
    if params is None:
        raise ValidationError("No parameters provided")
    if isinstance(params, FeedbackRequest):
        return params
    if isinstance(params, BaseModel):
        params = params.model_dump()
    if not isinstance(params, Mapping):
        raise ValidationError("No parameters provided")

    if not params.get("interviewId"):
        raise ValidationError("Missing interviewId parameter")
    if not params.get("userId"):
        raise ValidationError("Missing userId parameter")

    transcript = params.get("transcript")
    if not isinstance(transcript, (list, tuple)) or len(transcript) == 0:
        raise ValidationError("Invalid transcript data")

    try:
        return FeedbackRequest.model_validate(dict(params))
    except PydanticValidationError as e:
        if any(error["loc"] and error["loc"][0] == "transcript" for error in e.errors()):
            raise ValidationError("Invalid transcript data") from e
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Invalid {field} parameter: {first['msg']}") from e

def build_feedback_record(request: FeedbackRequest, feedback: dict, is_mock_data: bool = False) -> FeedbackRecord:
    """Combine validated feedback fields with the request identifiers."""
    try:
        return FeedbackRecord(
            interviewId=request.interviewId,
            userId=request.userId,
            totalScore=feedback["totalScore"],
            categoryScores=feedback["categoryScores"],
            strengths=feedback["strengths"],
            areasForImprovement=feedback["areasForImprovement"],
            finalAssessment=feedback["finalAssessment"],
            isMockData=True if is_mock_data else None,
        )
    except PydanticValidationError as e:
        raise SchemaError([
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        ]) from e

class FeedbackService:
    """
    Generates, validates and stores interview feedback.

    Collaborators are injected so that the service can run against fakes:

    Attributes:
        client (AsyncOpenAI): Provider client; resolved lazily from client_provider when None.
        client_provider (Callable): Returns an AsyncOpenAI client, raising ConfigurationError
            when the provider credential is missing.
        repository (FeedbackRepository): Store access; resolved lazily when None.
        prompts (SecurePromptManager): Builds the scoring messages.
        logger: Loguru-compatible logger.
    """

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        repository: Optional[FeedbackRepository] = None,
        client_provider: Callable[[], AsyncOpenAI] = get_feedback_client,
        prompts: Optional[SecurePromptManager] = None,
        log=None,
    ):
        self.client = client
        self.client_provider = client_provider
        self._repository = repository
        self.prompts = prompts or secure_prompt_manager
        self.logger = log or logger.bind(component="feedback_service")
        self.model = FEEDBACK_MODEL

    @property
    def repository(self) -> FeedbackRepository:
        if self._repository is None:
            self._repository = FeedbackRepository(get_firestore_client(), log=self.logger)
        return self._repository

    def _provider(self) -> ProviderClient:
        client = self.client if self.client is not None else self.client_provider()
        return ProviderClient(client, log=self.logger)

    async def create_feedback(self, params: Any) -> CreateFeedbackResponse:
        """
        Generate feedback for an interview transcript and store it.

        Args:
            params: FeedbackRequest or the equivalent mapping

        Returns:
            CreateFeedbackResponse: success with the feedback id (and isMockData for
            the fallback), or failure with an error message
        """
        try:
            request = validate_feedback_params(params)
        except ValidationError as e:
            self.logger.error(f"createFeedback rejected request: {e.message}")
            return CreateFeedbackResponse.failed(e.message)

        self.logger.info(
            f"createFeedback START interviewId={request.interviewId} userId={request.userId} "
            f"turns={len(request.transcript)} feedbackId={request.feedbackId}"
        )

        try:
            formatted_transcript = format_transcript(request.transcript)
            self.logger.debug(f"Transcript processed. Length: {len(formatted_transcript)} chars")

            provider = self._provider()
            messages = self.prompts.get_feedback_messages(formatted_transcript)

            try:
                content = await provider.complete(
                    messages,
                    model=self.model,
                    temperature=FEEDBACK_TEMPERATURE,
                    max_tokens=FEEDBACK_MAX_TOKENS,
                    response_format={"type": "json_object"},
                )
            except ProviderError as provider_error:
                return await self._handle_provider_failure(request, provider_error)

            feedback = validate_feedback(parse_ai_json(content))
            self.logger.info(
                f"Validated feedback totalScore={feedback['totalScore']} "
                f"categories={[category['name'] for category in feedback['categoryScores']]}"
            )

            record = build_feedback_record(request, feedback)
            feedback_id = await self.repository.save(record, request.feedbackId)
            return CreateFeedbackResponse.ok(feedback_id)

        except FeedbackError as e:
            self.logger.error(f"createFeedback failed with {type(e).__name__}: {e.message}")
            return CreateFeedbackResponse.failed(e.message)
        except Exception as e:
            self.logger.exception(f"createFeedback unexpected error: {e}")
            return CreateFeedbackResponse.failed(str(e) or "Unknown error occurred")

    async def _handle_provider_failure(
        self, request: FeedbackRequest, provider_error: ProviderError
    ) -> CreateFeedbackResponse:
        self.logger.error(f"createFeedback provider call failed: {provider_error.message}")

        if request.fallback_allowed:
            self.logger.warning(
                f"Using fallback mock feedback for interview {request.interviewId} (retryCount={request.retryCount})"
            )
            try:
                mock = generate_mock_feedback().model_dump()
                record = build_feedback_record(request, mock, is_mock_data=True)
                feedback_id = await self.repository.save(record, request.feedbackId)
                self.logger.info(f"Fallback mock feedback saved with ID {feedback_id}")
                return CreateFeedbackResponse.ok(feedback_id, is_mock_data=True)
            except Exception as mock_error:
                # The provider failure stays the reported cause
                self.logger.error(f"Fallback feedback could not be saved: {mock_error}")

        return CreateFeedbackResponse.failed(provider_error.message)
