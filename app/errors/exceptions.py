from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class InterviewNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Interview '{identifier}' not found." if identifier else "Interview not found."
        super().__init__(detail=detail)

class FeedbackNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Feedback for interview '{identifier}' not found." if identifier else "Feedback not found."
        super().__init__(detail=detail)


# Feedback pipeline errors. These never leave the feedback service as faults;
# create_feedback converts them into {"success": False, "error": message}.

class FeedbackError(Exception):
    default_message = "Unknown error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class ValidationError(FeedbackError):
    default_message = "Invalid feedback request"

class ConfigurationError(FeedbackError):
    default_message = "OpenRouter API key is not set"

class ProviderError(FeedbackError):
    """Base for failures of the outbound provider call. Eligible for the mock fallback."""
    default_message = "Error calling OpenRouter API"

class ProviderHTTPError(ProviderError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenRouter API error ({status_code}): {body}")

class ProviderTransportError(ProviderError):
    def __init__(self, detail: str = None):
        message = f"Error calling OpenRouter API: {detail}" if detail else None
        super().__init__(message)

class ProviderFormatError(ProviderError):
    default_message = "Unexpected response format from OpenRouter API"

class NoMatchingEnvelope(ProviderFormatError):
    pass

class ProviderEmptyContentError(ProviderError):
    default_message = "Invalid response from OpenRouter API (missing content)"

class ParseError(FeedbackError):
    default_message = "Failed to parse response from OpenRouter API"

class SchemaError(FeedbackError):
    def __init__(self, violations: list):
        self.violations = list(violations)
        super().__init__(f"Invalid response format: {'; '.join(self.violations)}")

class PersistenceError(FeedbackError):
    def __init__(self, detail: str = None):
        super().__init__(f"Database error: {detail or 'Failed to save feedback to database'}")
