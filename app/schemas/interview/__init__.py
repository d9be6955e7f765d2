from .interview import GenerateInterviewRequest, GenerateInterviewResponse, Interview

__all__ = ["GenerateInterviewRequest", "GenerateInterviewResponse", "Interview"]
