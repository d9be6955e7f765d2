"""
Feedback Service Module

Generates scored interview feedback from a transcript through the
text-generation provider and stores it in the `feedback` collection.
"""

from .feedback_service import FeedbackService, validate_feedback_params

__all__ = ["FeedbackService", "validate_feedback_params"]
