"""
Description:
Fixed fallback feedback stored when the provider cannot be reached and the
caller allowed degraded output. The content never depends on the transcript.

Returns:
- A FeedbackResult covering all five categories with fixed scores.
"""
from app.schemas.feedback.feedback_result import CategoryScore, FeedbackResult

def generate_mock_feedback() -> FeedbackResult:
    return FeedbackResult(
        totalScore=70,
        categoryScores=[
            CategoryScore(
                name="Communication Skills",
                score=75,
                comment="The candidate communicated their ideas clearly, though there is room for improvement in structuring responses."
            ),
            CategoryScore(
                name="Technical Knowledge",
                score=70,
                comment="The candidate demonstrated adequate technical knowledge for the role."
            ),
            CategoryScore(
                name="Problem Solving",
                score=68,
                comment="The candidate showed decent problem-solving abilities but could improve in analytical thinking."
            ),
            CategoryScore(
                name="Cultural Fit",
                score=80,
                comment="The candidate appears to align well with company values and team dynamics."
            ),
            CategoryScore(
                name="Confidence and Clarity",
                score=65,
                comment="The candidate could work on presenting ideas more confidently and clearly."
            ),
        ],
        strengths=[
            "Good communication skills",
            "Technical knowledge in required areas",
            "Positive attitude throughout the interview",
        ],
        areasForImprovement=[
            "Could improve response structure",
            "Should provide more specific examples",
            "Could demonstrate deeper technical expertise",
        ],
        finalAssessment=(
            "The candidate shows promise for the role but would benefit from additional preparation and experience. "
            "They demonstrated adequate technical knowledge and good communication skills, though there is room for "
            "improvement in confidence and problem-solving approaches."
        ),
    )
