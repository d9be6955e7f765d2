"""
Description:
Schemas for the structured feedback returned by the provider.

Score ranges (0-100) are described but not enforced; the provider output is
checked for completeness by the schema validator before these models are built.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Union

class CategoryScore(BaseModel):
    name: str = Field(..., min_length=1, description="One of the five canonical category names")
    score: Any = Field(..., description="Category score, usually a number between 0 and 100")
    comment: str = Field(..., min_length=1, description="Comment justifying the score")

class FeedbackResult(BaseModel):
    totalScore: Union[int, float] = Field(..., description="Overall score between 0 and 100")
    categoryScores: List[CategoryScore] = Field(..., min_length=5, max_length=5)
    strengths: List[str] = Field(default_factory=list)
    areasForImprovement: List[str] = Field(default_factory=list)
    finalAssessment: str = Field(..., description="Overall assessment text")
