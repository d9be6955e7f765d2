"""
Description:
Schemas for generated interviews and the request that creates them.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, Field
from typing import List, Optional

class GenerateInterviewRequest(BaseModel):
    type: str = Field(..., description="Balance between behavioural and technical questions")
    role: str = Field(..., min_length=1)
    level: str = Field(..., min_length=1)
    techstack: str = Field("", description="Comma-separated technologies")
    amount: int = Field(..., ge=1, le=20)
    userid: str = Field(..., min_length=1)

class Interview(BaseModel):
    id: Optional[str] = None
    role: str
    type: str
    level: str
    techstack: List[str] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)
    userId: str
    finalized: bool = False
    coverImage: Optional[str] = None
    createdAt: str

class GenerateInterviewResponse(BaseModel):
    success: bool
    interviewId: Optional[str] = None
    error: Optional[str] = None
