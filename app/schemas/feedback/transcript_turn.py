"""
Description:
Schema for a single speaker turn of a recorded interview transcript.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel

class TranscriptTurn(BaseModel):
    role: str
    content: str
