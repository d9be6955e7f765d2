"""
Secure Prompt Manager Module

This module provides a secure way to manage AI prompts by isolating them from user data
to prevent injection attacks. It implements a template-based system with explicit
placeholders and comprehensive sanitization.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for managing the feedback and question prompts
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding
- loguru: For logging truncation warnings
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
import re
import html
from loguru import logger
from app.constants.feedback_constants import CATEGORY_NAMES

def sanitize_text(text: str, max_length: Optional[int] = 1000, escape_html: bool = True) -> str:
    """
    Sanitize text input to prevent injection attacks and ensure data safety.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding to prevent XSS
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting to prevent DoS attacks
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000), None for no limit
        escape_html (bool): Whether to HTML escape the text (default: True)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None or empty after sanitization
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if max_length is not None and len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text:
        raise ValueError("Text cannot be empty after sanitization")

    return text

@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key in self.placeholders:
                config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
                max_length = config.get('max_length', 1000)
                escape_html = config.get('escape_html', True)

                sanitized_data[key] = sanitize_text(str(value), max_length=max_length, escape_html=escape_html)
            else:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e

def _category_schema_lines() -> str:
    blocks = []
    for name in CATEGORY_NAMES:
        blocks.append(
            "    {{\n"
            f"      \"name\": \"{name}\",\n"
            "      \"score\": number between 0-100,\n"
            "      \"comment\": \"detailed comment\"\n"
            "    }}"
        )
    return ",\n".join(blocks)

class SecurePromptManager:
    """
    Secure prompt manager that isolates prompts from user data to prevent injection attacks.

    Holds the feedback scoring prompts (system schema + user rubric) and the
    interview question generation prompt.
    """

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        """Initialize secure prompt templates with explicit placeholders."""
        return {
            "feedback_system": PromptTemplate(
                template="""You are a professional interviewer analyzing a mock interview. Your task is to evaluate the candidate based on structured categories.

Your output should be a JSON object with the following structure:
{{
  "totalScore": number between 0-100,
  "categoryScores": [
""" + _category_schema_lines() + """
  ],
  "strengths": ["strength1", "strength2", "strength3"],
  "areasForImprovement": ["area1", "area2", "area3"],
  "finalAssessment": "overall assessment text"
}}

You must follow this exact schema with these exact field names and types.""",
                placeholders={}
            ),
            "feedback_analysis": PromptTemplate(
                template="""You are an AI interviewer analyzing a mock interview. Your task is to evaluate the candidate based on structured categories. Be thorough and detailed in your analysis. Don't be lenient with the candidate. If there are mistakes or areas for improvement, point them out.
Transcript:
{transcript}

Please score the candidate from 0 to 100 in the following areas:
- Communication Skills: Clarity, articulation, structured responses.
- Technical Knowledge: Understanding of key concepts for the role.
- Problem Solving: Ability to analyze problems and propose solutions.
- Cultural Fit: Alignment with company values and job role.
- Confidence and Clarity: Confidence in responses, engagement, and clarity.

Then provide a list of strengths, areas for improvement, and a final assessment.

Respond with a JSON object exactly matching the structure described in the system message.""",
                placeholders={
                    "transcript": "Formatted interview transcript"
                },
                sanitization_config={
                    "transcript": {
                        "max_length": None,  # Scored on the whole conversation
                        "escape_html": False   # Keep the candidate's code snippets readable
                    }
                }
            ),
            "question_generation": PromptTemplate(
                template="""Prepare questions for a job interview.
The job role is {role}.
The job experience level is {level}.
The tech stack used in the job is: {techstack}.
The focus between behavioural and technical questions should lean towards: {type}.
The amount of questions required is: {amount}.
Please return only the questions, without any additional text.
The questions are going to be read by a voice assistant so do not use "/" or "*" or any other special characters which might break the voice assistant.
Return the questions formatted like this:
["Question 1", "Question 2", "Question 3"]""",
                placeholders={
                    "role": "Job role",
                    "level": "Experience level",
                    "techstack": "Comma-separated technologies",
                    "type": "Behavioural/technical balance",
                    "amount": "Number of questions"
                },
                sanitization_config={
                    "techstack": {"escape_html": False}
                }
            ),
        }

    def get_feedback_messages(self, formatted_transcript: str) -> List[Dict[str, str]]:
        """
        Build the system and user messages for a feedback scoring request.

        Args:
            formatted_transcript: Output of format_transcript

        Returns:
            List[Dict[str, str]]: Chat messages, system first

        Raises:
            ValueError: If the transcript is empty after sanitization
        """
        return [
            {"role": "system", "content": self._templates["feedback_system"].render()},
            {"role": "user", "content": self._templates["feedback_analysis"].render(transcript=formatted_transcript)},
        ]

    def get_question_generation_prompt(self, request) -> str:
        """
        Get a secure question generation prompt with sanitized request data.

        Args:
            request: GenerateInterviewRequest

        Returns:
            str: Secure prompt with sanitized data
        """
        return self._templates["question_generation"].render(
            role=request.role,
            level=request.level,
            techstack=request.techstack or "not specified",
            type=request.type,
            amount=request.amount
        )


# Global instance for reuse across the application
secure_prompt_manager = SecurePromptManager()
