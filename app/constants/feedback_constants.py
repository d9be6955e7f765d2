"""
Description:
Constants shared by the feedback and interview generation services: collection
names, provider defaults, the grading categories and the interview cover images.

Dependencies:
- os: For environment overrides of the provider models.
"""

import os

FEEDBACK_COLLECTION = "feedback"
INTERVIEWS_COLLECTION = "interviews"

DEFAULT_OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_PUBLIC_BASE_URL = "https://prepwise-interview.vercel.app"
APP_TITLE = "Prepwise AI Interview App"

FEEDBACK_MODEL = os.getenv("FEEDBACK_MODEL", "anthropic/claude-3-haiku")
QUESTIONS_MODEL = os.getenv("QUESTIONS_MODEL", "anthropic/claude-3-haiku:beta")

FEEDBACK_TEMPERATURE = 0.2
FEEDBACK_MAX_TOKENS = 2000

CATEGORY_NAMES = (
    "Communication Skills",
    "Technical Knowledge",
    "Problem Solving",
    "Cultural Fit",
    "Confidence and Clarity",
)

INTERVIEW_COVERS = (
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
)
