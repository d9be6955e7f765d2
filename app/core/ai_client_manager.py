"""
AI Client Manager

This module manages the AsyncOpenAI client instances used to reach the
OpenRouter chat-completions API. Feedback scoring and question generation each
get a dedicated client so that one workload cannot starve the other's
connection pool.

Clients are created lazily on first use. A missing OPENROUTER_API_KEY raises
ConfigurationError at that point, before any request is attempted, and is not
cached so that a later call can succeed once the key is configured.
"""

import os
import threading
from typing import Dict, Optional
from dotenv import load_dotenv
from loguru import logger
from openai import AsyncOpenAI
from app.constants.feedback_constants import APP_TITLE, DEFAULT_OPENROUTER_BASE_URL, DEFAULT_PUBLIC_BASE_URL
from app.errors.exceptions import ConfigurationError

# Ensure .env is loaded
load_dotenv()

SERVICE_TYPES = ("feedback", "question_generation")

class AIClientManager:
    """
    Manages dedicated AI client instances for the feedback and question services.

    SDK-level retries are disabled on every client: retrying is the caller's
    decision (see FeedbackRequest.retryCount).
    """

    def __init__(self):
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False
        self._lock = threading.Lock()

    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return

        with self._lock:
            # Double-check locking for initialization
            if self._initialized:
                return

            api_key = os.getenv("OPENROUTER_API_KEY")
            if not api_key:
                logger.error("OPENROUTER_API_KEY environment variable is not set")
                raise ConfigurationError("OpenRouter API key is not set")

            base_url = os.getenv("OPENROUTER_BASE_URL", DEFAULT_OPENROUTER_BASE_URL)
            # Attribution headers only; OpenRouter uses them for its app rankings
            default_headers = {
                "HTTP-Referer": os.getenv("PUBLIC_BASE_URL") or DEFAULT_PUBLIC_BASE_URL,
                "X-Title": APP_TITLE,
            }

            self._clients = {
                service_type: AsyncOpenAI(
                    base_url=base_url,
                    api_key=api_key,
                    default_headers=default_headers,
                    max_retries=0,
                )
                for service_type in SERVICE_TYPES
            }
            self._initialized = True
            logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")

    def get_client(self, service_type: str) -> AsyncOpenAI:
        """
        Get a dedicated client for the specified service type.

        Args:
            service_type (str): Type of service ("feedback", "question_generation")

        Returns:
            AsyncOpenAI: Dedicated client instance for the service

        Raises:
            ValueError: If service_type is not supported
            ConfigurationError: If the provider credential is missing
        """
        if service_type not in SERVICE_TYPES:
            raise ValueError(f"Unsupported service type: {service_type}. Available: {list(SERVICE_TYPES)}")

        self._initialize_clients()
        return self._clients[service_type]

    def reset(self):
        """Drop all cached clients so the next access re-reads the environment."""
        with self._lock:
            self._clients = {}
            self._initialized = False


_ai_manager: Optional[AIClientManager] = None
_manager_lock = threading.Lock()

def get_ai_client_manager() -> AIClientManager:
    """
    Get the singleton AIClientManager instance with lazy initialization.

    Returns:
        AIClientManager: The singleton instance
    """
    global _ai_manager

    if _ai_manager is None:
        with _manager_lock:
            # Double-check locking pattern
            if _ai_manager is None:
                _ai_manager = AIClientManager()

    return _ai_manager

def get_feedback_client() -> AsyncOpenAI:
    """Get dedicated client for feedback scoring."""
    return get_ai_client_manager().get_client("feedback")

def get_question_generation_client() -> AsyncOpenAI:
    """Get dedicated client for interview question generation."""
    return get_ai_client_manager().get_client("question_generation")
