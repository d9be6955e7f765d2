"""
Test API Routes Module

Exercises the FastAPI routes with the services wired to in-memory fakes.

Dependencies:
- pytest: For testing framework
- fastapi.testclient: For calling the app without a server
"""

import json
import pytest
from fastapi.testclient import TestClient
from conftest import FakeProviderClient, chat_envelope, connection_error
from app.core.route_limiters import limiter
from app.main import app
from app.routes.interview_feedback import get_feedback_repository, get_feedback_service
from app.routes.interviews import get_interview_service
from app.services.feedback import FeedbackService
from app.services.feedback.tools.feedback_repository import FeedbackRepository
from app.services.interview import InterviewService
from app.services.interview.tools.interview_repository import InterviewRepository

@pytest.fixture
def provider():
    return FakeProviderClient()

@pytest.fixture
def client(firestore, provider):
    app.dependency_overrides[get_feedback_service] = lambda: FeedbackService(
        client=provider, repository=FeedbackRepository(firestore)
    )
    app.dependency_overrides[get_feedback_repository] = lambda: FeedbackRepository(firestore)
    app.dependency_overrides[get_interview_service] = lambda: InterviewService(
        InterviewRepository(firestore), FeedbackRepository(firestore), client=provider
    )
    limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

class TestHealthRoute:
    def test_health(self, client):
        """The health endpoint reports ok."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

class TestFeedbackRoutes:
    """Test the feedback generation and lookup routes."""

    def test_create_feedback(self, client, provider, firestore, feedback_request, valid_feedback):
        """POST /api/feedback returns the created feedback id."""
        provider.payload = chat_envelope(json.dumps(valid_feedback))

        response = client.post("/api/feedback", json=feedback_request)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert set(body) == {"success", "feedbackId"}
        assert body["feedbackId"] in firestore.docs("feedback")

    def test_invalid_request_uses_result_shape(self, client, provider):
        """Invalid requests get the uniform failure body."""
        response = client.post("/api/feedback", json={"userId": "u", "transcript": []})

        assert response.status_code == 200
        assert response.json() == {"success": False, "error": "Missing interviewId parameter"}
        assert provider.calls == []

    def test_empty_body(self, client):
        """An empty body is a failed result, not a fault."""
        response = client.post("/api/feedback")
        assert response.json() == {"success": False, "error": "No parameters provided"}

    def test_fallback_result(self, client, provider, feedback_request):
        """Fallback results carry isMockData."""
        provider.exc = connection_error()

        response = client.post("/api/feedback", json={**feedback_request, "retryCount": 1})

        body = response.json()
        assert body["success"] is True
        assert body["isMockData"] is True

    def test_get_feedback(self, client, provider, feedback_request, valid_feedback):
        """Stored feedback is returned by interview and user."""
        provider.payload = chat_envelope(json.dumps(valid_feedback))
        created = client.post("/api/feedback", json=feedback_request).json()

        response = client.get("/api/feedback", params={"interviewId": "interview-1", "userId": "user-1"})

        assert response.status_code == 200
        assert response.json()["id"] == created["feedbackId"]
        assert response.json()["totalScore"] == 78

    def test_get_feedback_not_found(self, client):
        """Missing feedback is a 404."""
        response = client.get("/api/feedback", params={"interviewId": "nope", "userId": "user-1"})
        assert response.status_code == 404

class TestInterviewRoutes:
    """Test the interview generation and listing routes."""

    def test_generate_and_fetch(self, client, provider):
        """A generated interview can be fetched back."""
        provider.payload = chat_envelope('["Q1", "Q2"]')

        response = client.post("/api/interviews/generate", json={
            "type": "technical", "role": "Backend Engineer", "level": "Senior",
            "techstack": "Python,Go", "amount": 2, "userid": "user-1",
        })

        assert response.status_code == 200
        interview_id = response.json()["interviewId"]
        fetched = client.get(f"/api/interviews/{interview_id}").json()
        assert fetched["questions"] == ["Q1", "Q2"]
        assert fetched["techstack"] == ["Python", "Go"]

        listed = client.get("/api/interviews/user/user-1").json()
        assert [i["id"] for i in listed] == [interview_id]

    def test_generate_failure(self, client, provider):
        """Generation failures are a 500 with the error."""
        provider.exc = connection_error()

        response = client.post("/api/interviews/generate", json={
            "type": "technical", "role": "Backend Engineer", "level": "Senior",
            "techstack": "", "amount": 2, "userid": "user-1",
        })

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Error calling OpenRouter API")

    def test_unknown_interview(self, client):
        """Unknown interviews are a 404."""
        assert client.get("/api/interviews/missing").status_code == 404

    def test_latest_requires_user(self, client):
        """The latest listing requires a user id."""
        assert client.get("/api/interviews/latest").status_code == 422
