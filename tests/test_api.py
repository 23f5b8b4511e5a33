"""
HTTP API tests with the session manager swapped for one on fake transports.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import TEST_KEY, error_reply
from interview_coach.api.dependencies import get_manager
from main import app

ANSWER = (
    "I definitely use feature branches because the team needs clean history. "
    "For example, every change goes through a pull request."
)
AUDIO = {"audio": ("answer.webm", b"fake-audio", "audio/webm")}


@pytest.fixture
def client(manager):
    app.dependency_overrides[get_manager] = lambda: manager
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client) -> str:
    response = client.post("/api/practice/sessions", json={"role_id": "software-developer"})
    assert response.status_code == 200
    return response.json()["session_id"]


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert isinstance(body["default_credential"], bool)


def test_all_routers_are_mounted(client):
    paths = {route.path for route in app.routes}

    assert "/api/practice/sessions" in paths
    assert "/api/audio/transcribe" in paths
    assert "/api/report/aggregate" in paths
    assert "/api/metadata/roles" in paths


def test_roles_catalog(client):
    roles = client.get("/api/metadata/roles").json()

    assert len(roles) == 6
    assert all(role["question_count"] == 5 for role in roles)


def test_role_questions(client):
    response = client.get("/api/metadata/roles/ux-designer/questions")

    assert response.status_code == 200
    assert [q["id"] for q in response.json()][0] == "ux-1"
    assert client.get("/api/metadata/roles/astronaut/questions").status_code == 404


def test_question_lookup(client):
    response = client.get("/api/metadata/questions/sd-2")

    assert response.status_code == 200
    assert response.json()["text"] == "How do you handle version control in a team environment?"
    assert client.get("/api/metadata/questions/zz-9").status_code == 404


def test_create_session(client):
    response = client.post("/api/practice/sessions", json={"role_id": "data-analyst"})
    body = response.json()

    assert response.status_code == 200
    assert body["role_id"] == "data-analyst"
    assert len(body["questions"]) == 5
    assert body["answered_questions"] == 0
    assert body["feedback"] == {}


def test_create_session_unknown_role(client):
    response = client.post("/api/practice/sessions", json={"role_id": "astronaut"})

    assert response.status_code == 404


def test_text_answer_and_session_state(client, session_id):
    response = client.post(f"/api/practice/sessions/{session_id}/answers/sd-2", json={"answer": ANSWER})

    assert response.status_code == 200
    assert 0 <= response.json()["score"] <= 10

    state = client.get(f"/api/practice/sessions/{session_id}").json()
    assert state["answered_questions"] == 1
    assert "sd-2" in state["feedback"]


def test_empty_answer_is_bad_request(client, session_id):
    response = client.post(f"/api/practice/sessions/{session_id}/answers/sd-1", json={"answer": "  "})

    assert response.status_code == 400


def test_unknown_session_and_question(client, session_id):
    assert client.get("/api/practice/sessions/missing").status_code == 404
    response = client.post(f"/api/practice/sessions/{session_id}/answers/pm-1", json={"answer": ANSWER})
    assert response.status_code == 404


def test_report_needs_two_answers(client, session_id):
    client.post(f"/api/practice/sessions/{session_id}/answers/sd-1", json={"answer": ANSWER})
    assert client.get(f"/api/report/{session_id}").status_code == 400

    client.post(f"/api/practice/sessions/{session_id}/answers/sd-2", json={"answer": ANSWER})
    response = client.get(f"/api/report/{session_id}")

    assert response.status_code == 200
    report = response.json()
    assert report["answered_questions"] == 2
    assert len(report["improvement_tips"]) == 3
    assert len(report["follow_up_questions"]) == 3


def test_report_unknown_session(client):
    assert client.get("/api/report/missing").status_code == 404


def test_voice_answer(client, session_id, services, settings):
    response = client.post(
        f"/api/practice/sessions/{session_id}/voice/sd-3",
        files=AUDIO,
        headers={"X-API-Key": TEST_KEY},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["transcript"] == "I led the migration to a new queue."
    assert body["feedback"]["sentiment"] == "Positive"
    assert body["evaluation"]["sentiment"] == "positive"
    assert services.requests[0].headers["Authorization"] == f"Bearer {TEST_KEY}"


def test_voice_answer_upstream_rejection_is_bad_gateway(client, session_id, services):
    services.transcription = lambda request: error_reply(401, "Incorrect API key provided")

    response = client.post(
        f"/api/practice/sessions/{session_id}/voice/sd-3",
        files=AUDIO,
        headers={"X-API-Key": "sk-wrong"},
    )

    assert response.status_code == 502
    assert response.json()["detail"] == "Incorrect API key provided"
    state = client.get(f"/api/practice/sessions/{session_id}").json()
    assert state["feedback"] == {}


def test_transcript_submission(client, session_id):
    response = client.post(
        f"/api/practice/sessions/{session_id}/transcripts/sd-4",
        json={"transcript": "First I profiled the service, finally I added a cache."},
        headers={"X-API-Key": TEST_KEY},
    )

    assert response.status_code == 200
    assert response.json()["feedback"]["score"] == 8


def test_transcribe_endpoint(client):
    response = client.post("/api/audio/transcribe", files=AUDIO, headers={"X-API-Key": TEST_KEY})

    assert response.status_code == 200
    assert response.json() == {"transcript": "I led the migration to a new queue."}


def test_reset_and_end_session(client, session_id):
    client.post(f"/api/practice/sessions/{session_id}/answers/sd-1", json={"answer": ANSWER})

    reset = client.post(f"/api/practice/sessions/{session_id}/reset").json()
    assert reset["answered_questions"] == 0

    assert client.delete(f"/api/practice/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/practice/sessions/{session_id}").status_code == 404


def test_aggregate_empty_list(client):
    response = client.post("/api/report/aggregate", json=[])

    assert response.status_code == 200
    report = response.json()
    assert report["overall_score"] == 0
    assert report["readiness_score"] == 0
    assert report["strong_areas"] == []


def test_aggregate_supplied_feedback(client):
    feedback = [
        {"score": 8, "clarity": 8, "knowledge": 8, "grammar": 8, "confidence": 8, "strengths": ["A"]},
        {"score": 6, "clarity": 6, "knowledge": 6, "grammar": 6, "confidence": 6, "strengths": ["A", "B"]},
    ]

    report = client.post("/api/report/aggregate", json=feedback).json()

    assert report["average_score"] == 7
    assert report["readiness_score"] == 80
    assert report["strong_areas"] == ["A", "B"]
