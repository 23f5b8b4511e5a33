"""
Shared fixtures: settings and fake transports for the external services.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from interview_coach.config.settings import Settings
from interview_coach.core.practice_session import PracticeSessionManager
from interview_coach.core.transcription_client import VoiceTranscriptionClient
from interview_coach.core.voice_evaluator import VoiceResponseEvaluator

TEST_KEY = "sk-test"


def completion_reply(content: Any) -> httpx.Response:
    """Completion service success response wrapping ``content`` as the message."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def error_reply(status_code: int, message: str) -> httpx.Response:
    return httpx.Response(status_code, json={"error": {"message": message, "type": "invalid_request_error"}})


GOOD_EVALUATION = {
    "score": 8,
    "clarity": 7,
    "fluency": 9,
    "confidence": 6,
    "sentiment": "positive",
    "feedback": "Well organized answer with a concrete example.",
    "suggestions": ["Slow down slightly", "Quantify the outcome", "Close with a summary", "Smile"],
}


class FakeServices:
    """Routes transcription and completion requests to swappable handlers."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.requests: list[httpx.Request] = []
        self.transcription: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"text": "  I led the migration to a new queue.  "})
        )
        self.completion: Callable[[httpx.Request], httpx.Response] = (
            lambda request: completion_reply(GOOD_EVALUATION)
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == self.settings.transcription_url:
            return self.transcription(request)
        if str(request.url) == self.settings.completion_url:
            return self.completion(request)
        return httpx.Response(404, json={"error": {"message": "unknown endpoint"}})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def calls_to(self, url: str) -> int:
        return sum(1 for request in self.requests if str(request.url) == url)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=TEST_KEY, langfuse_enabled=False)


@pytest.fixture
def services(settings) -> FakeServices:
    return FakeServices(settings)


@pytest.fixture
def voice_evaluator(settings, services) -> VoiceResponseEvaluator:
    return VoiceResponseEvaluator(settings=settings, client=services.client())


@pytest.fixture
def transcription_client(settings, services) -> VoiceTranscriptionClient:
    return VoiceTranscriptionClient(settings=settings, client=services.client())


@pytest.fixture
def manager(transcription_client, voice_evaluator) -> PracticeSessionManager:
    return PracticeSessionManager(
        transcription_client=transcription_client,
        voice_evaluator=voice_evaluator,
    )
