"""
Tests for the speech-to-text client.
"""

import httpx
import pytest

from conftest import TEST_KEY, error_reply
from interview_coach.core.exceptions import TransportError, ValidationError

AUDIO = b"\x1a\x45\xdf\xa3fake-webm-bytes"


async def test_transcript_is_trimmed(transcription_client):
    transcript = await transcription_client.transcribe(AUDIO, TEST_KEY)

    assert transcript == "I led the migration to a new queue."


async def test_request_is_multipart_with_model_and_language(transcription_client, services, settings):
    await transcription_client.transcribe(AUDIO, TEST_KEY, language="de")

    request = services.requests[-1]
    body = request.content

    assert str(request.url) == settings.transcription_url
    assert request.headers["Authorization"] == f"Bearer {TEST_KEY}"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="model"' in body
    assert b"whisper-1" in body
    assert b'name="language"' in body
    assert b"de" in body
    assert b'filename="audio.webm"' in body
    assert AUDIO in body


async def test_missing_text_field_gives_empty_transcript(transcription_client, services):
    services.transcription = lambda request: httpx.Response(200, json={"duration": 1.2})

    assert await transcription_client.transcribe(AUDIO, TEST_KEY) == ""


async def test_rejected_credential_carries_upstream_message(transcription_client, services):
    services.transcription = lambda request: error_reply(401, "Incorrect API key provided")

    with pytest.raises(TransportError) as exc_info:
        await transcription_client.transcribe(AUDIO, TEST_KEY)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Incorrect API key provided"
    assert "Incorrect API key provided" in str(exc_info.value)


async def test_error_without_json_body_uses_status_text(transcription_client, services):
    services.transcription = lambda request: httpx.Response(500, text="<html>oops</html>")

    with pytest.raises(TransportError) as exc_info:
        await transcription_client.transcribe(AUDIO, TEST_KEY)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Internal Server Error"


async def test_success_with_non_json_body_is_transport_error(transcription_client, services):
    services.transcription = lambda request: httpx.Response(200, text="not json")

    with pytest.raises(TransportError):
        await transcription_client.transcribe(AUDIO, TEST_KEY)


async def test_network_failure_has_no_status(transcription_client, services):
    def fail(request):
        raise httpx.ReadTimeout("timed out", request=request)

    services.transcription = fail

    with pytest.raises(TransportError) as exc_info:
        await transcription_client.transcribe(AUDIO, TEST_KEY)

    assert exc_info.value.status_code is None


@pytest.mark.parametrize("credential", ["", "  "])
async def test_missing_credential_is_rejected(transcription_client, services, credential):
    with pytest.raises(ValidationError):
        await transcription_client.transcribe(AUDIO, credential)

    assert services.requests == []


async def test_empty_audio_is_rejected(transcription_client, services):
    with pytest.raises(ValidationError):
        await transcription_client.transcribe(b"", TEST_KEY)

    assert services.requests == []
