"""
Voice Response Evaluator for Smart Interview Coach

Evaluates transcribed voice answers through the completion service:
- Builds the evaluation instruction
- Calls the completion service
- Validates and repairs the JSON reply

Transport failures propagate. A malformed reply is a contract failure
and is replaced by a neutral fallback result.

Integrated with Langfuse for optional tracing of completion calls.
"""

import asyncio
import json
import logging
import math
import random
from typing import Any

import httpx
from langfuse import Langfuse
from pydantic import BaseModel, ConfigDict

from interview_coach.config.settings import Settings, get_settings
from interview_coach.core.exceptions import ContractError, TransportError, ValidationError
from interview_coach.core.transcription_client import upstream_error_message
from interview_coach.models.feedback import VoiceEvaluationResult, VoiceSentiment
from interview_coach.prompts.evaluator import VoiceEvaluatorPrompts

logger = logging.getLogger(__name__)

SERVICE_NAME = "Completion"

REQUIRED_NUMERIC_FIELDS = ["score", "clarity", "fluency", "confidence"]
MAX_SUGGESTIONS = 5

DEFAULT_FEEDBACK = "No feedback provided."
DEFAULT_SUGGESTIONS = [
    "Practice your response structure",
    "Work on voice clarity",
    "Build confidence through rehearsal",
]

FALLBACK_SCORE = 6
FALLBACK_FEEDBACK = "Unable to generate detailed feedback. Please try again."
FALLBACK_SUGGESTIONS = [
    "Practice speaking clearly and at a steady pace",
    "Structure your responses with clear beginning, middle, and end",
    "Use specific examples to support your points",
]


def fallback_result() -> VoiceEvaluationResult:
    """Neutral result used when the completion reply breaks the contract."""
    return VoiceEvaluationResult(
        score=FALLBACK_SCORE,
        clarity=FALLBACK_SCORE,
        fluency=FALLBACK_SCORE,
        confidence=FALLBACK_SCORE,
        sentiment=VoiceSentiment.NEUTRAL,
        feedback=FALLBACK_FEEDBACK,
        suggestions=list(FALLBACK_SUGGESTIONS),
    )


# ============================================================================
# CONTRACT VALIDATION
# ============================================================================

class ParseOutcome(BaseModel):
    """Result of parsing a completion reply: a value or a contract error message."""

    model_config = ConfigDict(frozen=True)

    value: VoiceEvaluationResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def _is_number(value: Any) -> bool:
    # ints of any size are fine; only floats can be nan or inf
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _load_json_object(content: str) -> dict[str, Any]:
    """Decode the reply, tolerating prose or code fences around the object."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        json_start = content.find("{")
        json_end = content.rfind("}") + 1
        if json_start < 0 or json_end <= json_start:
            raise ContractError("Reply contains no JSON object")
        try:
            data = json.loads(content[json_start:json_end])
        except json.JSONDecodeError as e:
            raise ContractError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ContractError("Reply JSON is not an object")
    return data


def validate_evaluation(data: dict[str, Any]) -> VoiceEvaluationResult:
    """
    Check required fields and repair optional ones.

    Raises:
        ContractError: a required numeric field is missing or not a number
    """
    for field in REQUIRED_NUMERIC_FIELDS:
        if not _is_number(data.get(field)):
            raise ContractError(f"Field '{field}' is missing or not numeric")

    sentiment = data.get("sentiment")
    try:
        sentiment = VoiceSentiment(sentiment.strip().lower())
    except (AttributeError, ValueError):
        sentiment = VoiceSentiment.NEUTRAL

    feedback = data.get("feedback")
    if not isinstance(feedback, str) or not feedback.strip():
        feedback = DEFAULT_FEEDBACK

    suggestions = data.get("suggestions")
    if isinstance(suggestions, list):
        suggestions = [str(s) for s in suggestions[:MAX_SUGGESTIONS]]
    else:
        suggestions = list(DEFAULT_SUGGESTIONS)

    return VoiceEvaluationResult(
        score=max(0, min(10, data["score"])),
        clarity=max(0, min(10, data["clarity"])),
        fluency=max(0, min(10, data["fluency"])),
        confidence=max(0, min(10, data["confidence"])),
        sentiment=sentiment,
        feedback=feedback,
        suggestions=suggestions,
    )


def parse_evaluation(content: str | None) -> ParseOutcome:
    """Parse a completion reply into a ParseOutcome. Never raises."""
    if not content or not content.strip():
        return ParseOutcome(error="No evaluation content received")
    try:
        return ParseOutcome(value=validate_evaluation(_load_json_object(content)))
    except ContractError as e:
        return ParseOutcome(error=str(e))


def value_or_fallback(outcome: ParseOutcome) -> VoiceEvaluationResult:
    """Return the parsed value, or the neutral fallback if parsing failed."""
    if outcome.ok:
        return outcome.value
    return fallback_result()


# ============================================================================
# COMPLETION-BACKED EVALUATOR
# ============================================================================

class VoiceResponseEvaluator:
    """
    Evaluates spoken answers with the completion service.

    Only contract failures are absorbed. Missing credentials raise
    ValidationError and failed calls raise TransportError; nothing is retried.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize voice evaluator.

        Args:
            settings: Application settings (defaults to cached settings)
            client: HTTP client to use (one is created if omitted)
        """
        self.settings = settings or get_settings()
        self.client = client or httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)
        self.prompts = VoiceEvaluatorPrompts()

        # Initialize Langfuse for observability
        self.langfuse = None
        if self.settings.langfuse_enabled:
            if self.settings.langfuse_secret_key and self.settings.langfuse_public_key:
                try:
                    self.langfuse = Langfuse(
                        secret_key=self.settings.langfuse_secret_key,
                        public_key=self.settings.langfuse_public_key,
                        host=self.settings.langfuse_base_url,
                    )
                    logger.info("Langfuse initialized for completion tracing")
                except Exception as e:
                    logger.warning(f"Failed to initialize Langfuse: {e}")
            else:
                logger.info("Langfuse keys not configured, tracing disabled")

    async def close(self):
        """Close the HTTP client and flush Langfuse."""
        await self.client.aclose()
        if self.langfuse:
            try:
                self.langfuse.flush()
            except Exception as e:
                logger.warning(f"Failed to flush Langfuse: {e}")

    async def evaluate(
        self,
        question: str,
        transcript: str,
        credential: str,
    ) -> VoiceEvaluationResult:
        """
        Evaluate a transcribed answer.

        Args:
            question: The question text
            transcript: Transcript of the spoken answer
            credential: Bearer credential for the completion service

        Returns:
            Validated VoiceEvaluationResult (fallback result if the reply was malformed)

        Raises:
            ValidationError: missing credential or empty transcript
            TransportError: the completion call failed
        """
        if not credential or not credential.strip():
            raise ValidationError("An API key is required for voice evaluation")
        if not transcript or not transcript.strip():
            raise ValidationError("No speech was detected in the recording")

        prompt = self.prompts.generate_evaluation_prompt(question, transcript)

        span = None
        if self.langfuse:
            try:
                span = self.langfuse.start_span(
                    name="voice_evaluation",
                    metadata={
                        "model": self.settings.completion_model,
                        "transcript_length": len(transcript),
                    },
                )
            except Exception as lf_err:
                logger.warning(f"Langfuse span start failed: {lf_err}")
                span = None

        try:
            content = await self._call_completion(prompt, credential)
        except TransportError as e:
            self._end_span(span, {"error": str(e)})
            raise

        outcome = parse_evaluation(content)
        if not outcome.ok:
            logger.warning(f"Completion reply broke the evaluation contract: {outcome.error}")
        result = value_or_fallback(outcome)

        logger.info(
            f"Voice evaluation complete: score={result.score}, clarity={result.clarity}, "
            f"fluency={result.fluency}, confidence={result.confidence}, "
            f"fallback_used={not outcome.ok}"
        )
        self._end_span(span, {"score": result.score, "fallback_used": not outcome.ok})
        return result

    def _end_span(self, span: Any, output: dict[str, Any]):
        if not span:
            return
        try:
            span.update(output=output)
            span.end()
        except Exception as lf_err:
            logger.warning(f"Langfuse span end failed: {lf_err}")

    async def _call_completion(self, prompt: str, credential: str) -> str | None:
        """
        Call the completion service.

        Returns:
            Message content of the first choice, or None if the reply has none
        """
        payload = {
            "model": self.settings.completion_model,
            "messages": [
                {"role": "system", "content": self.prompts.SYSTEM_CONTEXT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.completion_temperature,
            "max_tokens": self.settings.completion_max_tokens,
        }

        try:
            response = await self.client.post(
                self.settings.completion_url,
                headers={
                    "Authorization": f"Bearer {credential}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
        except httpx.HTTPError as e:
            logger.error(f"Completion API error: {e}")
            raise TransportError(SERVICE_NAME, str(e)) from e

        if not response.is_success:
            message = upstream_error_message(response)
            logger.error(f"Completion API returned {response.status_code}: {message}")
            raise TransportError(SERVICE_NAME, message, status_code=response.status_code)

        try:
            result = response.json()
        except ValueError:
            logger.warning("Completion API returned a non-JSON body")
            return None

        return self._extract_content(result)

    def _extract_content(self, result: Any) -> str | None:
        """Extract text content from the first choice, handling list/dict formats."""
        if not isinstance(result, dict):
            return None
        choices = result.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        return content if isinstance(content, str) else None


# ============================================================================
# OFFLINE EVALUATOR
# ============================================================================

STRUCTURE_MARKERS = ["first", "second", "third", "finally", "in conclusion"]

OFFLINE_SUGGESTIONS = [
    "Practice using the STAR method (Situation, Task, Action, Result)",
    "Include more specific examples from your experience",
    "Work on maintaining steady pace and volume",
]


class OfflineVoiceEvaluator:
    """
    Stand-in for the completion service when no model is available.

    Scores from word count and structure markers. Clarity and fluency get a
    small random bonus drawn from the injected random source, so a seeded
    ``random.Random`` makes results repeatable.
    """

    def __init__(self, rng: random.Random | None = None, delay_seconds: float = 0.0):
        self.rng = rng or random.Random()
        self.delay_seconds = delay_seconds

    async def close(self):
        pass

    async def evaluate(
        self,
        question: str,
        transcript: str,
        credential: str | None = None,
    ) -> VoiceEvaluationResult:
        """Evaluate a transcript without any external call. The credential is ignored."""
        if not transcript or not transcript.strip():
            raise ValidationError("No speech was detected in the recording")

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        word_count = len(transcript.split())
        lowered = transcript.lower()
        has_structure = any(marker in lowered for marker in STRUCTURE_MARKERS)

        if word_count > 20:
            sentiment = VoiceSentiment.POSITIVE
        elif word_count > 10:
            sentiment = VoiceSentiment.NEUTRAL
        else:
            sentiment = VoiceSentiment.NEGATIVE

        depth = "good depth" if word_count > 20 else "basic understanding"
        structure = (
            "The structure was clear and logical."
            if has_structure
            else "Consider organizing your thoughts more systematically."
        )

        result = VoiceEvaluationResult(
            score=min(10, max(3, 5 + word_count // 10 + (2 if has_structure else 0))),
            clarity=min(10, max(4, 6 + self.rng.randint(0, 2))),
            fluency=min(10, max(4, 6 + self.rng.randint(0, 2))),
            confidence=min(10, max(3, 5 + word_count // 15)),
            sentiment=sentiment,
            feedback=(
                f"Your response demonstrated {depth} of the topic. {structure} "
                "Focus on providing specific examples to strengthen your answer."
            ),
            suggestions=list(OFFLINE_SUGGESTIONS),
        )

        logger.info(f"Offline voice evaluation complete: score={result.score}, words={word_count}")
        return result
