"""
Text Answer Evaluator for Smart Interview Coach

Scores typed answers with deterministic text heuristics. No model call,
no randomness: the same inputs always give the same feedback.
"""

import logging
import re
from typing import Any

from interview_coach.core.exceptions import ValidationError
from interview_coach.core.scoring import clamp, round_half_up
from interview_coach.models.feedback import AnswerFeedback, Sentiment

logger = logging.getLogger(__name__)


# Question words that say nothing about the topic
STOP_WORDS = {"what", "how", "why", "when", "where", "would", "could", "should"}

MAX_RELEVANT_KEYWORDS = 5

# Matched case-sensitively against the raw answer
EXPLANATORY_CONNECTIVES = ["because", "for example"]
HEDGE_PHRASES = ["I believe", "I think"]
ASSERTIVE_WORDS = ["definitely", "certainly"]

POSITIVE_LEXICON = ["excellent", "great", "love", "enjoy", "excited", "passionate", "successful"]
NEGATIVE_LEXICON = ["difficult", "challenging", "problem", "issue", "struggle", "hard"]

# Sub-scores at or above this count as strengths
STRENGTH_THRESHOLD = 7
MAX_SUGGESTIONS = 3

FEEDBACK_BANDS: list[tuple[int, str]] = [
    (8, "Excellent response! Your answer demonstrates strong knowledge and clear communication. "
        "You've structured your thoughts well and provided relevant examples."),
    (6, "Good response with solid foundation. Your answer shows understanding of the topic, "
        "though there's room for improvement in some areas."),
    (4, "Decent attempt with some good points. Consider expanding on your ideas and providing "
        "more specific examples to strengthen your response."),
    (0, "Your response needs significant improvement. Focus on addressing the question more "
        "directly and providing more detailed explanations."),
]

REMEDIAL_SUGGESTIONS: dict[str, list[str]] = {
    "clarity": [
        "Structure your response with a clear beginning, middle, and end",
        "Use specific examples to illustrate your points",
    ],
    "knowledge": [
        "Demonstrate deeper understanding by discussing related concepts",
        "Include industry-specific terminology where appropriate",
    ],
    "grammar": [
        "Review your response for grammar and punctuation",
        "Vary your sentence structure for better flow",
    ],
    "confidence": [
        "Use more assertive language to convey confidence",
        "Avoid hedging words like 'maybe' or 'probably'",
    ],
}

STRENGTH_LINES: dict[str, str] = {
    "clarity": "Clear and well-structured response",
    "knowledge": "Strong technical knowledge demonstrated",
    "grammar": "Excellent grammar and communication skills",
    "confidence": "Confident and assertive delivery",
}

IMPROVEMENT_LINES: dict[str, str] = {
    "clarity": "Improve response structure and organization",
    "knowledge": "Deepen technical knowledge in this area",
    "grammar": "Focus on grammar and communication clarity",
    "confidence": "Build confidence in response delivery",
}

GENERIC_ENCOURAGEMENT = "Shows effort and engagement with the question"

# Fixed order in which dimensions contribute bullets
DIMENSIONS = ["clarity", "knowledge", "grammar", "confidence"]


class TextAnswerEvaluator:
    """
    Heuristic scorer for typed interview answers.

    Sub-scores (each 1-10):
    - clarity: length plus explanatory connectives
    - knowledge: overlap with the question's topic words
    - grammar: capitalization, end punctuation, sentence length
    - confidence: hedging versus assertive language
    """

    async def evaluate(
        self,
        question: str,
        answer: str,
        sample_answer: str = "",
    ) -> AnswerFeedback:
        """
        Evaluate a typed answer.

        Args:
            question: The question text
            answer: The candidate's answer
            sample_answer: Reference answer (shown to the user, not scored against)

        Returns:
            AnswerFeedback for the answer

        Raises:
            ValidationError: if the answer is empty
        """
        if not answer or not answer.strip():
            raise ValidationError("Answer must not be empty")

        analysis = self._analyze_answer(question, answer)
        scores = {dimension: analysis[dimension] for dimension in DIMENSIONS}
        overall = round_half_up(sum(scores.values()) / len(scores))

        feedback = AnswerFeedback(
            score=overall,
            clarity=scores["clarity"],
            knowledge=scores["knowledge"],
            grammar=scores["grammar"],
            confidence=scores["confidence"],
            sentiment=self._determine_sentiment(answer),
            feedback=self._select_feedback(overall),
            suggestions=self._generate_suggestions(scores),
            strengths=self._generate_strengths(scores),
            improvements=self._generate_improvements(scores),
        )

        logger.info(
            f"Text evaluation complete: score={feedback.score} "
            f"(clarity={feedback.clarity}, knowledge={feedback.knowledge}, "
            f"grammar={feedback.grammar}, confidence={feedback.confidence}), "
            f"words={analysis['word_count']}"
        )
        return feedback

    # =========================================================================
    # ANALYSIS
    # =========================================================================

    def _analyze_answer(self, question: str, answer: str) -> dict[str, Any]:
        """Compute text signals and sub-scores."""
        words = answer.split()
        word_count = len(words)
        relevance = self._count_relevant_keywords(question, words)

        knowledge = clamp(relevance * 2 + (3 if word_count > 50 else 1), 1, 10)

        clarity = 8 if word_count > 20 else 5
        if any(connective in answer for connective in EXPLANATORY_CONNECTIVES):
            clarity += 2
        clarity = clamp(clarity, 1, 10)

        confidence = 6 if any(hedge in answer for hedge in HEDGE_PHRASES) else 8
        if any(word in answer for word in ASSERTIVE_WORDS):
            confidence += 2
        confidence = clamp(confidence, 1, 10)

        return {
            "word_count": word_count,
            "relevance": relevance,
            "clarity": int(clarity),
            "knowledge": int(knowledge),
            "grammar": self._score_grammar(answer, word_count),
            "confidence": int(confidence),
        }

    def _count_relevant_keywords(self, question: str, answer_words: list[str]) -> int:
        """Count topic words from the question that show up inside answer words."""
        question_words = re.findall(r"[\w']+", question.lower())
        relevant = [
            word for word in question_words
            if len(word) > 3 and word not in STOP_WORDS
        ]
        answer_tokens = [word.lower() for word in answer_words]

        found = [
            word for word in relevant
            if any(word in token for token in answer_tokens)
        ]
        return min(MAX_RELEVANT_KEYWORDS, len(found))

    def _score_grammar(self, answer: str, word_count: int) -> int:
        """Rough grammar score from capitalization, punctuation and sentence length."""
        stripped = answer.strip()
        sentences = [s for s in re.split(r"[.!?]+", answer) if s.strip()]

        score = 5
        if re.match(r"[A-Z]", stripped):
            score += 2
        if re.search(r"[.!?]$", stripped):
            score += 2
        if sentences:
            words_per_sentence = word_count / len(sentences)
            if 8 < words_per_sentence < 25:
                score += 1

        return int(clamp(score, 1, 10))

    def _determine_sentiment(self, answer: str) -> Sentiment:
        """Classify sentiment by how many distinct lexicon words appear."""
        lowered = answer.lower()
        positive = sum(1 for word in POSITIVE_LEXICON if word in lowered)
        negative = sum(1 for word in NEGATIVE_LEXICON if word in lowered)

        if positive > negative:
            return Sentiment.POSITIVE
        if negative > positive:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    # =========================================================================
    # FEEDBACK TEXT
    # =========================================================================

    def _select_feedback(self, overall: int) -> str:
        """Pick the canned paragraph for the score band."""
        for floor, text in FEEDBACK_BANDS:
            if overall >= floor:
                return text
        return FEEDBACK_BANDS[-1][1]

    def _generate_suggestions(self, scores: dict[str, int]) -> list[str]:
        suggestions = []
        for dimension in DIMENSIONS:
            if scores[dimension] < STRENGTH_THRESHOLD:
                suggestions.extend(REMEDIAL_SUGGESTIONS[dimension])
        return suggestions[:MAX_SUGGESTIONS]

    def _generate_strengths(self, scores: dict[str, int]) -> list[str]:
        strengths = [
            STRENGTH_LINES[dimension] for dimension in DIMENSIONS
            if scores[dimension] >= STRENGTH_THRESHOLD
        ]
        return strengths or [GENERIC_ENCOURAGEMENT]

    def _generate_improvements(self, scores: dict[str, int]) -> list[str]:
        return [
            IMPROVEMENT_LINES[dimension] for dimension in DIMENSIONS
            if scores[dimension] < STRENGTH_THRESHOLD
        ]
