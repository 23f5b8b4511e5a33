"""
Tests for the heuristic text answer evaluator.
"""

import pytest

from interview_coach.core.exceptions import ValidationError
from interview_coach.core.text_evaluator import GENERIC_ENCOURAGEMENT, TextAnswerEvaluator
from interview_coach.models.feedback import Sentiment

VERSION_CONTROL = "How do you handle version control in a team environment?"

STRONG_ANSWER = (
    "I definitely handle version control with feature branches because the team environment "
    "needs clean history. For example, every change goes through a pull request and a code "
    "review before merge."
)


@pytest.fixture
def evaluator() -> TextAnswerEvaluator:
    return TextAnswerEvaluator()


async def test_strong_answer_scores_top_marks(evaluator):
    feedback = await evaluator.evaluate(VERSION_CONTROL, STRONG_ANSWER, "")

    assert feedback.clarity == 10
    assert feedback.knowledge == 10
    assert feedback.grammar == 10
    assert feedback.confidence == 10
    assert feedback.score == 10
    assert feedback.feedback.startswith("Excellent response!")
    assert feedback.suggestions == []
    assert feedback.improvements == []
    assert feedback.strengths == [
        "Clear and well-structured response",
        "Strong technical knowledge demonstrated",
        "Excellent grammar and communication skills",
        "Confident and assertive delivery",
    ]


async def test_one_word_answer(evaluator):
    feedback = await evaluator.evaluate(VERSION_CONTROL, "yes", "")

    assert feedback.clarity == 5
    assert feedback.knowledge == 1
    assert feedback.grammar == 5
    assert feedback.confidence == 8
    # (5 + 1 + 5 + 8) / 4 = 4.75
    assert feedback.score == 5
    assert feedback.feedback.startswith("Decent attempt")
    assert feedback.sentiment == Sentiment.NEUTRAL
    assert feedback.suggestions == [
        "Structure your response with a clear beginning, middle, and end",
        "Use specific examples to illustrate your points",
        "Demonstrate deeper understanding by discussing related concepts",
    ]
    assert feedback.strengths == ["Confident and assertive delivery"]
    assert feedback.improvements == [
        "Improve response structure and organization",
        "Deepen technical knowledge in this area",
        "Focus on grammar and communication clarity",
    ]


async def test_no_strengths_falls_back_to_encouragement(evaluator):
    feedback = await evaluator.evaluate(VERSION_CONTROL, "well, I think so", "")

    assert feedback.confidence == 6
    assert feedback.score == 4
    assert feedback.strengths == [GENERIC_ENCOURAGEMENT]
    assert len(feedback.improvements) == 4
    assert len(feedback.suggestions) == 3


async def test_connective_bonus_on_long_answer(evaluator):
    answer = (
        "I improved performance because I profiled the app and implemented caching, for example "
        "reducing load time by half across every page that our customers visited most often."
    )
    feedback = await evaluator.evaluate("Describe how you would optimize a slow-performing web application.", answer)

    assert len(answer.split()) > 20
    assert feedback.clarity == 10


async def test_connective_bonus_on_short_answer(evaluator):
    # 18 words: below the long-answer base, so 5 + 2
    answer = (
        "I improved performance because I profiled the app and implemented caching, "
        "for example reducing load time by half."
    )
    feedback = await evaluator.evaluate("Describe how you would optimize a slow-performing web application.", answer)

    assert feedback.clarity == 7


async def test_knowledge_counts_question_topic_words(evaluator):
    question = "Explain the difference between REST and GraphQL APIs."
    answer = "REST uses many endpoints while GraphQL uses one."

    feedback = await evaluator.evaluate(question, answer)

    # rest and graphql found, short answer bonus of 1
    assert feedback.knowledge == 5


async def test_knowledge_keyword_count_is_capped(evaluator):
    question = "Explain the difference between REST and GraphQL APIs."
    answer = "To explain the difference between REST and GraphQL APIs is easy."

    feedback = await evaluator.evaluate(question, answer)

    # six topic words present, capped at five: 5 * 2 + 1 clamps to 10
    assert feedback.knowledge == 10


async def test_hedging_lowers_confidence_and_assertion_raises_it(evaluator):
    hedged = await evaluator.evaluate(VERSION_CONTROL, "I believe we use branches.")
    both = await evaluator.evaluate(VERSION_CONTROL, "I think we certainly use branches.")

    assert hedged.confidence == 6
    assert both.confidence == 8


async def test_phrase_checks_are_case_sensitive(evaluator):
    inside_a_word = await evaluator.evaluate(
        VERSION_CONTROL, "Our team in Delhi thinks carefully about branches and merges."
    )
    lower_case_hedge = await evaluator.evaluate(VERSION_CONTROL, "i think we use branches.")
    capitalized_connective = await evaluator.evaluate(VERSION_CONTROL, "Because it works.")

    assert inside_a_word.confidence == 8
    assert lower_case_hedge.confidence == 8
    assert capitalized_connective.clarity == 5


@pytest.mark.parametrize(
    "answer,expected",
    [
        ("I love this work and I am excited about it.", Sentiment.POSITIVE),
        ("It was hard and I had to struggle with every issue.", Sentiment.NEGATIVE),
        ("It was a great project but a difficult one.", Sentiment.NEUTRAL),
        ("We shipped it on Tuesday.", Sentiment.NEUTRAL),
        # repeats count once: great vs problem
        ("Great work, great team, but one problem.", Sentiment.NEUTRAL),
        ("Great great great, but a hard problem.", Sentiment.NEGATIVE),
    ],
)
async def test_sentiment_is_lexicon_driven(evaluator, answer, expected):
    feedback = await evaluator.evaluate(VERSION_CONTROL, answer)
    assert feedback.sentiment == expected


async def test_evaluation_is_deterministic(evaluator):
    first = await evaluator.evaluate(VERSION_CONTROL, STRONG_ANSWER, "sample")
    second = await evaluator.evaluate(VERSION_CONTROL, STRONG_ANSWER, "sample")

    assert first.model_dump_json() == second.model_dump_json()


async def test_scores_stay_in_range(evaluator):
    answers = ["?", "a " * 200, STRONG_ANSWER * 5, "NO!!!", "i think i believe maybe"]
    for answer in answers:
        feedback = await evaluator.evaluate(VERSION_CONTROL, answer)
        for value in (feedback.score, feedback.clarity, feedback.knowledge, feedback.grammar, feedback.confidence):
            assert 0 <= value <= 10


@pytest.mark.parametrize("answer", ["", "   ", "\n\t"])
async def test_empty_answer_is_rejected(evaluator, answer):
    with pytest.raises(ValidationError):
        await evaluator.evaluate(VERSION_CONTROL, answer)
