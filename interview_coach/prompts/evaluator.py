"""
Voice Evaluator Prompt Templates

Contains the instruction sent to the completion service when a
spoken answer is evaluated.

Evaluation dimensions:
- Clarity
- Fluency
- Confidence
- Sentiment
"""


class VoiceEvaluatorPrompts:
    """
    Prompt templates for evaluating transcribed voice answers.

    The model must answer with one JSON object and nothing else.
    """

    SYSTEM_CONTEXT = (
        "You are an expert interview coach specializing in voice and communication "
        "analysis. Always respond with valid JSON only."
    )

    EVALUATION_CRITERIA = """
Evaluation Criteria:
- CLARITY: How clear and articulate is the speech?
- FLUENCY: How smooth and natural is the delivery?
- CONFIDENCE: How confident does the candidate sound?
- SENTIMENT: Overall emotional tone of the response
- FEEDBACK: Comprehensive feedback on content, delivery, and professionalism
- SUGGESTIONS: Specific actionable improvement recommendations
"""

    def generate_evaluation_prompt(self, question: str, transcript: str) -> str:
        """Generate prompt for evaluating a spoken answer."""

        prompt = f"""You are an expert interview coach evaluating a candidate's voice response to an interview question.

INTERVIEW QUESTION: "{question}"

CANDIDATE'S RESPONSE: "{transcript}"

Please evaluate this response and provide a detailed analysis.

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
  "score": <overall score out of 10>,
  "clarity": <clarity score out of 10>,
  "fluency": <fluency score out of 10>,
  "confidence": <confidence score out of 10>,
  "sentiment": "<positive|neutral|negative>",
  "feedback": "<detailed feedback paragraph>",
  "suggestions": ["<suggestion 1>", "<suggestion 2>", "<suggestion 3>"]
}}
{self.EVALUATION_CRITERIA}
Be constructive, professional, and provide specific examples where possible."""

        return prompt
