"""Generative model stage."""

from voice_intake.domain.models import StageResult
from voice_intake.infrastructure.interfaces import LLMService
from voice_intake.logging import setup_logging

logger = setup_logging()

STAGE = "generation"


class ResponseGenerator:
    """Asks the model to extract vacancy fields from the transcript."""

    def __init__(self, llm_service: LLMService):
        self._llm = llm_service

    def generate(self, transcript: str | None) -> StageResult:
        """
        Runs the model on ``transcript``; an absent transcript is sent as empty text.

        Returns:
            StageResult carrying the raw completion text on success.
        """
        logger.info("Analyzing with model", extra={"has_transcript": bool(transcript)})
        try:
            completion = self._llm.complete(transcript or "")
        except Exception as e:
            logger.exception("Model call failed")
            return StageResult.failure(STAGE, str(e))
        return StageResult.success(STAGE, completion)
