"""Submission of follow-up questions for speech synthesis."""

from voice_intake.config import PollyConfig
from voice_intake.domain.models import StageResult
from voice_intake.infrastructure.interfaces import SpeechSynthesisService
from voice_intake.logging import setup_logging

logger = setup_logging()

STAGE = "synthesis"


class SpeechSynthesisSubmitter:
    """Starts a synthesis task and returns where its audio will be written."""

    def __init__(self, synthesis_service: SpeechSynthesisService, config: PollyConfig):
        self._service = synthesis_service
        self._config = config

    def submit(self, text: str) -> StageResult:
        """
        Submits ``text`` for synthesis without waiting for the audio.

        The returned URI may not exist yet when the caller receives it.
        """
        logger.info("Generating audio", extra={"characters": len(text)})
        try:
            task = self._service.start_task(
                text=text,
                voice_id=self._config.voice_id,
                language_code=self._config.language_code,
                output_format=self._config.output_format,
                sample_rate=self._config.sample_rate,
                output_bucket=self._config.output_bucket,
            )
        except Exception as e:
            logger.exception("Speech synthesis submission failed")
            return StageResult.failure(STAGE, str(e))

        logger.info(
            "Audio task submitted",
            extra={"task_id": task.task_id, "output_uri": task.output_uri},
        )
        return StageResult.success(STAGE, task.output_uri)
