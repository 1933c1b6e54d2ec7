"""Amazon Polly implementation of the SpeechSynthesisService interface."""

from typing import Any

from voice_intake.domain.models import SynthesisTask
from voice_intake.exceptions import SpeechSynthesisError
from voice_intake.infrastructure.interfaces import SpeechSynthesisService
from voice_intake.logging import setup_logging

logger = setup_logging()


class PollySpeechSynthesizer(SpeechSynthesisService):
    """Starts asynchronous Polly synthesis tasks that write to S3."""

    def __init__(self, client: Any):
        self._client = client

    def start_task(
        self,
        text: str,
        voice_id: str,
        language_code: str,
        output_format: str,
        sample_rate: str,
        output_bucket: str,
    ) -> SynthesisTask:
        try:
            response = self._client.start_speech_synthesis_task(
                OutputFormat=output_format,
                OutputS3BucketName=output_bucket,
                Text=text,
                TextType="text",
                VoiceId=voice_id,
                LanguageCode=language_code,
                SampleRate=sample_rate,
            )
        except Exception as e:
            logger.exception("Polly task submission failed", extra={"voice_id": voice_id})
            raise SpeechSynthesisError(e) from e

        task = response["SynthesisTask"]
        return SynthesisTask(task_id=task["TaskId"], output_uri=task["OutputUri"])
