"""Drives one transcription job from submission to transcript text."""

import time
from collections.abc import Callable

from pydantic import ValidationError

from voice_intake.config import TranscribeConfig
from voice_intake.domain.job_poller import JobPoller
from voice_intake.domain.models import PollOutcome, StageResult, TranscriptDocument
from voice_intake.exceptions import TranscriptParseError
from voice_intake.infrastructure.interfaces import StorageClient, TranscriptionService
from voice_intake.logging import setup_logging

logger = setup_logging()

STAGE = "transcription"


class TranscriptionOrchestrator:
    """Submits a transcription job, waits for it, and reads the transcript."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        storage: StorageClient,
        poller: JobPoller,
        config: TranscribeConfig,
        clock: Callable[[], float] = time.time,
    ):
        self._service = transcription_service
        self._storage = storage
        self._poller = poller
        self._config = config
        self._clock = clock

    def transcribe(self, media_uri: str) -> StageResult:
        """
        Transcribes the audio at ``media_uri``.

        Never raises: submission, polling, download and parse errors are
        logged and returned as a failed StageResult, as are failed and
        timed-out jobs.

        Args:
            media_uri: Location of the source audio.

        Returns:
            StageResult carrying the transcript text on success.
        """
        job_name = self._new_job_name()
        logger.info(
            "Starting transcription job",
            extra={"job_name": job_name, "media_uri": media_uri},
        )

        try:
            handle = self._service.start_job(
                job_name=job_name,
                language_code=self._config.language_code,
                media_format=self._config.media_format,
                media_uri=media_uri,
                output_bucket=self._config.output_bucket,
            )

            result = self._poller.poll(handle, self._service.get_job_status)

            if result.outcome == PollOutcome.FAILED:
                reason = result.failure_reason or "unknown reason"
                return StageResult.failure(
                    STAGE, f"transcription job {job_name} failed: {reason}"
                )
            if result.outcome == PollOutcome.TIMED_OUT:
                return StageResult.failure(
                    STAGE,
                    f"transcription job {job_name} timed out after "
                    f"{result.attempts} attempts (last status {result.last_state})",
                )

            text = self._read_transcript(job_name)
        except Exception as e:
            logger.exception("Transcription failed", extra={"job_name": job_name})
            return StageResult.failure(STAGE, str(e))

        logger.info(
            "Transcription completed",
            extra={"job_name": job_name, "characters": len(text)},
        )
        return StageResult.success(STAGE, text)

    def _new_job_name(self) -> str:
        """Derives a unique job name from the current time in milliseconds."""
        return f"{self._config.job_name_prefix}-{round(self._clock() * 1000)}"

    def _read_transcript(self, job_name: str) -> str:
        """Downloads and parses the transcript document written for ``job_name``."""
        object_name = f"{job_name}.json"
        body = self._storage.download_text(self._config.output_bucket, object_name)

        try:
            document = TranscriptDocument.model_validate_json(body)
        except ValidationError as e:
            raise TranscriptParseError(object_name, str(e)) from e

        text = document.text
        if text is None:
            raise TranscriptParseError(object_name, "document has no transcripts")
        return text
