"""Abstract interface for asynchronous transcription jobs."""

from abc import ABC, abstractmethod

from voice_intake.domain.models import JobHandle, JobStatus


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text job backends."""

    @abstractmethod
    def start_job(
        self,
        job_name: str,
        language_code: str,
        media_format: str,
        media_uri: str,
        output_bucket: str,
    ) -> JobHandle:
        """
        Submits a transcription job.

        Args:
            job_name: Unique name for the job.
            language_code: Language of the recording (e.g. ``pt-BR``).
            media_format: Audio container format (e.g. ``ogg``).
            media_uri: Location of the source audio.
            output_bucket: Bucket the transcript document is written to.

        Returns:
            Handle identifying the submitted job.

        Raises:
            TranscriptionJobError: If the job cannot be started.
        """

    @abstractmethod
    def get_job_status(self, handle: JobHandle) -> JobStatus:
        """
        Queries the current status of a transcription job.

        Raises:
            TranscriptionJobError: If the status cannot be retrieved.
        """
