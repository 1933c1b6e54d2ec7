"""Amazon Transcribe implementation of the TranscriptionService interface."""

from typing import Any

from voice_intake.domain.models import JobHandle, JobKind, JobStatus
from voice_intake.exceptions import TranscriptionJobError
from voice_intake.infrastructure.interfaces import TranscriptionService
from voice_intake.logging import setup_logging

logger = setup_logging()


class AWSTranscribeService(TranscriptionService):
    """Runs transcription jobs through a boto3 ``transcribe`` client."""

    def __init__(self, client: Any):
        self._client = client

    def start_job(
        self,
        job_name: str,
        language_code: str,
        media_format: str,
        media_uri: str,
        output_bucket: str,
    ) -> JobHandle:
        try:
            response = self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                LanguageCode=language_code,
                MediaFormat=media_format,
                Media={"MediaFileUri": media_uri},
                OutputBucketName=output_bucket,
            )
        except Exception as e:
            logger.exception("Transcribe job submission failed", extra={"job_name": job_name})
            raise TranscriptionJobError(job_name, e) from e

        job = response["TranscriptionJob"]
        logger.info(
            "Transcribe job submitted",
            extra={
                "job_name": job["TranscriptionJobName"],
                "status": job.get("TranscriptionJobStatus"),
            },
        )
        return JobHandle(job_id=job["TranscriptionJobName"], kind=JobKind.TRANSCRIPTION)

    def get_job_status(self, handle: JobHandle) -> JobStatus:
        try:
            response = self._client.get_transcription_job(
                TranscriptionJobName=handle.job_id
            )
        except Exception as e:
            logger.exception("Transcribe status query failed", extra={"job_name": handle.job_id})
            raise TranscriptionJobError(handle.job_id, e) from e

        job = response["TranscriptionJob"]
        return JobStatus(
            state=job["TranscriptionJobStatus"],
            result_location=job.get("Transcript", {}).get("TranscriptFileUri"),
            failure_reason=job.get("FailureReason"),
        )
