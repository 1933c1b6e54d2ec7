import json
import os

import pytest

from voice_intake.config import PollyConfig, TranscribeConfig
from voice_intake.domain import JobHandle, JobKind, JobPoller, JobStatus, SynthesisTask
from voice_intake.exceptions import (
    LLMServiceError,
    SpeechSynthesisError,
    StorageDownloadError,
    TranscriptionJobError,
)
from voice_intake.infrastructure.interfaces import (
    LLMService,
    SpeechSynthesisService,
    StorageClient,
    TranscriptionService,
)

os.environ.setdefault("DD_TRACE_ENABLED", "false")


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, states=None, fail_on_start=False):
        self._states = list(states or ["COMPLETED"])
        self._fail_on_start = fail_on_start
        self.started = []
        self.queries = 0

    def start_job(self, job_name, language_code, media_format, media_uri, output_bucket):
        if self._fail_on_start:
            raise TranscriptionJobError(job_name, Exception("access denied"))
        self.started.append(
            {
                "job_name": job_name,
                "language_code": language_code,
                "media_format": media_format,
                "media_uri": media_uri,
                "output_bucket": output_bucket,
            }
        )
        return JobHandle(job_id=job_name, kind=JobKind.TRANSCRIPTION)

    def get_job_status(self, handle):
        state = self._states[min(self.queries, len(self._states) - 1)]
        self.queries += 1
        location = None
        if state == "COMPLETED":
            location = f"https://s3.amazonaws.com/out/{handle.job_id}.json"
        reason = "Unsupported media" if state == "FAILED" else None
        return JobStatus(state=state, result_location=location, failure_reason=reason)


class FakeStorage(StorageClient):
    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.downloads = []

    def download(self, bucket_name, object_name):
        self.downloads.append((bucket_name, object_name))
        try:
            return self.objects[(bucket_name, object_name)]
        except KeyError as e:
            raise StorageDownloadError(object_name, e) from e


class FakeLLM(LLMService):
    def __init__(self, completion="", error=None):
        self._completion = completion
        self._error = error
        self.inputs = []

    def complete(self, user_input):
        self.inputs.append(user_input)
        if self._error:
            raise LLMServiceError(self._error)
        return self._completion


class FakeSynthesis(SpeechSynthesisService):
    def __init__(self, output_uri="s3://out/reply.mp3", fail=False):
        self._output_uri = output_uri
        self._fail = fail
        self.tasks = []

    def start_task(self, text, voice_id, language_code, output_format, sample_rate, output_bucket):
        if self._fail:
            raise SpeechSynthesisError(Exception("throttled"))
        self.tasks.append(
            {
                "text": text,
                "voice_id": voice_id,
                "language_code": language_code,
                "output_format": output_format,
                "sample_rate": sample_rate,
                "output_bucket": output_bucket,
            }
        )
        return SynthesisTask(task_id="task-1", output_uri=self._output_uri)


def transcript_document(text):
    return json.dumps(
        {
            "jobName": "teste-1",
            "status": "COMPLETED",
            "results": {"transcripts": [{"transcript": text}], "items": []},
        }
    ).encode("utf-8")


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def poller(sleep):
    return JobPoller(max_attempts=60, interval_seconds=1.5, sleep=sleep)


@pytest.fixture
def transcribe_config():
    return TranscribeConfig(output_bucket="out")


@pytest.fixture
def polly_config():
    return PollyConfig(output_bucket="out")


@pytest.fixture
def frozen_clock():
    return lambda: 1_700_000_000.123
