"""Domain models for the voice intake pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class JobKind(str, Enum):
    """Kind of asynchronous work submitted to an external service."""

    TRANSCRIPTION = "transcription"
    SYNTHESIS = "synthesis"


class JobState(str, Enum):
    """Known job states reported by the external services."""

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class JobHandle(BaseModel, frozen=True):
    """Identifies one submitted asynchronous job."""

    job_id: str
    kind: JobKind


class JobStatus(BaseModel, frozen=True):
    """
    Snapshot of a job's status.

    ``state`` is kept as a plain string so that states this code does not
    know about are carried through and treated as still running.
    """

    state: str
    result_location: str | None = None
    failure_reason: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state in (JobState.COMPLETED, JobState.FAILED)


class PollOutcome(str, Enum):
    """Final outcome of polling a job."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class PollResult(BaseModel, frozen=True):
    """Result of driving a job to a terminal state or giving up."""

    outcome: PollOutcome
    attempts: int
    result_location: str | None = None
    last_state: str | None = None
    failure_reason: str | None = None


class StageResult(BaseModel, frozen=True):
    """Success or failure-with-reason of one pipeline stage."""

    stage: str
    value: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, stage: str, value: str) -> "StageResult":
        return cls(stage=stage, value=value)

    @classmethod
    def failure(cls, stage: str, error: str) -> "StageResult":
        return cls(stage=stage, error=error)


class Transcript(BaseModel):
    """A single transcript alternative in the transcription output document."""

    transcript: str


class TranscriptResults(BaseModel):
    transcripts: list[Transcript]


class TranscriptDocument(BaseModel):
    """Output document written by the transcription service."""

    job_name: str | None = Field(default=None, alias="jobName")
    status: str | None = None
    results: TranscriptResults

    @property
    def text(self) -> str | None:
        """Returns the first transcript's text, if any."""
        if not self.results.transcripts:
            return None
        return self.results.transcripts[0].transcript


class SynthesisTask(BaseModel, frozen=True):
    """A submitted speech synthesis task and its eventual output location."""

    task_id: str
    output_uri: str


class VoiceRequest(BaseModel):
    """Inbound request referencing the recorded audio."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    s3_url: str = Field(alias="s3URL", min_length=1)


class VoiceResponse(BaseModel):
    """Outbound payload returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    responses: str | None = None
    audio_response: str | None = Field(default=None, alias="audioResponse")
    answers: dict[int, str] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)

    def to_payload(self) -> dict:
        """Serializes with the wire field names, dropping ``errors`` when empty."""
        exclude = None if self.errors else {"errors"}
        return self.model_dump(by_alias=True, exclude=exclude)
