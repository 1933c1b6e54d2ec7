"""Domain layer exports."""

from voice_intake.domain.job_poller import JobPoller
from voice_intake.domain.models import (
    JobHandle,
    JobKind,
    JobState,
    JobStatus,
    PollOutcome,
    PollResult,
    StageResult,
    SynthesisTask,
    TranscriptDocument,
    VoiceRequest,
    VoiceResponse,
)
from voice_intake.domain.response_extractor import ResponseExtractor

__all__ = [
    "JobHandle",
    "JobKind",
    "JobPoller",
    "JobState",
    "JobStatus",
    "PollOutcome",
    "PollResult",
    "ResponseExtractor",
    "StageResult",
    "SynthesisTask",
    "TranscriptDocument",
    "VoiceRequest",
    "VoiceResponse",
]
