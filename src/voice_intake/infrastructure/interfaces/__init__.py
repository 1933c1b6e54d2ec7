"""Infrastructure interface exports."""

from voice_intake.infrastructure.interfaces.llm_service import LLMService
from voice_intake.infrastructure.interfaces.speech_synthesis_service import (
    SpeechSynthesisService,
)
from voice_intake.infrastructure.interfaces.storage_client import StorageClient
from voice_intake.infrastructure.interfaces.transcription_service import (
    TranscriptionService,
)

__all__ = [
    "LLMService",
    "SpeechSynthesisService",
    "StorageClient",
    "TranscriptionService",
]
