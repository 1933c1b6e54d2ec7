"""Infrastructure layer exports."""

from voice_intake.infrastructure.aws_transcribe import AWSTranscribeService
from voice_intake.infrastructure.bedrock_llm import BedrockLLMService
from voice_intake.infrastructure.gemini_llm import GeminiLLMService
from voice_intake.infrastructure.minio_storage import MinioStorageClient
from voice_intake.infrastructure.polly_synthesizer import PollySpeechSynthesizer

__all__ = [
    "AWSTranscribeService",
    "BedrockLLMService",
    "GeminiLLMService",
    "MinioStorageClient",
    "PollySpeechSynthesizer",
]
