"""Dependency injection configuration for the voice intake function."""

from pathlib import Path

import boto3
from google import genai
from minio import Minio
from minio.credentials import ChainedProvider, EnvAWSProvider, IamAwsProvider

from voice_intake.config import load_config
from voice_intake.domain import JobPoller, ResponseExtractor
from voice_intake.domain.response_generator import ResponseGenerator
from voice_intake.domain.speech_synthesis import SpeechSynthesisSubmitter
from voice_intake.domain.transcription import TranscriptionOrchestrator
from voice_intake.handlers import VoiceRequestHandler
from voice_intake.infrastructure import (
    AWSTranscribeService,
    BedrockLLMService,
    GeminiLLMService,
    MinioStorageClient,
    PollySpeechSynthesizer,
)
from voice_intake.infrastructure.interfaces import LLMService
from voice_intake.logging import setup_logging

logger = setup_logging()

_config = load_config()
_region = _config.aws.region

# Object storage (S3 through the MinIO SDK)
_minio_client = Minio(
    endpoint=_config.storage.endpoint,
    region=_region,
    secure=_config.storage.secure,
    credentials=ChainedProvider([EnvAWSProvider(), IamAwsProvider()]),
)
_storage = MinioStorageClient(_minio_client)

# Transcription
_transcribe_client = boto3.client("transcribe", region_name=_region)
_transcription_service = AWSTranscribeService(_transcribe_client)

# Speech synthesis
_polly_client = boto3.client("polly", region_name=_region)
_synthesis_service = PollySpeechSynthesizer(_polly_client)

# Generative model
_system_prompt_path = Path(__file__).parent / _config.llm.system_prompt_path
_system_prompt = _system_prompt_path.read_text(encoding="utf-8")


def _build_llm() -> LLMService:
    if _config.llm.provider == "gemini":
        client = genai.Client(api_key=_config.llm.gemini.api_key)
        return GeminiLLMService(
            client,
            _config.llm.gemini.model_name,
            _system_prompt,
            _config.llm.sampling,
        )

    bedrock_client = boto3.client("bedrock-runtime", region_name=_region)
    return BedrockLLMService(
        bedrock_client,
        _config.llm.bedrock.model_id,
        _system_prompt,
        _config.llm.sampling,
    )


_llm = _build_llm()
logger.info(
    "Clients initialized",
    extra={"region": _region, "llm_provider": _config.llm.provider},
)

# Service composition
_poller = JobPoller(
    max_attempts=_config.polling.max_attempts,
    interval_seconds=_config.polling.interval_seconds,
)
_handler = VoiceRequestHandler(
    TranscriptionOrchestrator(
        _transcription_service, _storage, _poller, _config.transcribe
    ),
    ResponseGenerator(_llm),
    ResponseExtractor(),
    SpeechSynthesisSubmitter(_synthesis_service, _config.polly),
)


def get_handler() -> VoiceRequestHandler:
    """Returns the configured voice request handler."""
    return _handler
