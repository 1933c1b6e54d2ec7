"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_OUTPUT_BUCKET = "rhevolut-poc-kxc-output"


class AWSConfig(BaseModel, frozen=True):
    """Shared AWS client configuration."""

    region: str = "us-east-1"


class TranscribeConfig(BaseModel, frozen=True):
    """Transcription job configuration."""

    language_code: str = "pt-BR"
    media_format: str = "ogg"
    output_bucket: str = DEFAULT_OUTPUT_BUCKET
    job_name_prefix: str = "teste"


class PollingConfig(BaseModel, frozen=True):
    """Job polling budget."""

    max_attempts: int = Field(default=60, ge=1)
    interval_seconds: float = Field(default=1.5, ge=0)


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object store configuration."""

    endpoint: str = "s3.amazonaws.com"
    secure: bool = True


class SamplingParameters(BaseModel, frozen=True):
    """Sampling parameters sent with every model invocation."""

    max_tokens: int = 4000
    temperature: float = 0.8
    top_p: float = 0.8


class BedrockConfig(BaseModel, frozen=True):
    """Bedrock model configuration."""

    model_id: str = "anthropic.claude-v2"


class GeminiConfig(BaseModel, frozen=True):
    """Gemini model configuration."""

    api_key: str = ""
    model_name: str = "gemini-2.5-flash-lite"


class LLMConfig(BaseModel, frozen=True):
    """Generative model selection and shared settings."""

    provider: Literal["bedrock", "gemini"] = "bedrock"
    sampling: SamplingParameters = SamplingParameters()
    system_prompt_path: Path = Path("prompts/system.txt")
    bedrock: BedrockConfig = BedrockConfig()
    gemini: GeminiConfig = GeminiConfig()


class PollyConfig(BaseModel, frozen=True):
    """Speech synthesis configuration."""

    voice_id: str = "Camila"
    language_code: str = "pt-BR"
    output_format: str = "mp3"
    sample_rate: str = "22050"
    output_bucket: str = DEFAULT_OUTPUT_BUCKET


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AWSConfig
    transcribe: TranscribeConfig
    polling: PollingConfig
    storage: StorageConfig
    llm: LLMConfig
    polly: PollyConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    output_bucket = os.getenv("OUTPUT_BUCKET", DEFAULT_OUTPUT_BUCKET)
    return AppConfig(
        aws=AWSConfig(
            region=os.getenv("AWS_REGION", "us-east-1"),
        ),
        transcribe=TranscribeConfig(
            output_bucket=output_bucket,
            job_name_prefix=os.getenv("TRANSCRIBE_JOB_PREFIX", "teste"),
        ),
        polling=PollingConfig(
            max_attempts=int(os.getenv("POLL_MAX_ATTEMPTS", "60")),
            interval_seconds=float(os.getenv("POLL_INTERVAL_SECONDS", "1.5")),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
        ),
        llm=LLMConfig(
            provider=os.getenv("LLM_PROVIDER", "bedrock"),
            bedrock=BedrockConfig(
                model_id=os.getenv("BEDROCK_MODEL_ID", "anthropic.claude-v2"),
            ),
            gemini=GeminiConfig(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
            ),
        ),
        polly=PollyConfig(
            output_bucket=output_bucket,
        ),
    )
