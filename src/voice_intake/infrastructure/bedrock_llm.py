"""Amazon Bedrock implementation of the LLMService interface."""

import json
from typing import Any

from voice_intake.config import SamplingParameters
from voice_intake.exceptions import LLMServiceError
from voice_intake.infrastructure.interfaces import LLMService
from voice_intake.logging import setup_logging

logger = setup_logging()


class BedrockLLMService(LLMService):
    """Invokes an Anthropic text-completion model through ``bedrock-runtime``."""

    def __init__(
        self,
        client: Any,
        model_id: str,
        system_prompt: str,
        sampling: SamplingParameters,
    ):
        self._client = client
        self._model_id = model_id
        self._system_prompt = system_prompt
        self._sampling = sampling

    def complete(self, user_input: str) -> str:
        prompt = f"{self._system_prompt}\n\nHuman: {user_input}\n\nAssistant:"
        body = json.dumps(
            {
                "prompt": prompt,
                "max_tokens_to_sample": self._sampling.max_tokens,
                "temperature": self._sampling.temperature,
                "top_p": self._sampling.top_p,
            }
        )
        try:
            response = self._client.invoke_model(
                body=body,
                modelId=self._model_id,
                accept="application/json",
                contentType="application/json",
            )
            payload = json.loads(response["body"].read())
        except Exception as e:
            logger.exception("Bedrock call failed", extra={"model_id": self._model_id})
            raise LLMServiceError(f"Bedrock invocation failed: {e}", cause=e) from e

        completion = payload.get("completion")
        if not completion:
            raise LLMServiceError("Bedrock returned empty completion")
        logger.info("Model response received", extra={"model_id": self._model_id})
        return completion
