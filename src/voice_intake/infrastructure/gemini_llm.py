"""Gemini LLM service implementation."""

from google import genai

from voice_intake.config import SamplingParameters
from voice_intake.exceptions import LLMServiceError
from voice_intake.infrastructure.interfaces import LLMService
from voice_intake.logging import setup_logging

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        sampling: SamplingParameters,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._sampling = sampling

    def complete(self, user_input: str) -> str:
        """
        Runs the vacancy extraction prompt on Gemini.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=user_input,
                config={
                    "system_instruction": self._system_prompt,
                    "max_output_tokens": self._sampling.max_tokens,
                    "temperature": self._sampling.temperature,
                    "top_p": self._sampling.top_p,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise LLMServiceError(f"Gemini completion failed: {e}", cause=e) from e

        if not response.text:
            raise LLMServiceError("Gemini returned empty response")
        logger.info("Model response received", extra={"model_name": self._model_name})
        return response.text
