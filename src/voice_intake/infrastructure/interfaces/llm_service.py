"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for generative model backends."""

    @abstractmethod
    def complete(self, user_input: str) -> str:
        """
        Sends the user's text to the model under the configured system prompt.

        Args:
            user_input: The transcribed vacancy description.

        Returns:
            The raw completion text.

        Raises:
            LLMServiceError: If the model call fails.
        """
