"""Abstract interface for speech synthesis tasks."""

from abc import ABC, abstractmethod

from voice_intake.domain.models import SynthesisTask


class SpeechSynthesisService(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    def start_task(
        self,
        text: str,
        voice_id: str,
        language_code: str,
        output_format: str,
        sample_rate: str,
        output_bucket: str,
    ) -> SynthesisTask:
        """
        Submits a synthesis task without waiting for it to finish.

        Returns:
            The task with its prospective output URI.

        Raises:
            SpeechSynthesisError: If the task cannot be submitted.
        """
