"""Custom exceptions for the voice intake function."""


class TranscriptionJobError(Exception):
    """Raised when a transcription job cannot be started or queried."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        self.cause = cause
        super().__init__(f"Transcription job '{job_name}' failed")


class TranscriptParseError(Exception):
    """Raised when a transcription output document cannot be parsed."""

    def __init__(self, object_name: str, reason: str):
        self.object_name = object_name
        self.reason = reason
        super().__init__(f"Invalid transcript document '{object_name}': {reason}")


class StorageDownloadError(Exception):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class LLMServiceError(Exception):
    """Raised when the generative model call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class SpeechSynthesisError(Exception):
    """Raised when a speech synthesis task cannot be submitted."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to submit speech synthesis task")
