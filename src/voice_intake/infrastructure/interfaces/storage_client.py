"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def download(self, bucket_name: str, object_name: str) -> bytes:
        """
        Downloads a file from storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The object path/name in storage.

        Returns:
            The file contents as bytes.

        Raises:
            StorageDownloadError: If the download fails.
        """

    def download_text(self, bucket_name: str, object_name: str) -> str:
        """Downloads a file and decodes it as UTF-8."""
        return self.download(bucket_name, object_name).decode("utf-8")
