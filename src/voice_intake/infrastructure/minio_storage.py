"""MinIO implementation of the StorageClient interface."""

from minio import Minio

from voice_intake.exceptions import StorageDownloadError
from voice_intake.infrastructure.interfaces import StorageClient
from voice_intake.logging import setup_logging

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Reads objects from an S3-compatible store using the MinIO SDK."""

    def __init__(self, client: Minio):
        self._client = client

    def download(self, bucket_name: str, object_name: str) -> bytes:
        try:
            response = self._client.get_object(bucket_name, object_name)
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            return data
        except Exception as e:
            logger.exception(
                "Download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e
