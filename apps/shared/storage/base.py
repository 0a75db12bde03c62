# apps/shared/storage/base.py
from abc import ABC
from abc import abstractmethod
from typing import BinaryIO


class AbstractStorageService(ABC):
    """
    Interface for object storage providers.

    Objects are addressed by bucket name and key (path inside the bucket).
    """

    @abstractmethod
    def upload_file(self, bucket: str, key: str, fileobj: BinaryIO, content_type: str | None = None) -> str:
        """
        Upload (or overwrite) an object.

        Args:
            bucket: Bucket name
            key: Path inside the bucket
            fileobj: Readable binary file object
            content_type: MIME type stored with the object

        Returns:
            str: The key of the stored object
        """

    @abstractmethod
    def delete_file(self, bucket: str, key: str) -> bool:
        """
        Delete one object.

        Returns:
            bool: True if the object was deleted (or did not exist)
        """

    @abstractmethod
    def bulk_delete_files(self, bucket: str, keys: list[str]) -> tuple[list[str], list[str]]:
        """
        Delete several objects.

        Returns:
            Tuple[List[str], List[str]]: (deleted keys, failed keys)
        """

    @abstractmethod
    def get_public_url(self, bucket: str, key: str) -> str:
        """Public URL of an object in a public bucket."""

    @abstractmethod
    def generate_signed_url(self, bucket: str, key: str, expires_in: int = 3600) -> str:
        """
        Time-limited download URL.

        Args:
            bucket: Bucket name
            key: Path inside the bucket
            expires_in: Lifetime of the URL in seconds
        """

    @abstractmethod
    def file_exists(self, bucket: str, key: str) -> bool:
        """Check whether an object exists."""

    @abstractmethod
    def bucket_exists(self, bucket: str) -> bool:
        """Check whether a bucket exists."""

    @abstractmethod
    def create_bucket(self, bucket: str, public: bool = True) -> bool:
        """
        Create a bucket.

        Args:
            bucket: Bucket name
            public: Allow anonymous reads of its objects
        """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Storage provider name."""
