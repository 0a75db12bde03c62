import logging

from apps.shared.storage.factory import get_bucket_name
from apps.shared.storage.factory import get_storage_service
from apps.shared.storage.images import build_upload_key
from apps.shared.storage.images import extract_storage_path
from apps.shared.storage.images import is_absolute_url
from apps.shared.storage.images import resolve_image_url

logger = logging.getLogger(__name__)


class BucketImageService:
    """Upload, resolve and clean up images that live in one storage bucket."""

    def __init__(self, bucket_alias: str, storage=None):
        self.bucket_alias = bucket_alias
        self.bucket = get_bucket_name(bucket_alias)
        self.storage = storage or get_storage_service()

    def upload(self, uploaded_file, folder: str | None = None) -> str:
        """Store ``uploaded_file`` under a fresh key and return that key."""
        key = build_upload_key(uploaded_file.name, folder=folder)
        return self.storage.upload_file(
            self.bucket,
            key,
            uploaded_file,
            content_type=getattr(uploaded_file, 'content_type', None),
        )

    def url(self, value: str) -> str:
        return resolve_image_url(value, self.bucket, self.storage)

    def storage_key(self, value: str) -> str | None:
        """
        Key inside this bucket referenced by ``value``, or None when the value
        points elsewhere (static asset, foreign URL, empty).
        """
        if not value or value.startswith(('/images/', 'images/')):
            return None
        if is_absolute_url(value):
            if f'/{self.bucket}/' not in value:
                return None
            return extract_storage_path(value, self.bucket)
        return value

    def delete(self, value: str) -> bool:
        """Best-effort removal of the stored object behind ``value``."""
        key = self.storage_key(value)
        if key is None:
            return True
        deleted = self.storage.delete_file(self.bucket, key)
        if not deleted:
            logger.warning(f'Non-critical: failed to delete {self.bucket}/{key}')
        return deleted

    def replace(self, old_value: str, uploaded_file, folder: str | None = None) -> str:
        """Upload the new image, then drop the previous one."""
        new_key = self.upload(uploaded_file, folder=folder)
        if old_value and old_value != new_key:
            self.delete(old_value)
        return new_key
