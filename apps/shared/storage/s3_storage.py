# apps/shared/storage/s3_storage.py
import logging
from urllib.parse import quote

from django.conf import settings

from apps.shared.storage.base import AbstractStorageService
from apps.shared.storage.s3_utils import S3Service
from apps.shared.utils.validators import StorageKeyValidator

logger = logging.getLogger(__name__)


class S3StorageService(AbstractStorageService):
    """
    S3 storage adapter implementing AbstractStorageService on top of S3Service.
    """

    def __init__(self, s3_service: S3Service | None = None):
        self.s3_service = s3_service or S3Service()

    @property
    def provider_name(self) -> str:
        return 's3'

    def upload_file(self, bucket: str, key: str, fileobj, content_type: str | None = None) -> str:
        StorageKeyValidator.validate_key(key)
        stored_key = self.s3_service.upload_fileobj(fileobj, bucket, key, content_type=content_type)
        logger.info(f'Uploaded {bucket}/{key}')
        return stored_key

    def delete_file(self, bucket: str, key: str) -> bool:
        try:
            return self.s3_service.delete_object(bucket, key)
        except Exception as e:
            logger.exception(f'Error deleting {bucket}/{key}: {e}')
            return False

    def bulk_delete_files(self, bucket: str, keys: list[str]) -> tuple[list[str], list[str]]:
        if not keys:
            return [], []
        return self.s3_service.delete_objects(bucket, list(keys))

    def get_public_url(self, bucket: str, key: str) -> str:
        quoted_key = quote(key)
        if settings.STORAGE_PUBLIC_BASE_URL:
            return f'{settings.STORAGE_PUBLIC_BASE_URL.rstrip("/")}/{bucket}/{quoted_key}'
        if settings.S3_ENDPOINT_URL:
            return f'{settings.S3_ENDPOINT_URL.rstrip("/")}/{bucket}/{quoted_key}'
        return f'https://{bucket}.s3.{settings.AWS_S3_REGION_NAME}.amazonaws.com/{quoted_key}'

    def generate_signed_url(self, bucket: str, key: str, expires_in: int = 3600) -> str:
        return self.s3_service.generate_presigned_url(bucket, key, expiration=expires_in)

    def file_exists(self, bucket: str, key: str) -> bool:
        return self.s3_service.object_exists(bucket, key)

    def bucket_exists(self, bucket: str) -> bool:
        return self.s3_service.bucket_exists(bucket)

    def create_bucket(self, bucket: str, public: bool = True) -> bool:
        return self.s3_service.create_bucket(bucket, public=public)
