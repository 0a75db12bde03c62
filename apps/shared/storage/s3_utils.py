import json
import logging

import boto3
from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError
from django.conf import settings

from apps.shared.exceptions.exception import StorageBucketNotFoundError
from apps.shared.exceptions.exception import StorageServiceError
from apps.shared.exceptions.exception import StorageUploadError

logger = logging.getLogger(__name__)

# S3 DeleteObjects accepts at most 1000 keys per call
MAX_DELETE_BATCH = 1000


class S3Service:
    """Thin wrapper around a boto3 S3 client, works with any S3-compatible endpoint."""

    def __init__(self, client=None):
        self.s3_client = client or boto3.client(
            's3',
            endpoint_url=settings.S3_ENDPOINT_URL or None,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
            region_name=settings.AWS_S3_REGION_NAME,
        )

    def upload_fileobj(self, fileobj, bucket_name, key, content_type=None):
        extra_args = {'ContentType': content_type} if content_type else None
        try:
            self.s3_client.upload_fileobj(fileobj, bucket_name, key, ExtraArgs=extra_args)
        except (ClientError, BotoCoreError) as e:
            msg = f'Error uploading {key} to {bucket_name}: {e}'
            logger.exception(msg)
            raise StorageUploadError(msg)
        return key

    def delete_object(self, bucket_name, key):
        try:
            self.s3_client.delete_object(Bucket=bucket_name, Key=key)
            return True
        except ClientError as e:
            if _error_code(e) == 'NoSuchBucket':
                raise StorageBucketNotFoundError(f'Bucket not found: {bucket_name}')
            msg = f'Error deleting {key} from {bucket_name}: {e}'
            raise StorageServiceError(msg)

    def delete_objects(self, bucket_name, keys):
        deleted, failed = [], []
        for start in range(0, len(keys), MAX_DELETE_BATCH):
            batch = keys[start : start + MAX_DELETE_BATCH]
            try:
                response = self.s3_client.delete_objects(
                    Bucket=bucket_name,
                    Delete={'Objects': [{'Key': key} for key in batch], 'Quiet': False},
                )
            except ClientError as e:
                logger.warning(f'Bulk delete failed in {bucket_name}: {e}')
                failed.extend(batch)
                continue
            deleted.extend(obj['Key'] for obj in response.get('Deleted', []))
            failed.extend(err['Key'] for err in response.get('Errors', []))
        return deleted, failed

    def object_exists(self, bucket_name, key):
        try:
            self.s3_client.head_object(Bucket=bucket_name, Key=key)
            return True
        except ClientError as e:
            if _error_code(e) in ('404', 'NoSuchKey', 'NotFound'):
                return False
            msg = f'Error checking object existence: {e}'
            raise StorageServiceError(msg)

    def generate_presigned_url(self, bucket_name, key, expiration=3600):
        if expiration > 86400:
            logger.warning(f'Signed URL expiration reduced from {expiration} to 86400 seconds')
            expiration = 86400
        try:
            return self.s3_client.generate_presigned_url(
                'get_object',
                Params={'Bucket': bucket_name, 'Key': key},
                ExpiresIn=expiration,
            )
        except ClientError as e:
            msg = f'Error generating presigned URL: {e}'
            raise StorageServiceError(msg)

    def bucket_exists(self, bucket_name):
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            if _error_code(e) in ('404', 'NoSuchBucket', 'NotFound'):
                return False
            msg = f'Error checking bucket {bucket_name}: {e}'
            raise StorageServiceError(msg)

    def create_bucket(self, bucket_name, public=True):
        params = {'Bucket': bucket_name}
        if settings.AWS_S3_REGION_NAME and settings.AWS_S3_REGION_NAME != 'us-east-1':
            params['CreateBucketConfiguration'] = {'LocationConstraint': settings.AWS_S3_REGION_NAME}
        try:
            self.s3_client.create_bucket(**params)
            if public:
                self.s3_client.put_bucket_policy(Bucket=bucket_name, Policy=_public_read_policy(bucket_name))
        except ClientError as e:
            logger.warning(f'Could not create bucket {bucket_name}: {e}')
            return False
        return True


def _error_code(error: ClientError) -> str:
    return str(error.response.get('Error', {}).get('Code', ''))


def _public_read_policy(bucket_name: str) -> str:
    return json.dumps(
        {
            'Version': '2012-10-17',
            'Statement': [
                {
                    'Sid': 'PublicRead',
                    'Effect': 'Allow',
                    'Principal': '*',
                    'Action': ['s3:GetObject'],
                    'Resource': [f'arn:aws:s3:::{bucket_name}/*'],
                }
            ],
        }
    )
