from rest_framework.exceptions import APIException


class StorageUploadError(APIException):
    """Exception raised when a file upload to object storage fails."""

    status_code = 503
    default_detail = 'Error uploading file to storage'
    default_code = 'storage_upload_error'


class StorageServiceError(APIException):
    """Generic object storage error for infrastructure failures."""

    status_code = 500
    default_detail = 'Storage service error occurred'
    default_code = 'storage_service_error'


class StorageBucketNotFoundError(APIException):
    """Exception raised when a storage bucket does not exist."""

    status_code = 404
    default_detail = 'Storage bucket not found.'
    default_code = 'storage_bucket_not_found'
