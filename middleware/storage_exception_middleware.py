import logging

from django.http import JsonResponse
from rest_framework import status

from apps.shared.exceptions.exception import StorageBucketNotFoundError
from apps.shared.exceptions.exception import StorageServiceError
from apps.shared.exceptions.exception import StorageUploadError

logger = logging.getLogger(__name__)


class StorageExceptionMiddleware:
    """
    JSON responses for storage failures raised outside DRF views
    (admin uploads, plain Django views).
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, StorageUploadError | StorageBucketNotFoundError):
            logger.warning(f'Storage error on {request.method} {request.path}: {exception}')
            return JsonResponse(
                {'error': str(exception.detail)},
                status=getattr(exception, 'status_code', status.HTTP_503_SERVICE_UNAVAILABLE),
            )
        if isinstance(exception, StorageServiceError):
            logger.error(f'Storage service failure on {request.method} {request.path}: {exception}')
            return JsonResponse(
                {'error': str(exception.detail)},
                status=getattr(exception, 'status_code', status.HTTP_500_INTERNAL_SERVER_ERROR),
            )

        # Let Django/DRF handle other exceptions
        return None
