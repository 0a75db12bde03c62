import logging

from apps.shared.storage.factory import get_storage_service
from settings.celery import app

logger = logging.getLogger(__name__)


@app.task(bind=True)
def delete_storage_objects_task(self, bucket: str, keys: list[str]):
    """
    Delete objects from storage in the background.

    Args:
        bucket: Bucket name
        keys: Keys inside the bucket

    Returns:
        dict with deleted and failed keys
    """
    keys = [key for key in keys if key]
    if not keys:
        return {'status': 'success', 'deleted': [], 'failed': []}

    try:
        deleted, failed = get_storage_service().bulk_delete_files(bucket, keys)
    except Exception as e:
        logger.exception(f'Failed to delete {len(keys)} objects from {bucket}: {e}')
        raise self.retry(countdown=60, max_retries=3, exc=e)

    if failed:
        logger.warning(f'Could not delete {len(failed)} objects from {bucket}: {failed}')
    logger.info(f'Deleted {len(deleted)} objects from {bucket}')

    return {'status': 'success' if not failed else 'partial', 'deleted': deleted, 'failed': failed}
