import logging
from typing import Any

from django.db import transaction

from apps.content.dal import ContentDAL
from apps.content.exceptions import ContentReorderError
from apps.content.resources import ContentResource
from apps.shared.services.image_service import BucketImageService

logger = logging.getLogger(__name__)


class ContentService:
    """
    CRUD for one content resource, including the images it stores.

    Uploaded files arrive in ``validated_data`` under their upload field
    name and are replaced by the storage key of the stored object.
    """

    def __init__(self, resource: ContentResource, dal=None, image_service=None, storage=None):
        self.resource = resource
        self.dal = dal or ContentDAL(resource.model)
        if image_service is None and resource.bucket_alias:
            image_service = BucketImageService(resource.bucket_alias, storage=storage)
        self.image_service = image_service

    def list_items(self) -> list:
        return list(self.dal.get_items_queryset())

    def get_item(self, item_id: int):
        return self.dal.get_item_by_id(item_id)

    def create_item(self, validated_data: dict[str, Any]):
        data, uploads = self._split_uploads(validated_data)

        stored_keys = []
        for image_field, uploaded_file in uploads.items():
            key = self.image_service.upload(uploaded_file)
            stored_keys.append(key)
            data[image_field] = key

        try:
            item = self.dal.create_item(data)
        except Exception:
            for key in stored_keys:
                self.image_service.delete(key)
            raise

        logger.info(f'{self.resource.label} {item.id} created')
        return item

    @transaction.atomic
    def update_item(self, item_id: int, validated_data: dict[str, Any]):
        item = self.dal.get_item_by_id(item_id)
        data, uploads = self._split_uploads(validated_data)

        for image_field, uploaded_file in uploads.items():
            data[image_field] = self.image_service.replace(getattr(item, image_field), uploaded_file)

        return self.dal.update_item(item, data)

    def delete_item(self, item_id: int) -> bool:
        """Delete the row, then its stored images (failures are logged only)."""
        item = self.dal.get_item_by_id(item_id)
        images = [getattr(item, image_field) for image_field in self.resource.image_fields]

        result = self.dal.delete_item(item)

        if self.image_service is not None:
            for value in images:
                self.image_service.delete(value)
        logger.info(f'{self.resource.label} {item_id} deleted')
        return result

    def reorder(self, ids: list[int]) -> int:
        """Persist the display order given as a list of ids (``order`` = index)."""
        if not self.resource.reorderable:
            raise ContentReorderError(f'{self.resource.name} has no manual order')

        missing = set(ids) - self.dal.get_existing_ids(ids)
        if missing:
            raise ContentReorderError(f'unknown ids {sorted(missing)}')

        return self.dal.reorder_items(ids)

    def display_url(self, value: str) -> str:
        if self.image_service is None:
            return value or ''
        return self.image_service.url(value)

    def _split_uploads(self, validated_data: dict[str, Any]) -> tuple[dict, dict]:
        data = validated_data.copy()
        uploads = {}
        for image_field, upload_field in self.resource.image_fields.items():
            uploaded_file = data.pop(upload_field, None)
            if uploaded_file is not None:
                uploads[image_field] = uploaded_file
        return data, uploads
