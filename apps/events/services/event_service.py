import logging
from typing import Any

from django.db import transaction

from apps.events.dal.event_dal import EventDAL
from apps.events.dal.event_dal import EventPhotoDAL
from apps.events.models import Event
from apps.events.models import EventPhoto
from apps.shared.services.image_service import BucketImageService
from apps.shared.tasks import delete_storage_objects_task
from apps.shared.utils.paginator import ServicePaginator

logger = logging.getLogger(__name__)

EVENT_PHOTOS_BUCKET = 'event_photos'


class EventService:
    """Service for event business logic operations"""

    def __init__(self, dal=None, photo_dal=None, image_service=None, paginator=None):
        self.dal = dal or EventDAL()
        self.photo_dal = photo_dal or EventPhotoDAL()
        self.image_service = image_service or BucketImageService(EVENT_PHOTOS_BUCKET)
        self.paginator = paginator or ServicePaginator()

    def create_event(self, validated_data: dict[str, Any]) -> Event:
        event = self.dal.create_event(validated_data)
        logger.info(f'Event {event.id} created for {event.date}')
        return event

    def get_event_detail(self, event_id: int) -> Event:
        return self.dal.get_event_by_id(event_id)

    def get_events_list(self, filters: dict[str, Any]) -> dict[str, Any]:
        queryset = self.dal.get_events_queryset(filters.get('search', '').strip())
        return self.paginator.paginate(queryset, filters.get('page', 1), filters.get('page_size'))

    @transaction.atomic
    def update_event(self, event_id: int, validated_data: dict[str, Any]) -> Event:
        event = self.dal.get_event_by_id(event_id)
        return self.dal.update_event(event, validated_data)

    @transaction.atomic
    def delete_event(self, event_id: int) -> bool:
        """Delete the event with its photos; stored images are removed in the background."""
        event = self.dal.get_event_by_id(event_id)
        keys = [
            key
            for key in (self.image_service.storage_key(src) for src in self.photo_dal.get_event_photo_keys(event))
            if key
        ]

        result = self.dal.delete_event(event)

        if keys:
            bucket = self.image_service.bucket
            transaction.on_commit(lambda: delete_storage_objects_task.delay(bucket, keys))
        logger.info(f'Event {event_id} deleted, {len(keys)} photos queued for removal')
        return result


class EventPhotoService:
    """Service for event photos: upload, ordering, replacement and cleanup"""

    def __init__(self, dal=None, event_dal=None, image_service=None):
        self.dal = dal or EventPhotoDAL()
        self.event_dal = event_dal or EventDAL()
        self.image_service = image_service or BucketImageService(EVENT_PHOTOS_BUCKET)

    def get_photos_list(self, event_id: int | None = None) -> list[EventPhoto]:
        return list(self.dal.get_photos_queryset(event_id))

    def get_photo_detail(self, photo_id: int) -> EventPhoto:
        return self.dal.get_photo_by_id(photo_id)

    def create_photo(self, validated_data: dict[str, Any]) -> EventPhoto:
        """Store the uploaded image under ``<event_id>/`` and create the photo row."""
        data = validated_data.copy()
        image = data.pop('image')
        event = self.event_dal.get_event_by_id(data.pop('event_id'))

        key = self.image_service.upload(image, folder=str(event.id))
        try:
            return self.dal.create_photo({**data, 'event': event, 'src': key})
        except Exception:
            self.image_service.delete(key)
            raise

    @transaction.atomic
    def update_photo(self, photo_id: int, validated_data: dict[str, Any]) -> EventPhoto:
        photo = self.dal.get_photo_by_id(photo_id)
        data = validated_data.copy()

        image = data.pop('image', None)
        if image is not None:
            data['src'] = self.image_service.replace(photo.src, image, folder=str(photo.event_id))

        event_id = data.pop('event_id', None)
        if event_id is not None and event_id != photo.event_id:
            data['event'] = self.event_dal.get_event_by_id(event_id)

        return self.dal.update_photo(photo, data)

    def delete_photo(self, photo_id: int) -> bool:
        photo = self.dal.get_photo_by_id(photo_id)
        self.image_service.delete(photo.src)
        return self.dal.delete_photo(photo)

    def get_src_url(self, photo: EventPhoto) -> str:
        return self.image_service.url(photo.src)
