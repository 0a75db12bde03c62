from typing import Any

from django.db.models import QuerySet

from apps.events.exceptions import EventNotFoundError
from apps.events.exceptions import EventPhotoNotFoundError
from apps.events.models import Event
from apps.events.models import EventPhoto
from apps.shared.decorators.database import handle_db_errors


class EventDAL:
    """Data Access Layer for Event model operations only"""

    @handle_db_errors(operation_type='create', model_name='Event')
    def create_event(self, event_data: dict[str, Any]) -> Event:
        return Event.objects.create(**event_data)

    @handle_db_errors(operation_type='read', model_name='Event')
    def get_event_by_id(self, event_id: int) -> Event:
        try:
            return Event.objects.get(id=event_id)
        except Event.DoesNotExist:
            raise EventNotFoundError(event_identifier=event_id)

    def get_events_queryset(self, search: str = '') -> QuerySet[Event]:
        """Events ordered by date, newest first"""
        return Event.objects.search(search).newest_first()

    @handle_db_errors(operation_type='update', model_name='Event')
    def update_event(self, event: Event, validated_data: dict[str, Any]) -> Event:
        for field, value in validated_data.items():
            setattr(event, field, value)
        event.save()
        return event

    @handle_db_errors(operation_type='delete', model_name='Event')
    def delete_event(self, event: Event) -> bool:
        event.delete()
        return True


class EventPhotoDAL:
    """Data Access Layer for EventPhoto model operations only"""

    @handle_db_errors(operation_type='create', model_name='EventPhoto')
    def create_photo(self, photo_data: dict[str, Any]) -> EventPhoto:
        return EventPhoto.objects.create(**photo_data)

    @handle_db_errors(operation_type='read', model_name='EventPhoto')
    def get_photo_by_id(self, photo_id: int) -> EventPhoto:
        try:
            return EventPhoto.objects.select_related('event').get(id=photo_id)
        except EventPhoto.DoesNotExist:
            raise EventPhotoNotFoundError(photo_identifier=photo_id)

    def get_photos_queryset(self, event_id: int | None = None) -> QuerySet[EventPhoto]:
        queryset = EventPhoto.objects.all()
        if event_id is not None:
            queryset = queryset.filter(event_id=event_id)
        return queryset.order_by('order', 'id')

    def get_event_photo_keys(self, event: Event) -> list[str]:
        return list(event.photos.values_list('src', flat=True))

    @handle_db_errors(operation_type='update', model_name='EventPhoto')
    def update_photo(self, photo: EventPhoto, validated_data: dict[str, Any]) -> EventPhoto:
        for field, value in validated_data.items():
            setattr(photo, field, value)
        photo.save()
        return photo

    @handle_db_errors(operation_type='delete', model_name='EventPhoto')
    def delete_photo(self, photo: EventPhoto) -> bool:
        photo.delete()
        return True
