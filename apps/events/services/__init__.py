from apps.events.services.event_service import EventPhotoService
from apps.events.services.event_service import EventService

__all__ = ['EventPhotoService', 'EventService']
