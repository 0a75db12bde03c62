from apps.events.views.event_views import EventCreateAPIView
from apps.events.views.event_views import EventDeleteAPIView
from apps.events.views.event_views import EventDetailAPIView
from apps.events.views.event_views import EventListAPIView
from apps.events.views.event_views import EventUpdateAPIView
from apps.events.views.photo_views import EventPhotoCreateAPIView
from apps.events.views.photo_views import EventPhotoDeleteAPIView
from apps.events.views.photo_views import EventPhotoDetailAPIView
from apps.events.views.photo_views import EventPhotoListAPIView
from apps.events.views.photo_views import EventPhotoUpdateAPIView

__all__ = [
    'EventCreateAPIView',
    'EventDeleteAPIView',
    'EventDetailAPIView',
    'EventListAPIView',
    'EventPhotoCreateAPIView',
    'EventPhotoDeleteAPIView',
    'EventPhotoDetailAPIView',
    'EventPhotoListAPIView',
    'EventPhotoUpdateAPIView',
    'EventUpdateAPIView',
]
