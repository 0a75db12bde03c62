from django.urls import path

from apps.events.views import EventCreateAPIView
from apps.events.views import EventDeleteAPIView
from apps.events.views import EventDetailAPIView
from apps.events.views import EventListAPIView
from apps.events.views import EventPhotoCreateAPIView
from apps.events.views import EventPhotoDeleteAPIView
from apps.events.views import EventPhotoDetailAPIView
from apps.events.views import EventPhotoListAPIView
from apps.events.views import EventPhotoUpdateAPIView
from apps.events.views import EventUpdateAPIView

app_name = 'events'


urlpatterns = [
    # Event CRUD operations
    path('', EventListAPIView.as_view(), name='event-list'),  # GET /events/
    path('create/', EventCreateAPIView.as_view(), name='event-create'),  # POST /events/create/
    path('<int:event_id>/', EventDetailAPIView.as_view(), name='event-detail'),  # GET /events/{id}/
    path('<int:event_id>/update/', EventUpdateAPIView.as_view(), name='event-update'),  # PUT /events/{id}/update/
    path('<int:event_id>/delete/', EventDeleteAPIView.as_view(), name='event-delete'),  # DELETE /events/{id}/delete/
    # Event photos
    path('photos/', EventPhotoListAPIView.as_view(), name='photo-list'),  # GET /events/photos/?event_id=
    path('photos/create/', EventPhotoCreateAPIView.as_view(), name='photo-create'),  # POST
    path('photos/<int:photo_id>/', EventPhotoDetailAPIView.as_view(), name='photo-detail'),  # GET
    path('photos/<int:photo_id>/update/', EventPhotoUpdateAPIView.as_view(), name='photo-update'),  # PUT
    path('photos/<int:photo_id>/delete/', EventPhotoDeleteAPIView.as_view(), name='photo-delete'),  # DELETE
]
