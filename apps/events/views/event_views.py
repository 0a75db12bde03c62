import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.events.serializers import EventListQuerySerializer
from apps.events.serializers import EventSerializer
from apps.events.serializers import EventWriteSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_event_service

logger = logging.getLogger(__name__)


class BaseEventAPIView(BaseAPIView):
    """Base view for event operations"""

    _event_service = None

    def get_service(self):
        if self._event_service is None:
            self._event_service = get_event_service()
        return self._event_service


@extend_schema(tags=['Events'])
class EventListAPIView(BaseEventAPIView):
    """List events, newest first"""

    def get(self, request):
        query_serializer = EventListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        page = self.get_service().get_events_list(filters=query_serializer.validated_data)

        response_data = {
            'events': EventSerializer(page['items'], many=True).data,
            'pagination': page['meta'],
        }
        return Response(response_data, status=status.HTTP_200_OK)


@extend_schema(tags=['Events'])
class EventCreateAPIView(BaseEventAPIView):
    serializer_class = EventWriteSerializer

    def post(self, request):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = self.get_service().create_event(validated_data=serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Events'])
class EventDetailAPIView(BaseEventAPIView):
    def get(self, request, event_id):
        event = self.get_service().get_event_detail(event_id)
        return Response(EventSerializer(event).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Events'])
class EventUpdateAPIView(BaseEventAPIView):
    serializer_class = EventWriteSerializer

    def put(self, request, event_id):
        serializer = EventWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        event = self.get_service().update_event(event_id=event_id, validated_data=serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Events'])
class EventDeleteAPIView(BaseEventAPIView):
    def delete(self, request, event_id):
        self.get_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
