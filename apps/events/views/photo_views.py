from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.events.serializers import EventPhotoCreateSerializer
from apps.events.serializers import EventPhotoListQuerySerializer
from apps.events.serializers import EventPhotoSerializer
from apps.events.serializers import EventPhotoUpdateSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_event_photo_service


class BaseEventPhotoAPIView(BaseAPIView):
    """Base view for event photo operations"""

    _photo_service = None

    def get_service(self):
        if self._photo_service is None:
            self._photo_service = get_event_photo_service()
        return self._photo_service

    def serialize(self, photos, many=False):
        context = {'image_service': self.get_service().image_service}
        return EventPhotoSerializer(photos, many=many, context=context).data


@extend_schema(tags=['Event Photos'])
class EventPhotoListAPIView(BaseEventPhotoAPIView):
    def get(self, request):
        query_serializer = EventPhotoListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        photos = self.get_service().get_photos_list(query_serializer.validated_data.get('event_id'))
        return Response(self.serialize(photos, many=True), status=status.HTTP_200_OK)


@extend_schema(tags=['Event Photos'])
class EventPhotoCreateAPIView(BaseEventPhotoAPIView):
    serializer_class = EventPhotoCreateSerializer

    def post(self, request):
        serializer = EventPhotoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        photo = self.get_service().create_photo(serializer.validated_data)
        return Response(self.serialize(photo), status=status.HTTP_201_CREATED)


@extend_schema(tags=['Event Photos'])
class EventPhotoDetailAPIView(BaseEventPhotoAPIView):
    def get(self, request, photo_id):
        photo = self.get_service().get_photo_detail(photo_id)
        return Response(self.serialize(photo), status=status.HTTP_200_OK)


@extend_schema(tags=['Event Photos'])
class EventPhotoUpdateAPIView(BaseEventPhotoAPIView):
    serializer_class = EventPhotoUpdateSerializer

    def put(self, request, photo_id):
        serializer = EventPhotoUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        photo = self.get_service().update_photo(photo_id, serializer.validated_data)
        return Response(self.serialize(photo), status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Event Photos'])
class EventPhotoDeleteAPIView(BaseEventPhotoAPIView):
    def delete(self, request, photo_id):
        self.get_service().delete_photo(photo_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
