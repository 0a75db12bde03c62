from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_workshop_service
from apps.shared.container import get_workshop_status_service
from apps.workshops.serializers import WorkshopSerializer
from apps.workshops.serializers import WorkshopStatusQuerySerializer
from apps.workshops.serializers import WorkshopWithStatusSerializer
from apps.workshops.serializers import WorkshopWriteSerializer


class BaseWorkshopAPIView(BaseAPIView):
    """Base view for workshop operations"""

    _workshop_service = None

    def get_service(self):
        if self._workshop_service is None:
            self._workshop_service = get_workshop_service()
        return self._workshop_service


@extend_schema(tags=['Workshops'])
class WorkshopListAPIView(BaseWorkshopAPIView):
    def get(self, request):
        workshops = self.get_service().list_workshops()
        return Response(WorkshopSerializer(workshops, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Workshops'])
class WorkshopCreateAPIView(BaseWorkshopAPIView):
    serializer_class = WorkshopWriteSerializer

    def post(self, request):
        serializer = WorkshopWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        workshop = self.get_service().create_workshop(serializer.validated_data)
        return Response(WorkshopSerializer(workshop).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Workshops'])
class WorkshopDetailAPIView(BaseWorkshopAPIView):
    def get(self, request, workshop_id):
        workshop = self.get_service().get_workshop(workshop_id)
        return Response(WorkshopSerializer(workshop).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Workshops'])
class WorkshopUpdateAPIView(BaseWorkshopAPIView):
    serializer_class = WorkshopWriteSerializer

    def put(self, request, workshop_id):
        serializer = WorkshopWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        workshop = self.get_service().update_workshop(workshop_id, serializer.validated_data)
        return Response(WorkshopSerializer(workshop).data, status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Workshops'])
class WorkshopDeleteAPIView(BaseWorkshopAPIView):
    """Delete a workshop and every record attached to its date"""

    def delete(self, request, workshop_id):
        summary = self.get_service().delete_workshop(workshop_id)
        return Response({'deleted': summary}, status=status.HTTP_200_OK)


@extend_schema(tags=['Workshops'])
class WorkshopPasswordGenerateAPIView(BaseWorkshopAPIView):
    def get(self, request):
        return Response({'password': self.get_service().generate_password()}, status=status.HTTP_200_OK)


class BaseWorkshopStatusAPIView(BaseAPIView):
    _status_service = None

    def get_service(self):
        if self._status_service is None:
            self._status_service = get_workshop_status_service()
        return self._status_service


@extend_schema(tags=['Workshops'], parameters=[WorkshopStatusQuerySerializer])
class WorkshopStatusListAPIView(BaseWorkshopStatusAPIView):
    """
    Every workshop with its client contract and completion status.

    The optional ``generation`` query parameter is echoed back so a client
    firing several refreshes can drop responses to superseded requests.
    """

    def get(self, request):
        query_serializer = WorkshopStatusQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        items = self.get_service().list_workshops_with_status()
        response_data = {
            'generation': query_serializer.validated_data.get('generation'),
            'workshops': WorkshopWithStatusSerializer(items, many=True).data,
        }
        return Response(response_data, status=status.HTTP_200_OK)


@extend_schema(tags=['Workshops'])
class WorkshopStatusDetailAPIView(BaseWorkshopStatusAPIView):
    def get(self, request, workshop_id):
        item = self.get_service().get_workshop_status(workshop_id)
        return Response(WorkshopWithStatusSerializer(item).data, status=status.HTTP_200_OK)
