from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_guidelines_service
from apps.workshops.serializers import WorkshopGuidelinesSerializer
from apps.workshops.serializers import WorkshopGuidelinesWriteSerializer


class BaseGuidelinesAPIView(BaseAPIView):
    _guidelines_service = None

    def get_service(self):
        if self._guidelines_service is None:
            self._guidelines_service = get_guidelines_service()
        return self._guidelines_service


@extend_schema(tags=['Guidelines'])
class GuidelinesListAPIView(BaseGuidelinesAPIView):
    def get(self, request):
        guidelines = self.get_service().list_guidelines()
        return Response(WorkshopGuidelinesSerializer(guidelines, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Guidelines'])
class GuidelinesDetailAPIView(BaseGuidelinesAPIView):
    def get(self, request, workshop_date):
        guidelines = self.get_service().get_guidelines(workshop_date)
        return Response(WorkshopGuidelinesSerializer(guidelines).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Guidelines'])
class GuidelinesUpsertAPIView(BaseGuidelinesAPIView):
    """Create or replace the guidelines of a workshop"""

    serializer_class = WorkshopGuidelinesWriteSerializer

    def post(self, request):
        serializer = WorkshopGuidelinesWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        guidelines, created = self.get_service().upsert_guidelines(**serializer.validated_data)
        response_status = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return Response(WorkshopGuidelinesSerializer(guidelines).data, status=response_status)


@extend_schema(tags=['Guidelines'])
class GuidelinesDeleteAPIView(BaseGuidelinesAPIView):
    def delete(self, request, guidelines_id):
        self.get_service().delete_guidelines(guidelines_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
