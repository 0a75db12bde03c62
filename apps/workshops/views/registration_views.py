from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.contracts.serializers import RenderedContractSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_contract_rendering_service
from apps.shared.container import get_registration_service
from apps.workshops.serializers import RegistrationListItemSerializer
from apps.workshops.serializers import RegistrationListQuerySerializer
from apps.workshops.serializers import TrainerRegistrationSerializer


class BaseRegistrationAPIView(BaseAPIView):
    """Base view for trainer registration operations"""

    _registration_service = None

    def get_service(self):
        if self._registration_service is None:
            self._registration_service = get_registration_service()
        return self._registration_service


@extend_schema(tags=['Registrations'], parameters=[RegistrationListQuerySerializer])
class RegistrationListAPIView(BaseRegistrationAPIView):
    def get(self, request):
        query_serializer = RegistrationListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        page = self.get_service().list_registrations(query_serializer.validated_data)
        response_data = {
            'registrations': RegistrationListItemSerializer(page['items'], many=True).data,
            'pagination': page['meta'],
        }
        return Response(response_data, status=status.HTTP_200_OK)


@extend_schema(tags=['Registrations'])
class RegistrationDetailAPIView(BaseRegistrationAPIView):
    def get(self, request, registration_id):
        item = self.get_service().get_registration(registration_id)
        return Response(RegistrationListItemSerializer(item).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Registrations'])
class RegistrationTogglePaidAPIView(BaseRegistrationAPIView):
    def post(self, request, registration_id):
        registration = self.get_service().toggle_paid(registration_id)
        return Response(TrainerRegistrationSerializer(registration).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Registrations'])
class RegistrationDeleteAPIView(BaseRegistrationAPIView):
    """Delete a registration and its uploaded documents"""

    def delete(self, request, registration_id):
        self.get_service().delete_registration(registration_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Registrations'])
class RegistrationContractAPIView(BaseRegistrationAPIView):
    """Contract of the trainer behind a registration, with placeholders filled in"""

    def get(self, request, registration_id):
        rendered = get_contract_rendering_service().render_registration_contract(registration_id)
        return Response(RenderedContractSerializer(rendered).data, status=status.HTTP_200_OK)
