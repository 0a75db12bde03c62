from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.contracts.serializers import AvailableDatesQuerySerializer
from apps.contracts.serializers import ClientContractListQuerySerializer
from apps.contracts.serializers import ClientContractSerializer
from apps.contracts.serializers import ClientContractWriteSerializer
from apps.contracts.serializers import RenderedContractSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_client_contract_service
from apps.shared.container import get_contract_rendering_service


class BaseClientContractAPIView(BaseAPIView):
    """Base view for client contract operations"""

    _client_contract_service = None

    def get_service(self):
        if self._client_contract_service is None:
            self._client_contract_service = get_client_contract_service()
        return self._client_contract_service


@extend_schema(tags=['Client contracts'], parameters=[ClientContractListQuerySerializer])
class ClientContractListAPIView(BaseClientContractAPIView):
    def get(self, request):
        query_serializer = ClientContractListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        page = self.get_service().list_client_contracts(**query_serializer.validated_data)
        response_data = {
            'client_contracts': ClientContractSerializer(page['items'], many=True).data,
            'pagination': page['meta'],
        }
        return Response(response_data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'])
class ClientContractCreateAPIView(BaseClientContractAPIView):
    serializer_class = ClientContractWriteSerializer

    def post(self, request):
        serializer = ClientContractWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contract = self.get_service().create_client_contract(serializer.validated_data)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Client contracts'])
class ClientContractDetailAPIView(BaseClientContractAPIView):
    def get(self, request, contract_id):
        contract = self.get_service().get_client_contract(contract_id)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'])
class ClientContractUpdateAPIView(BaseClientContractAPIView):
    serializer_class = ClientContractWriteSerializer

    def put(self, request, contract_id):
        serializer = ClientContractWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        contract = self.get_service().update_client_contract(contract_id, serializer.validated_data)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Client contracts'])
class ClientContractDeleteAPIView(BaseClientContractAPIView):
    def delete(self, request, contract_id):
        self.get_service().delete_client_contract(contract_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Client contracts'])
class ClientContractToggleCodeSentAPIView(BaseClientContractAPIView):
    def post(self, request, contract_id):
        contract = self.get_service().toggle_code_sent(contract_id)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'])
class ClientContractTogglePaymentAPIView(BaseClientContractAPIView):
    def post(self, request, contract_id):
        contract = self.get_service().toggle_payment_received(contract_id)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'])
class ClientContractSendCodeAPIView(BaseClientContractAPIView):
    """Email the signature code to the client representative"""

    def post(self, request, contract_id):
        contract = self.get_service().send_signature_code(contract_id)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_202_ACCEPTED)


@extend_schema(tags=['Client contracts'])
class ClientContractRegenerateCodeAPIView(BaseClientContractAPIView):
    def post(self, request, contract_id):
        contract = self.get_service().regenerate_signature_code(contract_id)
        return Response(ClientContractSerializer(contract).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'])
class ClientContractRenderAPIView(BaseClientContractAPIView):
    def get(self, request, contract_id):
        rendered = get_contract_rendering_service().render_client_contract(contract_id)
        return Response(RenderedContractSerializer(rendered).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Client contracts'], parameters=[AvailableDatesQuerySerializer])
class ClientContractAvailableDatesAPIView(BaseClientContractAPIView):
    """Workshop dates without a client contract"""

    def get(self, request):
        query_serializer = AvailableDatesQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        dates = self.get_service().available_workshop_dates(query_serializer.validated_data.get('exclude_contract_id'))
        return Response({'dates': [workshop_date.isoformat() for workshop_date in dates]}, status=status.HTTP_200_OK)
