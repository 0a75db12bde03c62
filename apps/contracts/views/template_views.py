from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.contracts.serializers import AssignTrainersSerializer
from apps.contracts.serializers import ContractAssignmentSerializer
from apps.contracts.serializers import ContractTemplateCloneSerializer
from apps.contracts.serializers import ContractTemplateFilterSerializer
from apps.contracts.serializers import ContractTemplateListItemSerializer
from apps.contracts.serializers import ContractTemplateSerializer
from apps.contracts.serializers import ContractTemplateWriteSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_contract_assignment_service
from apps.shared.container import get_contract_template_service
from apps.workshops.serializers import WorkshopTrainerSerializer


class BaseTemplateAPIView(BaseAPIView):
    """Base view for contract template operations"""

    _template_service = None

    def get_service(self):
        if self._template_service is None:
            self._template_service = get_contract_template_service()
        return self._template_service


class BaseAssignmentAPIView(BaseAPIView):
    _assignment_service = None

    def get_service(self):
        if self._assignment_service is None:
            self._assignment_service = get_contract_assignment_service()
        return self._assignment_service


@extend_schema(tags=['Contract templates'], parameters=[ContractTemplateFilterSerializer])
class TemplateListAPIView(BaseTemplateAPIView):
    def get(self, request):
        query_serializer = ContractTemplateFilterSerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        filters = query_serializer.validated_data

        items = self.get_service().list_templates(filters.get('workshop_date'), filters.get('type'))
        return Response(ContractTemplateListItemSerializer(items, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Contract templates'])
class TemplateCreateAPIView(BaseTemplateAPIView):
    serializer_class = ContractTemplateWriteSerializer

    def post(self, request):
        serializer = ContractTemplateWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        template = self.get_service().create_template(serializer.validated_data)
        return Response(ContractTemplateSerializer(template).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Contract templates'])
class TemplateDetailAPIView(BaseTemplateAPIView):
    def get(self, request, template_id):
        template = self.get_service().get_template(template_id)
        return Response(ContractTemplateSerializer(template).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Contract templates'])
class TemplateUpdateAPIView(BaseTemplateAPIView):
    serializer_class = ContractTemplateWriteSerializer

    def put(self, request, template_id):
        serializer = ContractTemplateWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        template = self.get_service().update_template(template_id, serializer.validated_data)
        return Response(ContractTemplateSerializer(template).data, status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Contract templates'])
class TemplateDeleteAPIView(BaseTemplateAPIView):
    def delete(self, request, template_id):
        self.get_service().delete_template(template_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Contract templates'])
class TemplateCloneAPIView(BaseTemplateAPIView):
    """Copy a template to another workshop"""

    serializer_class = ContractTemplateCloneSerializer

    def post(self, request, template_id):
        serializer = ContractTemplateCloneSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        clone = self.get_service().clone_template(template_id, serializer.validated_data)
        return Response(ContractTemplateSerializer(clone).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Contract assignments'])
class TemplateAssignmentListAPIView(BaseAssignmentAPIView):
    def get(self, request, template_id):
        assignments = self.get_service().list_assignments(template_id)
        return Response(ContractAssignmentSerializer(assignments, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Contract assignments'])
class TemplateAvailableTrainersAPIView(BaseAssignmentAPIView):
    """Trainers of the template's workshop that can still be assigned"""

    def get(self, request, template_id):
        trainers = self.get_service().available_trainers(template_id)
        return Response(WorkshopTrainerSerializer(trainers, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Contract assignments'])
class TemplateAssignAPIView(BaseAssignmentAPIView):
    serializer_class = AssignTrainersSerializer

    def post(self, request, template_id):
        serializer = AssignTrainersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignments = self.get_service().assign(template_id, serializer.validated_data['trainer_ids'])
        return Response(ContractAssignmentSerializer(assignments, many=True).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Contract assignments'])
class AssignmentDeleteAPIView(BaseAssignmentAPIView):
    def delete(self, request, assignment_id):
        self.get_service().unassign(assignment_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
