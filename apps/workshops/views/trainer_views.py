from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_trainer_service
from apps.workshops.serializers import TrainerListItemSerializer
from apps.workshops.serializers import WorkshopDateFilterSerializer
from apps.workshops.serializers import WorkshopTrainerSerializer
from apps.workshops.serializers import WorkshopTrainerWriteSerializer


class BaseTrainerAPIView(BaseAPIView):
    """Base view for trainer code operations"""

    _trainer_service = None

    def get_service(self):
        if self._trainer_service is None:
            self._trainer_service = get_trainer_service()
        return self._trainer_service


@extend_schema(tags=['Trainers'], parameters=[WorkshopDateFilterSerializer])
class TrainerListAPIView(BaseTrainerAPIView):
    def get(self, request):
        query_serializer = WorkshopDateFilterSerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        items = self.get_service().list_trainers(query_serializer.validated_data.get('workshop_date'))
        return Response(TrainerListItemSerializer(items, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Trainers'])
class TrainerCreateAPIView(BaseTrainerAPIView):
    serializer_class = WorkshopTrainerWriteSerializer

    def post(self, request):
        serializer = WorkshopTrainerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        trainer = self.get_service().create_trainer(serializer.validated_data)
        return Response(WorkshopTrainerSerializer(trainer).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Trainers'])
class TrainerDetailAPIView(BaseTrainerAPIView):
    def get(self, request, trainer_id):
        trainer = self.get_service().get_trainer(trainer_id)
        return Response(WorkshopTrainerSerializer(trainer).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Trainers'])
class TrainerUpdateAPIView(BaseTrainerAPIView):
    serializer_class = WorkshopTrainerWriteSerializer

    def put(self, request, trainer_id):
        serializer = WorkshopTrainerWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        trainer = self.get_service().update_trainer(trainer_id, serializer.validated_data)
        return Response(WorkshopTrainerSerializer(trainer).data, status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Trainers'])
class TrainerToggleCodeSentAPIView(BaseTrainerAPIView):
    def post(self, request, trainer_id):
        trainer = self.get_service().toggle_code_sent(trainer_id)
        return Response(WorkshopTrainerSerializer(trainer).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Trainers'])
class TrainerDeleteAPIView(BaseTrainerAPIView):
    def delete(self, request, trainer_id):
        self.get_service().delete_trainer(trainer_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Trainers'])
class TrainerCodeGenerateAPIView(BaseTrainerAPIView):
    def get(self, request):
        return Response({'trainer_code': self.get_service().generate_code()}, status=status.HTTP_200_OK)
