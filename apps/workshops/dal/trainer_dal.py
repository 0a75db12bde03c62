from typing import Any

from django.db.models import QuerySet

from apps.shared.decorators.database import handle_db_errors
from apps.workshops.exceptions import RegistrationNotFoundError
from apps.workshops.exceptions import TrainerNotFoundError
from apps.workshops.models import TrainerRegistration
from apps.workshops.models import WorkshopTrainer


class WorkshopTrainerDAL:
    """Data Access Layer for WorkshopTrainer model operations only"""

    @handle_db_errors(operation_type='create', model_name='WorkshopTrainer')
    def create_trainer(self, trainer_data: dict[str, Any]) -> WorkshopTrainer:
        return WorkshopTrainer.objects.create(**trainer_data)

    @handle_db_errors(operation_type='read', model_name='WorkshopTrainer')
    def get_trainer_by_id(self, trainer_id: int) -> WorkshopTrainer:
        try:
            return WorkshopTrainer.objects.get(id=trainer_id)
        except WorkshopTrainer.DoesNotExist:
            raise TrainerNotFoundError(trainer_identifier=trainer_id)

    @handle_db_errors(operation_type='read', model_name='WorkshopTrainer')
    def get_trainer_by_code(self, trainer_code: str) -> WorkshopTrainer:
        try:
            return WorkshopTrainer.objects.get(trainer_code=trainer_code)
        except WorkshopTrainer.DoesNotExist:
            raise TrainerNotFoundError(trainer_identifier=trainer_code)

    def get_trainers_queryset(self, workshop_date=None) -> QuerySet[WorkshopTrainer]:
        queryset = WorkshopTrainer.objects.all()
        if workshop_date:
            queryset = queryset.for_workshop(workshop_date)
        return queryset.newest_first()

    def get_trainers_for_workshop(self, workshop_date) -> list[WorkshopTrainer]:
        return list(WorkshopTrainer.objects.for_workshop(workshop_date))

    def get_trainers_by_codes(self, trainer_codes) -> dict[str, WorkshopTrainer]:
        return {trainer.trainer_code: trainer for trainer in WorkshopTrainer.objects.filter(trainer_code__in=trainer_codes)}

    def get_trainers_by_dates(self, workshop_dates) -> list[WorkshopTrainer]:
        return list(WorkshopTrainer.objects.filter(workshop_id__in=workshop_dates))

    def code_exists(self, trainer_code: str, exclude_id: int | None = None) -> bool:
        queryset = WorkshopTrainer.objects.filter(trainer_code=trainer_code)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    @handle_db_errors(operation_type='update', model_name='WorkshopTrainer')
    def update_trainer(self, trainer: WorkshopTrainer, validated_data: dict[str, Any]) -> WorkshopTrainer:
        for field, value in validated_data.items():
            setattr(trainer, field, value)
        trainer.save()
        return trainer

    @handle_db_errors(operation_type='delete', model_name='WorkshopTrainer')
    def delete_trainer(self, trainer: WorkshopTrainer) -> bool:
        trainer.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='WorkshopTrainer')
    def delete_trainers_for_workshop(self, workshop_date) -> int:
        deleted, _ = WorkshopTrainer.objects.for_workshop(workshop_date).delete()
        return deleted


class TrainerRegistrationDAL:
    """Data Access Layer for TrainerRegistration model operations only"""

    @handle_db_errors(operation_type='read', model_name='TrainerRegistration')
    def get_registration_by_id(self, registration_id: int) -> TrainerRegistration:
        try:
            return TrainerRegistration.objects.get(id=registration_id)
        except TrainerRegistration.DoesNotExist:
            raise RegistrationNotFoundError(registration_identifier=registration_id)

    def get_registrations_queryset(self, workshop_date=None) -> QuerySet[TrainerRegistration]:
        queryset = TrainerRegistration.objects.all()
        if workshop_date:
            queryset = queryset.for_workshop(workshop_date)
        return queryset.newest_first()

    def get_registrations_for_workshop(self, workshop_date) -> list[TrainerRegistration]:
        return list(TrainerRegistration.objects.for_workshop(workshop_date))

    def get_registrations_by_dates(self, workshop_dates) -> list[TrainerRegistration]:
        return list(TrainerRegistration.objects.filter(workshop_id__in=workshop_dates))

    def get_registrations_by_trainer_codes(self, trainer_codes: list[str]) -> dict[str, TrainerRegistration]:
        """Latest registration per trainer code."""
        registrations = {}
        for registration in TrainerRegistration.objects.filter(trainer_id__in=trainer_codes).newest_first():
            registrations.setdefault(registration.trainer_id, registration)
        return registrations

    @handle_db_errors(operation_type='update', model_name='TrainerRegistration')
    def update_registration(
        self, registration: TrainerRegistration, validated_data: dict[str, Any]
    ) -> TrainerRegistration:
        for field, value in validated_data.items():
            setattr(registration, field, value)
        registration.save(update_fields=[*validated_data.keys(), 'updated_at'])
        return registration

    @handle_db_errors(operation_type='delete', model_name='TrainerRegistration')
    def delete_registration(self, registration: TrainerRegistration) -> bool:
        registration.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='TrainerRegistration')
    def delete_registrations_for_workshop(self, workshop_date) -> int:
        deleted, _ = TrainerRegistration.objects.for_workshop(workshop_date).delete()
        return deleted
