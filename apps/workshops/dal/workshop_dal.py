from typing import Any

from django.db.models import QuerySet

from apps.shared.decorators.database import handle_db_errors
from apps.workshops.exceptions import GuidelinesNotFoundError
from apps.workshops.exceptions import WorkshopNotFoundError
from apps.workshops.models import Workshop
from apps.workshops.models import WorkshopGuidelines


class WorkshopDAL:
    """Data Access Layer for Workshop model operations only"""

    @handle_db_errors(operation_type='create', model_name='Workshop')
    def create_workshop(self, workshop_data: dict[str, Any]) -> Workshop:
        return Workshop.objects.create(**workshop_data)

    @handle_db_errors(operation_type='read', model_name='Workshop')
    def get_workshop_by_id(self, workshop_id: int) -> Workshop:
        try:
            return Workshop.objects.get(id=workshop_id)
        except Workshop.DoesNotExist:
            raise WorkshopNotFoundError(workshop_identifier=workshop_id)

    @handle_db_errors(operation_type='read', model_name='Workshop')
    def get_workshop_by_date(self, workshop_date) -> Workshop:
        try:
            return Workshop.objects.get(date=workshop_date)
        except Workshop.DoesNotExist:
            raise WorkshopNotFoundError(workshop_identifier=workshop_date)

    def get_workshops_queryset(self) -> QuerySet[Workshop]:
        return Workshop.objects.newest_first()

    def date_exists(self, workshop_date, exclude_id: int | None = None) -> bool:
        queryset = Workshop.objects.for_date(workshop_date)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    @handle_db_errors(operation_type='update', model_name='Workshop')
    def update_workshop(self, workshop: Workshop, validated_data: dict[str, Any]) -> Workshop:
        for field, value in validated_data.items():
            setattr(workshop, field, value)
        workshop.save()
        return workshop

    @handle_db_errors(operation_type='delete', model_name='Workshop')
    def delete_workshop(self, workshop: Workshop) -> bool:
        workshop.delete()
        return True


class WorkshopGuidelinesDAL:
    """Data Access Layer for WorkshopGuidelines model operations only"""

    @handle_db_errors(operation_type='read', model_name='WorkshopGuidelines')
    def get_guidelines_by_id(self, guidelines_id: int) -> WorkshopGuidelines:
        try:
            return WorkshopGuidelines.objects.get(id=guidelines_id)
        except WorkshopGuidelines.DoesNotExist:
            raise GuidelinesNotFoundError(guidelines_identifier=guidelines_id)

    @handle_db_errors(operation_type='read', model_name='WorkshopGuidelines')
    def get_guidelines_by_date(self, workshop_date) -> WorkshopGuidelines:
        try:
            return WorkshopGuidelines.objects.get(workshop_id=workshop_date)
        except WorkshopGuidelines.DoesNotExist:
            raise GuidelinesNotFoundError(guidelines_identifier=workshop_date)

    def get_guidelines_queryset(self) -> QuerySet[WorkshopGuidelines]:
        return WorkshopGuidelines.objects.order_by('-workshop_id')

    @handle_db_errors(operation_type='upsert', model_name='WorkshopGuidelines')
    def upsert_guidelines(self, workshop: Workshop, guidelines_markdown: str) -> tuple[WorkshopGuidelines, bool]:
        return WorkshopGuidelines.objects.update_or_create(
            workshop=workshop,
            defaults={'guidelines_markdown': guidelines_markdown},
        )

    @handle_db_errors(operation_type='delete', model_name='WorkshopGuidelines')
    def delete_guidelines(self, guidelines: WorkshopGuidelines) -> bool:
        guidelines.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='WorkshopGuidelines')
    def delete_guidelines_for_workshop(self, workshop_date) -> int:
        deleted, _ = WorkshopGuidelines.objects.filter(workshop_id=workshop_date).delete()
        return deleted
