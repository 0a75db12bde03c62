from typing import Any

from django.db.models import QuerySet

from apps.contracts.exceptions import TemplateNotFoundError
from apps.contracts.models import ContractTemplate
from apps.shared.decorators.database import handle_db_errors


class ContractTemplateDAL:
    """Data Access Layer for ContractTemplate model operations only"""

    @handle_db_errors(operation_type='create', model_name='ContractTemplate')
    def create_template(self, template_data: dict[str, Any]) -> ContractTemplate:
        return ContractTemplate.objects.create(**template_data)

    @handle_db_errors(operation_type='read', model_name='ContractTemplate')
    def get_template_by_id(self, template_id: int) -> ContractTemplate:
        try:
            return ContractTemplate.objects.get(id=template_id)
        except ContractTemplate.DoesNotExist:
            raise TemplateNotFoundError(template_identifier=template_id)

    def get_templates_queryset(self, workshop_date=None, template_type: str | None = None) -> QuerySet[ContractTemplate]:
        queryset = ContractTemplate.objects.all()
        if workshop_date:
            queryset = queryset.for_workshop(workshop_date)
        if template_type:
            queryset = queryset.of_type(template_type)
        return queryset.listing_order()

    @handle_db_errors(operation_type='update', model_name='ContractTemplate')
    def update_template(self, template: ContractTemplate, validated_data: dict[str, Any]) -> ContractTemplate:
        for field, value in validated_data.items():
            setattr(template, field, value)
        template.save()
        return template

    @handle_db_errors(operation_type='delete', model_name='ContractTemplate')
    def delete_template(self, template: ContractTemplate) -> bool:
        template.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='ContractTemplate')
    def delete_templates_for_workshop(self, workshop_date) -> int:
        deleted, _ = ContractTemplate.objects.for_workshop(workshop_date).delete()
        return deleted
