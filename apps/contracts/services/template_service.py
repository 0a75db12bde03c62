import logging
from typing import Any

from django.db import transaction

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.template_dal import ContractTemplateDAL
from apps.contracts.exceptions import TemplateInUseError
from apps.contracts.models import ContractTemplate
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.workshop_dal import WorkshopDAL

logger = logging.getLogger(__name__)

CLONED_FIELDS = ('name', 'type', 'is_volunteer', 'content_markdown')


class ContractTemplateService:
    """Service for contract templates of workshops"""

    def __init__(self, dal=None, workshop_dal=None, assignment_dal=None, registration_dal=None):
        self.dal = dal or ContractTemplateDAL()
        self.workshop_dal = workshop_dal or WorkshopDAL()
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.registration_dal = registration_dal or TrainerRegistrationDAL()

    def list_templates(self, workshop_date=None, template_type: str | None = None) -> list[dict[str, Any]]:
        """
        Templates by type then newest workshop. Trainer templates come with
        their assigned trainers and whether each accepted the contract.
        """
        templates = list(self.dal.get_templates_queryset(workshop_date, template_type))
        trainer_template_ids = [t.id for t in templates if t.type == ContractTemplate.Type.TRAINER]
        assignments = self.assignment_dal.get_assignments_for_templates(trainer_template_ids)

        codes = [a.trainer.trainer_code for group in assignments.values() for a in group]
        registrations = self.registration_dal.get_registrations_by_trainer_codes(codes)

        items = []
        for template in templates:
            items.append(
                {
                    'template': template,
                    'assignments': [
                        self._assignment_entry(assignment, registrations.get(assignment.trainer.trainer_code))
                        for assignment in assignments.get(template.id, [])
                    ],
                }
            )
        return items

    def get_template(self, template_id: int) -> ContractTemplate:
        return self.dal.get_template_by_id(template_id)

    def create_template(self, validated_data: dict[str, Any]) -> ContractTemplate:
        data = validated_data.copy()
        data['workshop'] = self.workshop_dal.get_workshop_by_date(data.pop('workshop_date'))
        template = self.dal.create_template(data)
        logger.info(f'Contract template {template.id} ({template.type}) created for {template.workshop_id}')
        return template

    @transaction.atomic
    def update_template(self, template_id: int, validated_data: dict[str, Any]) -> ContractTemplate:
        template = self.dal.get_template_by_id(template_id)
        data = validated_data.copy()

        workshop_date = data.pop('workshop_date', None)
        moved = workshop_date is not None and workshop_date != template.workshop_id
        retyped = 'type' in data and data['type'] != template.type
        if moved or retyped:
            if template.assignments.exists() or template.client_contracts.exists():
                raise TemplateInUseError(template.id, 'Its workshop and type can no longer change')
        if moved:
            data['workshop'] = self.workshop_dal.get_workshop_by_date(workshop_date)

        return self.dal.update_template(template, data)

    @transaction.atomic
    def delete_template(self, template_id: int) -> bool:
        """Delete a template with its trainer assignments; refused while a client contract uses it."""
        template = self.dal.get_template_by_id(template_id)
        if template.client_contracts.exists():
            raise TemplateInUseError(template.id, 'A client contract is based on it')
        return self.dal.delete_template(template)

    def clone_template(self, template_id: int, validated_data: dict[str, Any]) -> ContractTemplate:
        """
        Copy a template to another workshop date. Name, type, volunteer flag
        and content default to the source values.
        """
        source = self.dal.get_template_by_id(template_id)
        data = {field: validated_data.get(field, getattr(source, field)) for field in CLONED_FIELDS}
        data['workshop'] = self.workshop_dal.get_workshop_by_date(validated_data['workshop_date'])

        clone = self.dal.create_template(data)
        logger.info(f'Contract template {source.id} cloned to {clone.id} for {clone.workshop_id}')
        return clone

    @staticmethod
    def _assignment_entry(assignment, registration) -> dict[str, Any]:
        return {
            'assignment_id': assignment.id,
            'trainer_id': assignment.trainer.id,
            'trainer_code': assignment.trainer.trainer_code,
            'contract_accepted': bool(registration and registration.contract_accepted),
        }
