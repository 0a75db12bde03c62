import logging
from typing import Any

from django.db import transaction

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.client_contract_dal import ClientContractDAL
from apps.contracts.dal.template_dal import ContractTemplateDAL
from apps.shared.utils.codes import generate_workshop_password
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.dal.workshop_dal import WorkshopDAL
from apps.workshops.dal.workshop_dal import WorkshopGuidelinesDAL
from apps.workshops.exceptions import WorkshopDateLockedError
from apps.workshops.exceptions import WorkshopDateTakenError
from apps.workshops.models import Workshop
from apps.workshops.models import default_available_tools
from apps.workshops.services.document_service import RegistrationDocumentService

logger = logging.getLogger(__name__)


class WorkshopService:
    """Service for workshop records (date, access password, available tools)"""

    def __init__(
        self,
        dal=None,
        trainer_dal=None,
        registration_dal=None,
        guidelines_dal=None,
        template_dal=None,
        assignment_dal=None,
        client_contract_dal=None,
        document_service=None,
    ):
        self.dal = dal or WorkshopDAL()
        self.trainer_dal = trainer_dal or WorkshopTrainerDAL()
        self.registration_dal = registration_dal or TrainerRegistrationDAL()
        self.guidelines_dal = guidelines_dal or WorkshopGuidelinesDAL()
        self.template_dal = template_dal or ContractTemplateDAL()
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.client_contract_dal = client_contract_dal or ClientContractDAL()
        self.document_service = document_service or RegistrationDocumentService()

    def list_workshops(self) -> list[Workshop]:
        return list(self.dal.get_workshops_queryset())

    def get_workshop(self, workshop_id: int) -> Workshop:
        return self.dal.get_workshop_by_id(workshop_id)

    @staticmethod
    def generate_password() -> str:
        return generate_workshop_password()

    def create_workshop(self, validated_data: dict[str, Any]) -> Workshop:
        data = validated_data.copy()
        if self.dal.date_exists(data['date']):
            raise WorkshopDateTakenError(data['date'])

        if not data.get('password'):
            data['password'] = self.generate_password()
        data['available_tools'] = {**default_available_tools(), **(data.get('available_tools') or {})}

        workshop = self.dal.create_workshop(data)
        logger.info(f'Workshop {workshop.date} created')
        return workshop

    @transaction.atomic
    def update_workshop(self, workshop_id: int, validated_data: dict[str, Any]) -> Workshop:
        workshop = self.dal.get_workshop_by_id(workshop_id)
        data = validated_data.copy()

        new_date = data.get('date')
        if new_date and new_date != workshop.date:
            if self.dal.date_exists(new_date, exclude_id=workshop.id):
                raise WorkshopDateTakenError(new_date)
            if self._has_dependents(workshop):
                raise WorkshopDateLockedError(workshop.date)

        if 'password' in data and not data['password']:
            data['password'] = self.generate_password()
        if 'available_tools' in data:
            data['available_tools'] = {**workshop.available_tools, **(data['available_tools'] or {})}

        return self.dal.update_workshop(workshop, data)

    @transaction.atomic
    def delete_workshop(self, workshop_id: int) -> dict[str, int]:
        """
        Delete a workshop and everything attached to its date.

        Order: contract assignments, registrations (documents are removed in
        the background after commit), trainers, client contract, guidelines,
        contract templates, the workshop itself.
        """
        workshop = self.dal.get_workshop_by_id(workshop_id)
        workshop_date = workshop.date

        registrations = self.registration_dal.get_registrations_for_workshop(workshop_date)
        document_keys = self.document_service.queue_documents_cleanup(registrations)

        summary = {
            'assignments': self.assignment_dal.delete_assignments_for_workshop(workshop_date),
            'registrations': self.registration_dal.delete_registrations_for_workshop(workshop_date),
            'documents': len(document_keys),
            'trainers': self.trainer_dal.delete_trainers_for_workshop(workshop_date),
            'client_contracts': self.client_contract_dal.delete_client_contract_for_workshop(workshop_date),
            'guidelines': self.guidelines_dal.delete_guidelines_for_workshop(workshop_date),
            'templates': self.template_dal.delete_templates_for_workshop(workshop_date),
        }
        self.dal.delete_workshop(workshop)

        logger.info(f'Workshop {workshop_date} deleted: {summary}')
        return summary

    def _has_dependents(self, workshop: Workshop) -> bool:
        return (
            workshop.trainers.exists()
            or workshop.registrations.exists()
            or workshop.contract_templates.exists()
            or Workshop.objects.filter(id=workshop.id, guidelines__isnull=False).exists()
            or self.client_contract_dal.workshop_has_contract(workshop.date)
        )
