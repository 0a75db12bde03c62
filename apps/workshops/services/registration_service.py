import logging
from typing import Any

from django.db import transaction

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.shared.utils.paginator import ServicePaginator
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.models import TrainerRegistration
from apps.workshops.services.document_service import RegistrationDocumentService

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for trainer registrations: listing with contract info, documents, payment"""

    def __init__(
        self,
        dal=None,
        trainer_dal=None,
        assignment_dal=None,
        document_service=None,
        paginator=None,
    ):
        self.dal = dal or TrainerRegistrationDAL()
        self.trainer_dal = trainer_dal or WorkshopTrainerDAL()
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.document_service = document_service or RegistrationDocumentService()
        self.paginator = paginator or ServicePaginator()

    def list_registrations(self, filters: dict[str, Any]) -> dict[str, Any]:
        """Registrations newest first, each with its contract info and document links."""
        queryset = self.dal.get_registrations_queryset(filters.get('workshop_date'))
        page = self.paginator.paginate(queryset, filters.get('page', 1), filters.get('page_size'))
        page['items'] = self._enrich(page['items'])
        return page

    def get_registration(self, registration_id: int) -> dict[str, Any]:
        registration = self.dal.get_registration_by_id(registration_id)
        return self._enrich([registration])[0]

    def toggle_paid(self, registration_id: int) -> TrainerRegistration:
        registration = self.dal.get_registration_by_id(registration_id)
        updated = self.dal.update_registration(registration, {'is_paid': not registration.is_paid})
        logger.info(f'Registration {registration_id} marked as {"paid" if updated.is_paid else "unpaid"}')
        return updated

    @transaction.atomic
    def delete_registration(self, registration_id: int) -> bool:
        """Remove the uploaded documents first (best effort), then the registration."""
        registration = self.dal.get_registration_by_id(registration_id)
        self.document_service.delete_documents(registration)
        return self.dal.delete_registration(registration)

    def _contract_infos(self, registrations: list[TrainerRegistration]) -> dict[str, dict]:
        """Contract info per trainer code, using one query for trainers and one for assignments."""
        codes = {registration.trainer_id for registration in registrations}
        trainers = self.trainer_dal.get_trainers_by_codes(codes)
        assignments = self.assignment_dal.get_assignments_by_trainer([trainer.id for trainer in trainers.values()])

        infos = {}
        for code, trainer in trainers.items():
            trainer_assignments = assignments.get(trainer.id)
            if not trainer_assignments:
                continue
            template = trainer_assignments[0].contract_template
            infos[code] = {
                'template_id': template.id,
                'name': template.name,
                'is_volunteer': template.is_volunteer,
            }
        return infos

    def _enrich(self, registrations: list[TrainerRegistration]) -> list[dict[str, Any]]:
        infos = self._contract_infos(registrations)
        items = []
        for registration in registrations:
            contract_info = infos.get(registration.trainer_id)
            is_volunteer = bool(contract_info and contract_info['is_volunteer'])
            items.append(
                {
                    'registration': registration,
                    'contract_info': contract_info,
                    'documents': self.document_service.document_links(registration, is_volunteer),
                }
            )
        return items
