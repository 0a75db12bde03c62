import logging
from typing import Any

from django.db import transaction

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.shared.utils.codes import generate_trainer_code
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.dal.workshop_dal import WorkshopDAL
from apps.workshops.exceptions import TrainerCodeTakenError
from apps.workshops.exceptions import TrainerLockedError
from apps.workshops.models import WorkshopTrainer
from apps.workshops.services.document_service import RegistrationDocumentService

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 10


def assignment_summary(assignments: list) -> dict | None:
    """Contract shown next to a trainer; None without assignment."""
    if not assignments:
        return None
    template = assignments[0].contract_template
    return {
        'assignment_id': assignments[0].id,
        'template_id': template.id,
        'template_name': template.name,
        'is_volunteer': template.is_volunteer,
    }


class TrainerService:
    """Service for the claimable trainer codes of workshops"""

    def __init__(self, dal=None, workshop_dal=None, assignment_dal=None, document_service=None):
        self.dal = dal or WorkshopTrainerDAL()
        self.workshop_dal = workshop_dal or WorkshopDAL()
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.document_service = document_service or RegistrationDocumentService()

    def list_trainers(self, workshop_date=None) -> list[dict[str, Any]]:
        """Trainers newest workshop first, each with its contract assignment."""
        trainers = list(self.dal.get_trainers_queryset(workshop_date))
        assignments = self.assignment_dal.get_assignments_by_trainer([trainer.id for trainer in trainers])
        return [
            {'trainer': trainer, 'assignment': assignment_summary(assignments.get(trainer.id, []))}
            for trainer in trainers
        ]

    def get_trainer(self, trainer_id: int) -> WorkshopTrainer:
        return self.dal.get_trainer_by_id(trainer_id)

    def generate_code(self) -> str:
        """A trainer code not used by any trainer yet."""
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_trainer_code()
            if not self.dal.code_exists(code):
                return code
        raise TrainerCodeTakenError(code)

    def create_trainer(self, validated_data: dict[str, Any]) -> WorkshopTrainer:
        data = validated_data.copy()
        workshop = self.workshop_dal.get_workshop_by_date(data.pop('workshop_date'))

        code = (data.get('trainer_code') or '').strip().upper()
        if not code:
            code = self.generate_code()
        elif self.dal.code_exists(code):
            raise TrainerCodeTakenError(code)

        trainer = self.dal.create_trainer({**data, 'workshop': workshop, 'trainer_code': code})
        logger.info(f'Trainer {trainer.trainer_code} created for workshop {workshop.date}')
        return trainer

    @transaction.atomic
    def update_trainer(self, trainer_id: int, validated_data: dict[str, Any]) -> WorkshopTrainer:
        trainer = self.dal.get_trainer_by_id(trainer_id)
        data = validated_data.copy()

        workshop_date = data.pop('workshop_date', None)
        if workshop_date and workshop_date != trainer.workshop_id:
            self._ensure_not_registered(trainer)
            data['workshop'] = self.workshop_dal.get_workshop_by_date(workshop_date)

        if 'trainer_code' in data:
            code = (data['trainer_code'] or '').strip().upper()
            if code and code != trainer.trainer_code:
                self._ensure_not_registered(trainer)
                if self.dal.code_exists(code, exclude_id=trainer.id):
                    raise TrainerCodeTakenError(code)
                data['trainer_code'] = code
            else:
                data.pop('trainer_code')

        return self.dal.update_trainer(trainer, data)

    def toggle_code_sent(self, trainer_id: int) -> WorkshopTrainer:
        trainer = self.dal.get_trainer_by_id(trainer_id)
        return self.dal.update_trainer(trainer, {'code_sent': not trainer.code_sent})

    @transaction.atomic
    def delete_trainer(self, trainer_id: int) -> bool:
        """Delete the trainer with its assignment and registrations."""
        trainer = self.dal.get_trainer_by_id(trainer_id)
        registrations = list(trainer.registrations.all())
        self.document_service.queue_documents_cleanup(registrations)
        return self.dal.delete_trainer(trainer)

    def _ensure_not_registered(self, trainer: WorkshopTrainer):
        if trainer.registrations.exists() or self.assignment_dal.trainer_has_assignment(trainer.id):
            raise TrainerLockedError(trainer.trainer_code)
