import logging

from django.db import transaction

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.template_dal import ContractTemplateDAL
from apps.contracts.exceptions import AssignmentLockedError
from apps.contracts.exceptions import InvalidTemplateTypeError
from apps.contracts.exceptions import TrainerAlreadyAssignedError
from apps.contracts.exceptions import TrainerWorkshopMismatchError
from apps.contracts.models import ContractAssignment
from apps.contracts.models import ContractTemplate
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.models import WorkshopTrainer

logger = logging.getLogger(__name__)


class ContractAssignmentService:
    """
    Binds trainers to trainer contract templates.

    A trainer holds at most one assignment, and it is locked once the
    trainer accepted the contract in its registration.
    """

    def __init__(self, dal=None, template_dal=None, trainer_dal=None, registration_dal=None):
        self.dal = dal or ContractAssignmentDAL()
        self.template_dal = template_dal or ContractTemplateDAL()
        self.trainer_dal = trainer_dal or WorkshopTrainerDAL()
        self.registration_dal = registration_dal or TrainerRegistrationDAL()

    def list_assignments(self, template_id: int) -> list[ContractAssignment]:
        template = self.template_dal.get_template_by_id(template_id)
        return self.dal.get_assignments_for_template(template)

    def available_trainers(self, template_id: int) -> list[WorkshopTrainer]:
        """Trainers of the template's workshop without any contract assignment."""
        template = self._get_trainer_template(template_id)
        trainers = self.trainer_dal.get_trainers_for_workshop(template.workshop_id)
        assigned = self.dal.get_assignments_by_trainer([trainer.id for trainer in trainers])
        return [trainer for trainer in trainers if trainer.id not in assigned]

    @transaction.atomic
    def assign(self, template_id: int, trainer_ids: list[int]) -> list[ContractAssignment]:
        template = self._get_trainer_template(template_id)

        assignments = []
        for trainer_id in trainer_ids:
            trainer = self.trainer_dal.get_trainer_by_id(trainer_id)
            if trainer.workshop_id != template.workshop_id:
                raise TrainerWorkshopMismatchError(trainer.trainer_code, template.workshop_id)
            if self.dal.trainer_has_assignment(trainer.id):
                raise TrainerAlreadyAssignedError(trainer.trainer_code)
            assignments.append(self.dal.create_assignment(trainer, template))

        logger.info(f'{len(assignments)} trainer(s) assigned to contract template {template.id}')
        return assignments

    @transaction.atomic
    def unassign(self, assignment_id: int) -> bool:
        assignment = self.dal.get_assignment_by_id(assignment_id)
        trainer_code = assignment.trainer.trainer_code

        registration = self.registration_dal.get_registrations_by_trainer_codes([trainer_code]).get(trainer_code)
        if registration is not None and registration.contract_accepted:
            raise AssignmentLockedError(trainer_code)

        result = self.dal.delete_assignment(assignment)
        logger.info(f'Trainer {trainer_code} unassigned from contract template {assignment.contract_template_id}')
        return result

    def _get_trainer_template(self, template_id: int) -> ContractTemplate:
        template = self.template_dal.get_template_by_id(template_id)
        if template.type != ContractTemplate.Type.TRAINER:
            raise InvalidTemplateTypeError(ContractTemplate.Type.TRAINER, template.type)
        return template
