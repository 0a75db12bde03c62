import logging
from typing import Any

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.client_contract_dal import ClientContractDAL
from apps.contracts.exceptions import NoContractAssignedError
from apps.contracts.exceptions import TemplateNotFoundError
from apps.contracts.models import ContractTemplate
from apps.contracts.templating import build_client_context
from apps.contracts.templating import build_trainer_context
from apps.contracts.templating import resolve
from apps.contracts.templating import unresolved_placeholders
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.models import TrainerRegistration

logger = logging.getLogger(__name__)


class ContractRenderingService:
    """
    Render contracts as markdown with their placeholders resolved.

    Rendering never fails on missing values: unresolved tokens stay in the
    text and are listed next to it.
    """

    def __init__(self, assignment_dal=None, client_contract_dal=None, trainer_dal=None, registration_dal=None):
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.client_contract_dal = client_contract_dal or ClientContractDAL()
        self.trainer_dal = trainer_dal or WorkshopTrainerDAL()
        self.registration_dal = registration_dal or TrainerRegistrationDAL()

    def render_registration_contract(self, registration_id: int) -> dict[str, Any]:
        registration = self.registration_dal.get_registration_by_id(registration_id)
        return self.render_trainer_contract(registration)

    def render_trainer_contract(self, registration: TrainerRegistration) -> dict[str, Any]:
        """
        Resolve the contract assigned to the trainer of ``registration``.

        Raises:
            TrainerNotFoundError: the registration's trainer code is unknown
            NoContractAssignedError: the trainer has no contract template
            TemplateNotFoundError: the assignment points at a missing template
        """
        trainer = self.trainer_dal.get_trainer_by_code(registration.trainer_code)
        assignments = self.assignment_dal.get_assignments_for_trainer(trainer.id)
        if not assignments:
            raise NoContractAssignedError(trainer.trainer_code)
        if len(assignments) > 1:
            logger.warning(f'Trainer {trainer.trainer_code} has {len(assignments)} contract assignments, using newest')

        template = assignments[0].contract_template
        if template is None:
            raise TemplateNotFoundError(assignments[0].contract_template_id)

        context = build_trainer_context(registration)
        return self._render(template, context, ContractTemplate.Type.TRAINER)

    def render_client_contract(self, contract_id: int) -> dict[str, Any]:
        contract = self.client_contract_dal.get_client_contract_by_id(contract_id)
        context = build_client_context(contract)
        return self._render(contract.contract_template, context, ContractTemplate.Type.CLIENT)

    @staticmethod
    def _render(template: ContractTemplate, context: dict, kind: str) -> dict[str, Any]:
        content = resolve(template.content_markdown, context, kind=kind)
        unresolved = unresolved_placeholders(content)
        if unresolved:
            logger.info(f'Template {template.id} rendered with unresolved placeholders: {", ".join(unresolved)}')
        return {
            'template_id': template.id,
            'template_name': template.name,
            'content_markdown': content,
            'unresolved_placeholders': unresolved,
        }
