from collections import defaultdict

from apps.contracts.exceptions import AssignmentNotFoundError
from apps.contracts.models import ContractAssignment
from apps.contracts.models import ContractTemplate
from apps.shared.decorators.database import handle_db_errors
from apps.workshops.models import WorkshopTrainer
from apps.workshops.status import AssignmentRow


class ContractAssignmentDAL:
    """Data Access Layer for ContractAssignment model operations only"""

    @handle_db_errors(operation_type='create', model_name='ContractAssignment')
    def create_assignment(self, trainer: WorkshopTrainer, template: ContractTemplate) -> ContractAssignment:
        return ContractAssignment.objects.create(trainer=trainer, contract_template=template)

    @handle_db_errors(operation_type='read', model_name='ContractAssignment')
    def get_assignment_by_id(self, assignment_id: int) -> ContractAssignment:
        try:
            return ContractAssignment.objects.select_related('trainer', 'contract_template').get(id=assignment_id)
        except ContractAssignment.DoesNotExist:
            raise AssignmentNotFoundError(assignment_identifier=assignment_id)

    def get_assignments_for_trainer(self, trainer_id: int) -> list[ContractAssignment]:
        return list(ContractAssignment.objects.filter(trainer_id=trainer_id).select_related('contract_template'))

    def trainer_has_assignment(self, trainer_id: int) -> bool:
        return ContractAssignment.objects.filter(trainer_id=trainer_id).exists()

    def get_assignments_for_template(self, template: ContractTemplate) -> list[ContractAssignment]:
        return list(
            ContractAssignment.objects.filter(contract_template=template)
            .select_related('trainer')
            .order_by('trainer__trainer_code')
        )

    def get_assignments_for_templates(self, template_ids: list[int]) -> dict[int, list[ContractAssignment]]:
        grouped = defaultdict(list)
        queryset = (
            ContractAssignment.objects.filter(contract_template_id__in=template_ids)
            .select_related('trainer')
            .order_by('trainer__trainer_code')
        )
        for assignment in queryset:
            grouped[assignment.contract_template_id].append(assignment)
        return grouped

    def get_assignments_by_trainer(self, trainer_ids: list[int]) -> dict[int, list[ContractAssignment]]:
        grouped = defaultdict(list)
        queryset = ContractAssignment.objects.filter(trainer_id__in=trainer_ids).select_related('contract_template')
        for assignment in queryset:
            grouped[assignment.trainer_id].append(assignment)
        return grouped

    @handle_db_errors(operation_type='read', model_name='ContractAssignment')
    def get_assignment_rows(self, trainer_ids: list[int]) -> list[AssignmentRow]:
        """One batch query for the assignments of many trainers, joined with their templates."""
        rows = ContractAssignment.objects.filter(trainer_id__in=trainer_ids).values_list(
            'trainer_id', 'contract_template_id', 'contract_template__is_volunteer'
        )
        return [AssignmentRow(trainer_id, template_id, is_volunteer) for trainer_id, template_id, is_volunteer in rows]

    @handle_db_errors(operation_type='delete', model_name='ContractAssignment')
    def delete_assignment(self, assignment: ContractAssignment) -> bool:
        assignment.delete()
        return True

    @handle_db_errors(operation_type='delete', model_name='ContractAssignment')
    def delete_assignments_for_workshop(self, workshop_date) -> int:
        deleted, _ = ContractAssignment.objects.filter(trainer__workshop_id=workshop_date).delete()
        return deleted
