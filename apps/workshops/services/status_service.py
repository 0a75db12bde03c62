import logging
from collections import defaultdict
from typing import Any

from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.client_contract_dal import ClientContractDAL
from apps.shared.exceptions import ServiceUnavailableError
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.dal.workshop_dal import WorkshopDAL
from apps.workshops.models import Workshop
from apps.workshops.status import AssignmentLookup
from apps.workshops.status import collect_assignment_lookups
from apps.workshops.status import compute_workshop_status
from apps.workshops.status import failed_lookups

logger = logging.getLogger(__name__)


class WorkshopStatusService:
    """
    Completion status of workshops, recomputed from the database on every call.

    Each call reads one snapshot with a fixed number of batch queries
    (workshops, trainers, registrations, assignments, client contracts),
    whatever the number of trainers.
    """

    def __init__(
        self,
        workshop_dal=None,
        trainer_dal=None,
        registration_dal=None,
        assignment_dal=None,
        client_contract_dal=None,
    ):
        self.workshop_dal = workshop_dal or WorkshopDAL()
        self.trainer_dal = trainer_dal or WorkshopTrainerDAL()
        self.registration_dal = registration_dal or TrainerRegistrationDAL()
        self.assignment_dal = assignment_dal or ContractAssignmentDAL()
        self.client_contract_dal = client_contract_dal or ClientContractDAL()

    def list_workshops_with_status(self) -> list[dict[str, Any]]:
        """Every workshop, newest date first, with its client contract and status."""
        workshops = list(self.workshop_dal.get_workshops_queryset())
        return self._with_status(workshops)

    def get_workshop_status(self, workshop_id: int) -> dict[str, Any]:
        workshop = self.workshop_dal.get_workshop_by_id(workshop_id)
        return self._with_status([workshop])[0]

    def _with_status(self, workshops: list[Workshop]) -> list[dict[str, Any]]:
        if not workshops:
            return []
        dates = [workshop.date for workshop in workshops]

        trainers_by_date = defaultdict(list)
        for trainer in self.trainer_dal.get_trainers_by_dates(dates):
            trainers_by_date[trainer.workshop_id].append(trainer)

        registrations_by_date = defaultdict(list)
        for registration in self.registration_dal.get_registrations_by_dates(dates):
            registrations_by_date[registration.workshop_id].append(registration)

        client_contracts = self.client_contract_dal.get_client_contracts_by_date(dates)
        trainer_ids = [trainer.id for trainers in trainers_by_date.values() for trainer in trainers]
        lookups = self._assignment_lookups(trainer_ids)

        items = []
        for workshop in workshops:
            client_contract = client_contracts.get(workshop.date)
            status = compute_workshop_status(
                trainers_by_date[workshop.date],
                registrations_by_date[workshop.date],
                lookups,
                client_contract,
            )
            if status.lookup_errors:
                logger.warning(
                    f'Workshop {workshop.date}: {len(status.lookup_errors)} assignment lookup(s) failed, '
                    f'counted as non-volunteer: {[error.reason for error in status.lookup_errors]}'
                )
            items.append({'workshop': workshop, 'client_contract': client_contract, 'status': status})
        return items

    def _assignment_lookups(self, trainer_ids: list[int]) -> dict[int, AssignmentLookup]:
        if not trainer_ids:
            return {}
        try:
            rows = self.assignment_dal.get_assignment_rows(trainer_ids)
        except ServiceUnavailableError as e:
            logger.warning(f'Assignment lookup failed for {len(trainer_ids)} trainers: {e}')
            return failed_lookups(trainer_ids, 'query_failed', str(e))
        return collect_assignment_lookups(trainer_ids, rows)
