"""
Derived completion status of one workshop.

The status is recomputed from a fresh snapshot on every request and never
stored. Inputs are plain objects exposing the model attributes used below,
so the computation runs without the database.

Assignment lookups are per-trainer results: either an ``AssignmentInfo`` or
a ``JoinError``. A failed lookup never aborts the computation, the trainer
is treated as non-volunteer instead.
"""

from collections import defaultdict
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import asdict
from dataclasses import dataclass


@dataclass(frozen=True)
class AssignmentInfo:
    template_id: int
    is_volunteer: bool


@dataclass(frozen=True)
class JoinError:
    trainer_id: int
    reason: str
    detail: str = ''


AssignmentLookup = AssignmentInfo | JoinError


@dataclass(frozen=True)
class AssignmentRow:
    """One ContractAssignment joined with its template (``is_volunteer`` is None when the template is gone)."""

    trainer_id: int
    template_id: int | None
    is_volunteer: bool | None


@dataclass(frozen=True)
class WorkshopStatus:
    total_trainers: int
    registered_trainers: int
    all_claimed: bool
    unpaid_count: int
    all_paid: bool
    lookup_errors: tuple[JoinError, ...] = ()

    def as_dict(self) -> dict:
        data = asdict(self)
        data.pop('lookup_errors')
        return data


def collect_assignment_lookups(
    trainer_ids: Iterable[int], rows: Iterable[AssignmentRow]
) -> dict[int, AssignmentLookup]:
    """
    Build the per-trainer lookup results from batch-fetched assignment rows.

    Trainers without any row are absent from the result. A trainer holding
    more than one assignment is flagged instead of picking one arbitrarily.
    """
    rows_by_trainer = defaultdict(list)
    for row in rows:
        rows_by_trainer[row.trainer_id].append(row)

    lookups = {}
    for trainer_id in trainer_ids:
        trainer_rows = rows_by_trainer.get(trainer_id)
        if not trainer_rows:
            continue
        if len(trainer_rows) > 1:
            lookups[trainer_id] = JoinError(
                trainer_id,
                'multiple_assignments',
                f'{len(trainer_rows)} contract assignments for one trainer',
            )
            continue
        row = trainer_rows[0]
        if row.template_id is None or row.is_volunteer is None:
            lookups[trainer_id] = JoinError(trainer_id, 'template_missing', 'Assigned contract template not found')
            continue
        lookups[trainer_id] = AssignmentInfo(template_id=row.template_id, is_volunteer=row.is_volunteer)
    return lookups


def failed_lookups(trainer_ids: Iterable[int], reason: str, detail: str = '') -> dict[int, AssignmentLookup]:
    """Every trainer gets the same JoinError, used when the batch query itself failed."""
    return {trainer_id: JoinError(trainer_id, reason, detail) for trainer_id in trainer_ids}


def compute_workshop_status(
    trainers: Iterable,
    registrations: Iterable,
    assignments: Mapping[int, AssignmentLookup],
    client_contract=None,
) -> WorkshopStatus:
    """
    Args:
        trainers: WorkshopTrainer-like objects of one workshop
        registrations: TrainerRegistration-like objects of the same workshop
        assignments: Lookup result per trainer id (missing means no assignment)
        client_contract: The workshop's ClientContract, if any

    Abandoned trainers and their registrations are ignored everywhere.
    """
    active_trainers = [trainer for trainer in trainers if not trainer.is_abandoned]
    active_by_code = {trainer.trainer_code: trainer for trainer in active_trainers}
    active_registrations = [reg for reg in registrations if reg.trainer_code in active_by_code]

    unpaid_count = 0
    lookup_errors = []
    for registration in active_registrations:
        trainer = active_by_code[registration.trainer_code]
        lookup = assignments.get(trainer.id)

        if isinstance(lookup, JoinError):
            if lookup not in lookup_errors:
                lookup_errors.append(lookup)
            is_volunteer = False
        else:
            is_volunteer = lookup is not None and lookup.is_volunteer

        if not is_volunteer and not registration.is_paid:
            unpaid_count += 1

    client_paid = client_contract is None or client_contract.payment_received

    return WorkshopStatus(
        total_trainers=len(active_trainers),
        registered_trainers=len(active_registrations),
        all_claimed=all(trainer.is_claimed for trainer in active_trainers),
        unpaid_count=unpaid_count,
        all_paid=unpaid_count == 0 and bool(client_paid),
        lookup_errors=tuple(lookup_errors),
    )
