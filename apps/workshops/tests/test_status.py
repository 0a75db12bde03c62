from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.workshops.status import AssignmentInfo
from apps.workshops.status import AssignmentRow
from apps.workshops.status import JoinError
from apps.workshops.status import collect_assignment_lookups
from apps.workshops.status import compute_workshop_status
from apps.workshops.status import failed_lookups


def trainer(trainer_id, code, claimed=True, abandoned=False):
    return SimpleNamespace(id=trainer_id, trainer_code=code, is_claimed=claimed, is_abandoned=abandoned)


def registration(code, paid=False):
    return SimpleNamespace(trainer_code=code, is_paid=paid)


PAID_TEMPLATE = AssignmentInfo(template_id=1, is_volunteer=False)
VOLUNTEER_TEMPLATE = AssignmentInfo(template_id=2, is_volunteer=True)


class ComputeWorkshopStatusTest(SimpleTestCase):
    def test_empty_workshop(self):
        status = compute_workshop_status([], [], {})

        self.assertEqual(status.total_trainers, 0)
        self.assertEqual(status.registered_trainers, 0)
        self.assertTrue(status.all_claimed)
        self.assertTrue(status.all_paid)

    def test_counts_unpaid_non_volunteers(self):
        trainers = [trainer(1, 'T-A'), trainer(2, 'T-B'), trainer(3, 'T-C', claimed=False)]
        registrations = [registration('T-A'), registration('T-B', paid=True)]

        status = compute_workshop_status(trainers, registrations, {1: PAID_TEMPLATE, 2: PAID_TEMPLATE})

        self.assertEqual(status.total_trainers, 3)
        self.assertEqual(status.registered_trainers, 2)
        self.assertFalse(status.all_claimed)
        self.assertEqual(status.unpaid_count, 1)
        self.assertFalse(status.all_paid)

    def test_volunteer_and_unpaid_registrations(self):
        trainers = [trainer(1, 'T-A'), trainer(2, 'T-B'), trainer(3, 'T-C', claimed=False)]
        registrations = [registration('T-A'), registration('T-B')]

        status = compute_workshop_status(trainers, registrations, {1: VOLUNTEER_TEMPLATE, 2: PAID_TEMPLATE})

        self.assertEqual(
            status.as_dict(),
            {
                'total_trainers': 3,
                'registered_trainers': 2,
                'all_claimed': False,
                'unpaid_count': 1,
                'all_paid': False,
            },
        )

    def test_paying_one_registration_drops_unpaid_count_by_one(self):
        trainers = [trainer(1, 'T-A'), trainer(2, 'T-B'), trainer(3, 'T-C')]
        registrations = [registration('T-A'), registration('T-B'), registration('T-C')]
        assignments = {1: PAID_TEMPLATE, 2: PAID_TEMPLATE, 3: VOLUNTEER_TEMPLATE}

        before = compute_workshop_status(trainers, registrations, assignments)
        registrations[1].is_paid = True
        after = compute_workshop_status(trainers, registrations, assignments)

        self.assertEqual(before.unpaid_count, 2)
        self.assertEqual(after.unpaid_count, before.unpaid_count - 1)
        self.assertEqual(after.registered_trainers, before.registered_trainers)

    def test_volunteers_never_count_as_unpaid(self):
        status = compute_workshop_status([trainer(1, 'T-A')], [registration('T-A')], {1: VOLUNTEER_TEMPLATE})

        self.assertEqual(status.unpaid_count, 0)
        self.assertTrue(status.all_paid)

    def test_trainer_without_assignment_is_not_volunteer(self):
        status = compute_workshop_status([trainer(1, 'T-A')], [registration('T-A')], {})
        self.assertEqual(status.unpaid_count, 1)

    def test_abandoned_trainers_are_ignored(self):
        trainers = [trainer(1, 'T-A'), trainer(2, 'T-B', claimed=False, abandoned=True)]
        registrations = [registration('T-A', paid=True), registration('T-B')]

        status = compute_workshop_status(trainers, registrations, {})

        self.assertEqual(status.total_trainers, 1)
        self.assertEqual(status.registered_trainers, 1)
        self.assertTrue(status.all_claimed)
        self.assertTrue(status.all_paid)

    def test_unpaid_client_blocks_all_paid(self):
        unpaid_client = SimpleNamespace(payment_received=False)
        paid_client = SimpleNamespace(payment_received=True)

        self.assertFalse(compute_workshop_status([], [], {}, unpaid_client).all_paid)
        self.assertTrue(compute_workshop_status([], [], {}, paid_client).all_paid)

    def test_lookup_error_counts_as_non_volunteer(self):
        error = JoinError(1, 'query_failed', 'timeout')
        status = compute_workshop_status([trainer(1, 'T-A')], [registration('T-A')], {1: error})

        self.assertEqual(status.unpaid_count, 1)
        self.assertEqual(status.lookup_errors, (error,))
        self.assertNotIn('lookup_errors', status.as_dict())

    def test_registered_never_exceeds_total(self):
        registrations = [registration('T-A'), registration('T-UNKNOWN')]
        status = compute_workshop_status([trainer(1, 'T-A')], registrations, {})

        self.assertEqual(status.registered_trainers, 1)
        self.assertLessEqual(status.unpaid_count, status.registered_trainers)


class CollectAssignmentLookupsTest(SimpleTestCase):
    def test_single_assignment(self):
        lookups = collect_assignment_lookups([1, 2], [AssignmentRow(1, 10, True)])

        self.assertEqual(lookups, {1: AssignmentInfo(template_id=10, is_volunteer=True)})

    def test_multiple_assignments_are_flagged(self):
        rows = [AssignmentRow(1, 10, True), AssignmentRow(1, 11, False)]

        lookup = collect_assignment_lookups([1], rows)[1]

        self.assertIsInstance(lookup, JoinError)
        self.assertEqual(lookup.reason, 'multiple_assignments')

    def test_missing_template_is_flagged(self):
        lookup = collect_assignment_lookups([1], [AssignmentRow(1, None, None)])[1]
        self.assertEqual(lookup.reason, 'template_missing')

    def test_failed_lookups(self):
        lookups = failed_lookups([1, 2], 'query_failed', 'db down')

        self.assertEqual(set(lookups), {1, 2})
        self.assertTrue(all(isinstance(lookup, JoinError) for lookup in lookups.values()))
