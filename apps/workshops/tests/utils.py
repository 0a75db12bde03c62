"""
Helpers for the workshops tests.
"""

from apps.contracts.tests.factories import ContractAssignmentFactory
from apps.contracts.tests.factories import VolunteerTemplateFactory
from apps.workshops.services import RegistrationDocumentService
from apps.workshops.tests.factories import TrainerRegistrationFactory
from apps.workshops.tests.factories import WorkshopFactory
from apps.workshops.tests.factories import WorkshopTrainerFactory


def document_service(storage):
    return RegistrationDocumentService(storage=storage)


class WorkshopTestMixin:
    """A workshop with one paid trainer (registered, unpaid) and one volunteer (registered)."""

    def setUp(self):
        super().setUp()
        self.workshop = WorkshopFactory()

        self.paid_trainer = WorkshopTrainerFactory(workshop=self.workshop, is_claimed=True)
        self.paid_assignment = ContractAssignmentFactory(trainer=self.paid_trainer)
        self.paid_registration = TrainerRegistrationFactory(trainer=self.paid_trainer)

        self.volunteer = WorkshopTrainerFactory(workshop=self.workshop, is_claimed=True)
        self.volunteer_template = VolunteerTemplateFactory(workshop=self.workshop)
        ContractAssignmentFactory(trainer=self.volunteer, contract_template=self.volunteer_template)
        self.volunteer_registration = TrainerRegistrationFactory(
            trainer=self.volunteer,
            invoice_file_url='letters/motivation.pdf',
            rib_file_url='',
        )
