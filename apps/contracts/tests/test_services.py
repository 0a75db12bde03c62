from unittest.mock import patch

from django.test import TestCase

from apps.contracts.exceptions import AssignmentLockedError
from apps.contracts.exceptions import ClientContractExistsError
from apps.contracts.exceptions import InvalidTemplateTypeError
from apps.contracts.exceptions import NoContractAssignedError
from apps.contracts.exceptions import TemplateInUseError
from apps.contracts.exceptions import TrainerAlreadyAssignedError
from apps.contracts.exceptions import TrainerWorkshopMismatchError
from apps.contracts.models import ContractAssignment
from apps.contracts.models import ContractTemplate
from apps.contracts.services import ClientContractService
from apps.contracts.services import ContractAssignmentService
from apps.contracts.services import ContractRenderingService
from apps.contracts.services import ContractTemplateService
from apps.contracts.templating import format_long_date
from apps.contracts.tests.factories import ClientContractFactory
from apps.contracts.tests.factories import ClientTemplateFactory
from apps.contracts.tests.factories import ContractTemplateFactory
from apps.workshops.exceptions import WorkshopNotFoundError
from apps.workshops.tests.factories import CompanyRegistrationFactory
from apps.workshops.tests.factories import TrainerRegistrationFactory
from apps.workshops.tests.factories import WorkshopFactory
from apps.workshops.tests.factories import WorkshopTrainerFactory
from apps.workshops.tests.utils import WorkshopTestMixin


class ContractTemplateServiceTest(WorkshopTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.service = ContractTemplateService()

    def test_list_includes_assignments_with_acceptance(self):
        self.paid_registration.contract_accepted = True
        self.paid_registration.save()

        items = self.service.list_templates(workshop_date=self.workshop.date)

        by_id = {item['template'].id: item for item in items}
        entries = by_id[self.paid_assignment.contract_template_id]['assignments']
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]['trainer_code'], self.paid_trainer.trainer_code)
        self.assertTrue(entries[0]['contract_accepted'])

    def test_list_filters_by_type(self):
        ClientTemplateFactory(workshop=self.workshop)

        items = self.service.list_templates(template_type=ContractTemplate.Type.CLIENT)

        self.assertEqual([item['template'].type for item in items], [ContractTemplate.Type.CLIENT])
        self.assertEqual(items[0]['assignments'], [])

    def test_create_on_unknown_workshop(self):
        with self.assertRaises(WorkshopNotFoundError):
            self.service.create_template({'workshop_date': '1999-01-01', 'name': 'x', 'content_markdown': 'x'})

    def test_create(self):
        template = self.service.create_template(
            {
                'workshop_date': self.workshop.date,
                'name': 'Contrat standard',
                'type': ContractTemplate.Type.TRAINER,
                'is_volunteer': False,
                'content_markdown': '[NOM_ENTREPRISE]',
            }
        )
        self.assertEqual(template.workshop_id, self.workshop.date)

    def test_clone_defaults_to_source_fields(self):
        target = WorkshopFactory()
        source = self.paid_assignment.contract_template

        clone = self.service.clone_template(source.id, {'workshop_date': target.date, 'name': 'Copie'})

        self.assertNotEqual(clone.id, source.id)
        self.assertEqual(clone.workshop_id, target.date)
        self.assertEqual(clone.name, 'Copie')
        self.assertEqual(clone.content_markdown, source.content_markdown)
        self.assertEqual(clone.assignments.count(), 0)

    def test_rename_of_assigned_template(self):
        template = self.service.update_template(self.paid_assignment.contract_template_id, {'name': 'Renommé'})
        self.assertEqual(template.name, 'Renommé')

    def test_assigned_template_cannot_move(self):
        with self.assertRaises(TemplateInUseError):
            self.service.update_template(
                self.paid_assignment.contract_template_id, {'workshop_date': WorkshopFactory().date}
            )

    def test_client_template_in_use_cannot_be_retyped(self):
        contract = ClientContractFactory(workshop=self.workshop)

        with self.assertRaises(TemplateInUseError):
            self.service.update_template(contract.contract_template_id, {'type': ContractTemplate.Type.TRAINER})

    def test_delete_removes_assignments(self):
        template_id = self.paid_assignment.contract_template_id

        self.service.delete_template(template_id)

        self.assertFalse(ContractAssignment.objects.filter(contract_template_id=template_id).exists())

    def test_delete_refused_while_client_contract_uses_it(self):
        contract = ClientContractFactory(workshop=self.workshop)

        with self.assertRaises(TemplateInUseError):
            self.service.delete_template(contract.contract_template_id)


class ContractAssignmentServiceTest(WorkshopTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.service = ContractAssignmentService()
        self.template = self.paid_assignment.contract_template

    def test_available_trainers_excludes_assigned(self):
        free = WorkshopTrainerFactory(workshop=self.workshop)
        self.assertEqual(self.service.available_trainers(self.template.id), [free])

    def test_assign(self):
        free = WorkshopTrainerFactory(workshop=self.workshop)

        assignments = self.service.assign(self.template.id, [free.id])

        self.assertEqual(assignments[0].trainer, free)
        self.assertEqual(len(self.service.list_assignments(self.template.id)), 2)

    def test_assign_trainer_of_other_workshop(self):
        stranger = WorkshopTrainerFactory()
        with self.assertRaises(TrainerWorkshopMismatchError):
            self.service.assign(self.template.id, [stranger.id])

    def test_assign_already_assigned_trainer(self):
        free = WorkshopTrainerFactory(workshop=self.workshop)

        with self.assertRaises(TrainerAlreadyAssignedError):
            self.service.assign(self.template.id, [free.id, self.volunteer.id])

        # whole batch rolled back
        self.assertFalse(ContractAssignment.objects.filter(trainer=free).exists())

    def test_assign_to_client_template(self):
        template = ClientTemplateFactory(workshop=self.workshop)
        with self.assertRaises(InvalidTemplateTypeError):
            self.service.assign(template.id, [self.paid_trainer.id])

    def test_unassign(self):
        self.assertTrue(self.service.unassign(self.paid_assignment.id))
        self.assertFalse(ContractAssignment.objects.filter(id=self.paid_assignment.id).exists())

    def test_unassign_after_acceptance_is_refused(self):
        self.paid_registration.contract_accepted = True
        self.paid_registration.save()

        with self.assertRaises(AssignmentLockedError):
            self.service.unassign(self.paid_assignment.id)


class ClientContractServiceTest(TestCase):
    def setUp(self):
        self.service = ClientContractService()
        self.workshop = WorkshopFactory()
        self.template = ClientTemplateFactory(workshop=self.workshop)

    def payload(self, **overrides):
        data = {
            'workshop_date': self.workshop.date,
            'contract_template_id': self.template.id,
            'client_company_name': 'Acme Formation',
            'client_representative_name': 'Jean Martin',
            'client_address': '3 place Bellecour, 69002 Lyon',
            'client_email': 'jean.martin@acme.fr',
            'client_company_registration': '123 456 789 00012',
        }
        data.update(overrides)
        return data

    def test_create_formats_registration_number(self):
        contract = self.service.create_client_contract(self.payload())

        self.assertEqual(contract.client_company_registration, 'SIRET 12345678900012')
        self.assertTrue(contract.signature_code.startswith('CLIENT-'))
        self.assertFalse(contract.code_sent)

    def test_create_with_nda(self):
        contract = self.service.create_client_contract(self.payload(client_company_registration='11 75 AB 123'))
        self.assertEqual(contract.client_company_registration, 'NDA 11 75 AB 123')

    def test_second_contract_for_workshop(self):
        self.service.create_client_contract(self.payload())
        with self.assertRaises(ClientContractExistsError):
            self.service.create_client_contract(self.payload())

    def test_create_with_trainer_template(self):
        trainer_template = ContractTemplateFactory(workshop=self.workshop)
        with self.assertRaises(InvalidTemplateTypeError):
            self.service.create_client_contract(self.payload(contract_template_id=trainer_template.id))

    def test_move_to_contracted_date(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        other = ClientContractFactory()

        with self.assertRaises(ClientContractExistsError):
            self.service.update_client_contract(contract.id, {'workshop_date': other.workshop_id})

    def test_signing_stamps_signed_at(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        signed = self.service.update_client_contract(contract.id, {'is_signed': True})
        self.assertTrue(signed.is_signed)
        self.assertIsNotNone(signed.signed_at)

        signed_at = signed.signed_at
        again = self.service.update_client_contract(contract.id, {'is_signed': True, 'client_company_name': 'Acme'})
        self.assertEqual(again.signed_at, signed_at)

        unsigned = self.service.update_client_contract(contract.id, {'is_signed': False})
        self.assertFalse(unsigned.is_signed)
        self.assertIsNone(unsigned.signed_at)

    def test_update_without_is_signed_keeps_signature(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        signed_at = self.service.update_client_contract(contract.id, {'is_signed': True}).signed_at

        updated = self.service.update_client_contract(contract.id, {'client_company_name': 'Acme'})

        self.assertTrue(updated.is_signed)
        self.assertEqual(updated.signed_at, signed_at)

    def test_regenerate_signature_code(self):
        contract = ClientContractFactory(
            workshop=self.workshop, contract_template=self.template, code_sent=True, signature_code='CLIENT-OLD00000'
        )

        updated = self.service.regenerate_signature_code(contract.id)

        self.assertNotEqual(updated.signature_code, 'CLIENT-OLD00000')
        self.assertRegex(updated.signature_code, r'^CLIENT-[A-Z0-9]{8}$')
        self.assertFalse(updated.code_sent)

    def test_regenerate_skips_codes_in_use(self):
        contract = ClientContractFactory(
            workshop=self.workshop, contract_template=self.template, signature_code='CLIENT-AAAAAAAA'
        )
        ClientContractFactory(signature_code='CLIENT-BBBBBBBB')

        with patch(
            'apps.contracts.services.client_contract_service.generate_signature_code',
            side_effect=['CLIENT-AAAAAAAA', 'CLIENT-BBBBBBBB', 'CLIENT-CCCCCCCC'],
        ):
            updated = self.service.regenerate_signature_code(contract.id)

        self.assertEqual(updated.signature_code, 'CLIENT-CCCCCCCC')

    def test_available_dates(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        free = WorkshopFactory()

        self.assertEqual(self.service.available_workshop_dates(), [free.date])
        self.assertCountEqual(
            self.service.available_workshop_dates(exclude_contract_id=contract.id), [free.date, self.workshop.date]
        )

    def test_toggle_payment_received(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        self.assertTrue(self.service.toggle_payment_received(contract.id).payment_received)
        self.assertFalse(self.service.toggle_payment_received(contract.id).payment_received)

    @patch('apps.contracts.services.client_contract_service.send_signature_code_email_task.delay')
    def test_send_signature_code(self, mock_delay):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        with self.captureOnCommitCallbacks(execute=True):
            updated = self.service.send_signature_code(contract.id)

        self.assertTrue(updated.code_sent)
        mock_delay.assert_called_once_with(
            contract.client_email,
            contract.client_representative_name,
            contract.signature_code,
            format_long_date(self.workshop.date),
        )

    def test_list_is_paginated(self):
        ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        ClientContractFactory()

        page = self.service.list_client_contracts(page=1, page_size=1)

        self.assertEqual(len(page['items']), 1)
        self.assertEqual(page['meta']['total_items'], 2)


class ContractRenderingServiceTest(TestCase):
    def setUp(self):
        self.service = ContractRenderingService()

    def test_trainer_contract(self):
        registration = CompanyRegistrationFactory()
        template = ContractTemplateFactory(workshop=registration.trainer.workshop)
        ContractAssignment.objects.create(trainer=registration.trainer, contract_template=template)

        rendered = self.service.render_registration_contract(registration.id)

        self.assertEqual(rendered['template_id'], template.id)
        self.assertTrue(rendered['content_markdown'].startswith('Entre Formations Durand, représentée par Claire Durand'))
        self.assertEqual(rendered['unresolved_placeholders'], [])

    def test_missing_company_fields_stay_visible(self):
        registration = TrainerRegistrationFactory()
        template = ContractTemplateFactory(workshop=registration.trainer.workshop)
        ContractAssignment.objects.create(trainer=registration.trainer, contract_template=template)

        rendered = self.service.render_registration_contract(registration.id)

        self.assertIn('[NOM_ENTREPRISE]', rendered['content_markdown'])
        self.assertEqual(rendered['unresolved_placeholders'], ['NOM_ENTREPRISE', 'NOM_REPRESENTANT'])

    def test_trainer_without_assignment(self):
        registration = TrainerRegistrationFactory()
        with self.assertRaises(NoContractAssignedError):
            self.service.render_registration_contract(registration.id)

    def test_client_contract(self):
        contract = ClientContractFactory()

        rendered = self.service.render_client_contract(contract.id)

        expected_date = format_long_date(contract.workshop_date)
        self.assertEqual(
            rendered['content_markdown'],
            f'Client : Acme Formation (SIRET 12345678900012), atelier du {expected_date}.',
        )

    def test_trainer_tokens_untouched_in_client_contract(self):
        contract = ClientContractFactory(contract_template__content_markdown='[CLIENT_EMAIL] [NOM_ENTREPRISE]')

        rendered = self.service.render_client_contract(contract.id)

        self.assertEqual(rendered['content_markdown'], f'{contract.client_email} [NOM_ENTREPRISE]')
        self.assertEqual(rendered['unresolved_placeholders'], ['NOM_ENTREPRISE'])
