from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from rest_framework import status

from apps.contracts.models import ClientContract
from apps.contracts.templating import format_long_date
from apps.contracts.tests.factories import ClientContractFactory
from apps.contracts.tests.factories import ClientTemplateFactory
from apps.contracts.tests.factories import ContractTemplateFactory
from apps.shared.tests.utils import StaffAPITestMixin
from apps.workshops.tests.factories import WorkshopFactory
from apps.workshops.tests.factories import WorkshopTrainerFactory
from apps.workshops.tests.utils import WorkshopTestMixin


class TemplateAPITest(StaffAPITestMixin, WorkshopTestMixin, TestCase):
    def test_list(self):
        response = self.client.get(reverse('contracts:template-list'), {'workshop_date': self.workshop.date})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertIn('assignments', response.data[0])

    def test_create_volunteer_client_template(self):
        payload = {
            'workshop_date': self.workshop.date.isoformat(),
            'name': 'Contrat client',
            'type': 'client',
            'is_volunteer': True,
            'content_markdown': '[CLIENT_COMPANY_NAME]',
        }

        response = self.client.post(reverse('contracts:template-create'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create(self):
        payload = {
            'workshop_date': self.workshop.date.isoformat(),
            'name': 'Contrat formateur',
            'content_markdown': '[NOM_ENTREPRISE]',
        }

        response = self.client.post(reverse('contracts:template-create'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['type'], 'trainer')
        self.assertFalse(response.data['is_volunteer'])

    def test_clone(self):
        target = WorkshopFactory()
        template = self.paid_assignment.contract_template

        response = self.client.post(
            reverse('contracts:template-clone', args=[template.id]), {'workshop_date': target.date.isoformat()}
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['workshop_date'], target.date.isoformat())
        self.assertEqual(response.data['name'], template.name)

    def test_delete_in_use(self):
        contract = ClientContractFactory(workshop=self.workshop)

        response = self.client.delete(reverse('contracts:template-delete', args=[contract.contract_template_id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error_code'], 'template_in_use')

    def test_assign_and_unassign(self):
        template = self.paid_assignment.contract_template
        free = WorkshopTrainerFactory(workshop=self.workshop)

        available = self.client.get(reverse('contracts:template-available-trainers', args=[template.id]))
        self.assertEqual([trainer['id'] for trainer in available.data], [free.id])

        response = self.client.post(
            reverse('contracts:template-assign', args=[template.id]), {'trainer_ids': [free.id]}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.delete(reverse('contracts:assignment-delete', args=[response.data[0]['id']]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_assign_trainer_of_other_workshop(self):
        stranger = WorkshopTrainerFactory()

        response = self.client.post(
            reverse('contracts:template-assign', args=[self.paid_assignment.contract_template_id]),
            {'trainer_ids': [stranger.id]},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error_code'], 'invalid_trainer_workshop')

    def test_assign_duplicate_ids(self):
        response = self.client.post(
            reverse('contracts:template-assign', args=[self.paid_assignment.contract_template_id]),
            {'trainer_ids': [1, 1]},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unassign_accepted_contract(self):
        self.paid_registration.contract_accepted = True
        self.paid_registration.save()

        response = self.client.delete(reverse('contracts:assignment-delete', args=[self.paid_assignment.id]))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)


class ClientContractAPITest(StaffAPITestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.workshop = WorkshopFactory()
        self.template = ClientTemplateFactory(workshop=self.workshop)

    def test_create(self):
        payload = {
            'workshop_date': self.workshop.date.isoformat(),
            'contract_template_id': self.template.id,
            'client_company_name': 'Acme Formation',
            'client_representative_name': 'Jean Martin',
            'client_address': '3 place Bellecour, 69002 Lyon',
            'client_email': 'jean.martin@acme.fr',
            'client_company_registration': 'siret 123 456 789 00012',
        }

        response = self.client.post(reverse('contracts:client-contract-create'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['client_company_registration'], 'SIRET 12345678900012')
        self.assertEqual(response.data['contract_template']['id'], self.template.id)

        response = self.client.post(reverse('contracts:client-contract-create'), payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_create_with_trainer_template(self):
        payload = {
            'workshop_date': self.workshop.date.isoformat(),
            'contract_template_id': ContractTemplateFactory(workshop=self.workshop).id,
            'client_company_name': 'Acme Formation',
            'client_representative_name': 'Jean Martin',
            'client_address': '3 place Bellecour, 69002 Lyon',
            'client_email': 'jean.martin@acme.fr',
        }

        response = self.client.post(reverse('contracts:client-contract-create'), payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error_code'], 'invalid_template_type')

    def test_list(self):
        ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        response = self.client.get(reverse('contracts:client-contract-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['client_contracts']), 1)
        self.assertEqual(response.data['pagination']['total_items'], 1)

    def test_available_dates(self):
        ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        free = WorkshopFactory()

        response = self.client.get(reverse('contracts:client-contract-available-dates'))

        self.assertEqual(response.data['dates'], [free.date.isoformat()])

    def test_toggle_payment(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        response = self.client.post(reverse('contracts:client-contract-toggle-payment', args=[contract.id]))

        self.assertTrue(response.data['payment_received'])
        contract.refresh_from_db()
        self.assertTrue(contract.payment_received)

    @patch('apps.contracts.services.client_contract_service.send_signature_code_email_task.delay')
    def test_send_code(self, mock_delay):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(reverse('contracts:client-contract-send-code', args=[contract.id]))

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertTrue(response.data['code_sent'])
        mock_delay.assert_called_once()

    def test_render(self):
        contract = ClientContractFactory(
            workshop=self.workshop,
            contract_template=self.template,
            client_company_registration='',
        )

        response = self.client.get(reverse('contracts:client-contract-render', args=[contract.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['content_markdown'].startswith('Client : Acme Formation ()'))
        self.assertEqual(response.data['unresolved_placeholders'], [])

    def test_mark_signed_and_unsigned(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)
        url = reverse('contracts:client-contract-update', args=[contract.id])

        response = self.client.put(url, {'is_signed': True}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['is_signed'])
        self.assertIsNotNone(response.data['signed_at'])
        contract.refresh_from_db()
        self.assertTrue(contract.is_signed)
        self.assertIsNotNone(contract.signed_at)

        response = self.client.patch(url, {'is_signed': False}, format='json')

        self.assertFalse(response.data['is_signed'])
        self.assertIsNone(response.data['signed_at'])
        contract.refresh_from_db()
        self.assertIsNone(contract.signed_at)

    def test_render_signed_contract(self):
        template = ClientTemplateFactory(workshop=self.workshop, content_markdown='Statut : [SIGNATURE_STATUS]')
        contract = ClientContractFactory(workshop=self.workshop, contract_template=template)
        render_url = reverse('contracts:client-contract-render', args=[contract.id])

        response = self.client.get(render_url)
        self.assertEqual(response.data['content_markdown'], 'Statut : En attente de signature')

        update_url = reverse('contracts:client-contract-update', args=[contract.id])
        self.client.put(update_url, {'is_signed': True}, format='json')
        contract.refresh_from_db()
        response = self.client.get(render_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        expected = f'Statut : Signé le {format_long_date(contract.signed_at)}'
        self.assertEqual(response.data['content_markdown'], expected)

    def test_regenerate_code(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template, code_sent=True)
        previous_code = contract.signature_code

        response = self.client.post(reverse('contracts:client-contract-regenerate-code', args=[contract.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotEqual(response.data['signature_code'], previous_code)
        self.assertFalse(response.data['code_sent'])
        contract.refresh_from_db()
        self.assertEqual(contract.signature_code, response.data['signature_code'])

    def test_delete(self):
        contract = ClientContractFactory(workshop=self.workshop, contract_template=self.template)

        response = self.client.delete(reverse('contracts:client-contract-delete', args=[contract.id]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(ClientContract.objects.exists())

    def test_unknown_contract(self):
        response = self.client.get(reverse('contracts:client-contract-detail', args=[999999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error_code'], 'client_contract_not_found')
