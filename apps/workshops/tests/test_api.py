from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.contracts.tests.factories import ContractTemplateFactory
from apps.shared.tests.utils import StaffAPITestMixin
from apps.workshops.models import Workshop
from apps.workshops.tests.factories import CompanyRegistrationFactory
from apps.workshops.tests.factories import WorkshopFactory
from apps.workshops.tests.factories import WorkshopGuidelinesFactory
from apps.workshops.tests.utils import WorkshopTestMixin

User = get_user_model()


class AuthenticationTest(TestCase):
    def test_anonymous_is_rejected(self):
        response = APIClient().get(reverse('workshops:workshop-list'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_non_staff_is_forbidden(self):
        client = APIClient()
        client.force_authenticate(user=User.objects.create_user(username='trainer', password='secret-pass-123'))

        response = client.get(reverse('workshops:workshop-list'))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class WorkshopAPITest(StaffAPITestMixin, WorkshopTestMixin, TestCase):
    def test_list(self):
        response = self.client.get(reverse('workshops:workshop-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['date'], self.workshop.date.isoformat())

    def test_create(self):
        response = self.client.post(reverse('workshops:workshop-create'), {'date': '2027-05-04'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['password'])
        self.assertTrue(Workshop.objects.filter(date='2027-05-04').exists())

    def test_create_on_taken_date_conflicts(self):
        response = self.client.post(
            reverse('workshops:workshop-create'), {'date': self.workshop.date.isoformat()}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error_code'], 'workshop_date_taken')

    def test_create_with_unknown_tool(self):
        response = self.client.post(
            reverse('workshops:workshop-create'),
            {'date': '2027-05-04', 'available_tools': {'teleportation': True}},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_date_locked(self):
        response = self.client.put(
            reverse('workshops:workshop-update', args=[self.workshop.id]), {'date': '2031-01-01'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_detail_not_found(self):
        response = self.client.get(reverse('workshops:workshop-detail', args=[999999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_returns_summary(self):
        with patch('apps.workshops.services.document_service.delete_storage_objects_task.delay'):
            response = self.client.delete(reverse('workshops:workshop-delete', args=[self.workshop.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['deleted']['trainers'], 2)

    def test_generate_password(self):
        response = self.client.get(reverse('workshops:workshop-generate-password'))
        self.assertRegex(response.data['password'], r'^[A-Z0-9]{8}$')


class WorkshopStatusAPITest(StaffAPITestMixin, WorkshopTestMixin, TestCase):
    def test_list_echoes_generation(self):
        response = self.client.get(reverse('workshops:workshop-status-list'), {'generation': '42'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['generation'], '42')
        entry = response.data['workshops'][0]
        self.assertEqual(entry['status']['unpaid_count'], 1)
        self.assertEqual(entry['status']['total_trainers'], 2)
        self.assertIsNone(entry['client_contract'])

    def test_detail(self):
        response = self.client.get(reverse('workshops:workshop-status', args=[self.workshop.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['status']['all_paid'])


class TrainerAPITest(StaffAPITestMixin, WorkshopTestMixin, TestCase):
    def test_list_filtered_by_workshop(self):
        WorkshopFactory()
        response = self.client.get(reverse('workshops:trainer-list'), {'workshop_date': self.workshop.date})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertIn('assignment', response.data[0])

    def test_create_with_unknown_workshop(self):
        response = self.client.post(
            reverse('workshops:trainer-create'), {'workshop_date': '1999-01-01'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_create(self):
        response = self.client.post(
            reverse('workshops:trainer-create'), {'workshop_date': self.workshop.date.isoformat()}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['trainer_code'].startswith('T-'))

    def test_update_locked_code(self):
        response = self.client.patch(
            reverse('workshops:trainer-update', args=[self.paid_trainer.id]), {'trainer_code': 'T-XX'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error_code'], 'trainer_locked')

    def test_toggle_code_sent(self):
        response = self.client.post(reverse('workshops:trainer-toggle-code-sent', args=[self.paid_trainer.id]))
        self.assertTrue(response.data['code_sent'])


class RegistrationAPITest(StaffAPITestMixin, WorkshopTestMixin, TestCase):
    def test_list_is_flattened_and_paginated(self):
        response = self.client.get(reverse('workshops:registration-list'), {'page_size': 1})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['registrations']), 1)
        self.assertEqual(response.data['pagination']['total_items'], 2)
        registration = response.data['registrations'][0]
        self.assertIn('trainer_code', registration)
        self.assertIn('contract_info', registration)
        self.assertIn('documents', registration)

    def test_toggle_paid(self):
        response = self.client.post(reverse('workshops:registration-toggle-paid', args=[self.paid_registration.id]))
        self.assertTrue(response.data['is_paid'])

    def test_contract_is_rendered(self):
        template = self.paid_assignment.contract_template
        template.content_markdown = '[NOM_ENTREPRISE] / [NUMERO_RCS] / [ADRESSE_SIEGE]'
        template.save()
        registration = CompanyRegistrationFactory(trainer=self.paid_trainer, company_address='')

        response = self.client.get(reverse('workshops:registration-contract', args=[registration.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['content_markdown'], 'Formations Durand / 812 345 678 / [ADRESSE_SIEGE]')
        self.assertEqual(response.data['unresolved_placeholders'], ['ADRESSE_SIEGE'])

    def test_contract_without_assignment(self):
        registration = CompanyRegistrationFactory()

        response = self.client.get(reverse('workshops:registration-contract', args=[registration.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error_code'], 'no_contract_assigned')

    def test_delete(self):
        response = self.client.delete(reverse('workshops:registration-delete', args=[self.paid_registration.id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)


class GuidelinesAPITest(StaffAPITestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.workshop = WorkshopFactory()

    def test_upsert_then_get_by_date(self):
        url = reverse('workshops:guidelines-upsert')
        payload = {'workshop_date': self.workshop.date.isoformat(), 'guidelines_markdown': '# Bienvenue'}

        self.assertEqual(self.client.post(url, payload, format='json').status_code, status.HTTP_201_CREATED)
        payload['guidelines_markdown'] = '# Bienvenue !'
        self.assertEqual(self.client.post(url, payload, format='json').status_code, status.HTTP_200_OK)

        response = self.client.get(reverse('workshops:guidelines-detail', args=[self.workshop.date]))
        self.assertEqual(response.data['guidelines_markdown'], '# Bienvenue !')

    def test_missing_guidelines(self):
        response = self.client.get(reverse('workshops:guidelines-detail', args=[self.workshop.date]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete(self):
        guidelines = WorkshopGuidelinesFactory(workshop=self.workshop)
        response = self.client.delete(reverse('workshops:guidelines-delete', args=[guidelines.id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)


class TemplateOnWorkshopTest(StaffAPITestMixin, TestCase):
    def test_workshop_with_template_cannot_move(self):
        template = ContractTemplateFactory()
        response = self.client.put(
            reverse('workshops:workshop-update', args=[Workshop.objects.get(date=template.workshop_id).id]),
            {'date': '2031-01-01'},
            format='json',
        )
        self.assertEqual(response.data['error_code'], 'workshop_date_locked')
