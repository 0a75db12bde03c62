from unittest.mock import Mock

from django.test import SimpleTestCase
from django.test import TestCase
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError

from apps.shared.decorators.database import handle_db_errors
from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError
from apps.shared.exceptions.api_handler import custom_exception_handler
from apps.workshops.exceptions import WorkshopNotFoundError
from apps.workshops.models import Workshop


def handler_context():
    request = Mock(method='GET', path='/api/workshops/1/')
    request.user = Mock(id=1)
    return {'request': request, 'view': Mock()}


class ExceptionHandlerTest(SimpleTestCase):
    def test_not_found_maps_to_404(self):
        response = custom_exception_handler(WorkshopNotFoundError(7), handler_context())

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error_code'], 'workshop_not_found')
        self.assertIn('timestamp', response.data)

    def test_business_rule_maps_to_409(self):
        exc = BusinessRuleViolation('Already assigned', error_code='trainer_already_assigned')
        response = custom_exception_handler(exc, handler_context())
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_invalid_business_rule_maps_to_400(self):
        exc = BusinessRuleViolation('Wrong type', error_code='invalid_template_type')
        response = custom_exception_handler(exc, handler_context())
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_service_unavailable_hides_details(self):
        exc = ServiceUnavailableError('connection refused', error_code='read_database_error')
        response = custom_exception_handler(exc, handler_context())

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['message'], 'A required service is temporarily unavailable')

    def test_validation_error_carries_field_errors(self):
        exc = ValidationError('Bad data', field_errors={'date': ['required']})
        response = custom_exception_handler(exc, handler_context())

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field_errors'], {'date': ['required']})

    def test_drf_exception_keeps_status(self):
        response = custom_exception_handler(DRFValidationError({'name': ['required']}), handler_context())

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['name'], ['required'])
        self.assertEqual(response.data['error_code'], 'invalid')

    def test_unhandled_exception_is_500(self):
        response = custom_exception_handler(RuntimeError('boom'), handler_context())
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


class FakeDAL:
    @handle_db_errors(operation_type='read', model_name='Workshop')
    def get_missing(self, workshop_id):
        return Workshop.objects.get(id=workshop_id)

    @handle_db_errors(operation_type='read', model_name='Workshop')
    def raise_business(self):
        raise WorkshopNotFoundError('2026-10-19')

    @handle_db_errors(operation_type='create', model_name='Workshop')
    def create_duplicate(self, workshop_date):
        Workshop.objects.create(date=workshop_date)
        return Workshop.objects.create(date=workshop_date)


class HandleDbErrorsTest(TestCase):
    def test_does_not_exist_becomes_not_found(self):
        with self.assertRaises(ResourceNotFoundError) as ctx:
            FakeDAL().get_missing(404)

        self.assertEqual(ctx.exception.error_code, 'workshop_not_found')
        self.assertEqual(ctx.exception.context['identifier'], '404')

    def test_business_exceptions_pass_through(self):
        with self.assertRaises(WorkshopNotFoundError):
            FakeDAL().raise_business()

    def test_integrity_error_becomes_validation_error(self):
        with self.assertRaises(ValidationError) as ctx:
            FakeDAL().create_duplicate('2026-10-19')
        self.assertEqual(ctx.exception.error_code, 'create_integrity_error')
