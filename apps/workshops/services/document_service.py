import logging

from django.conf import settings
from django.db import transaction

from apps.shared.storage.factory import get_bucket_name
from apps.shared.storage.factory import get_storage_service
from apps.shared.storage.images import extract_storage_path
from apps.shared.tasks import delete_storage_objects_task
from apps.workshops.models import VOLUNTEER_NO_MOTIVATION_PLACEHOLDER

logger = logging.getLogger(__name__)

TRAINER_DOCUMENTS_BUCKET = 'trainer_documents'


class RegistrationDocumentService:
    """
    Private documents uploaded with a registration (invoice or motivation
    letter, bank details). Links are short-lived signed URLs.
    """

    def __init__(self, storage=None):
        self.storage = storage or get_storage_service()
        self.bucket = get_bucket_name(TRAINER_DOCUMENTS_BUCKET)

    def document_path(self, value: str) -> str | None:
        """Key inside the documents bucket, None for the volunteer placeholder or an empty value."""
        if not value or VOLUNTEER_NO_MOTIVATION_PLACEHOLDER in value:
            return None
        return extract_storage_path(value, self.bucket) or None

    def signed_url(self, value: str) -> str | None:
        path = self.document_path(value)
        if path is None:
            return None
        try:
            return self.storage.generate_signed_url(
                self.bucket, path, expires_in=settings.STORAGE_SIGNED_URL_EXPIRATION
            )
        except Exception as e:
            logger.warning(f'Could not sign {self.bucket}/{path}: {e}')
            return None

    @staticmethod
    def motivation_letter_available(registration, is_volunteer: bool) -> bool:
        return bool(is_volunteer and registration.invoice_file_url and not registration.has_motivation_placeholder)

    def document_links(self, registration, is_volunteer: bool) -> dict:
        """
        Volunteers only upload a motivation letter (stored as the invoice);
        paid trainers upload an invoice and their bank details.
        """
        if is_volunteer:
            available = self.motivation_letter_available(registration, is_volunteer)
            return {
                'invoice_url': self.signed_url(registration.invoice_file_url) if available else None,
                'rib_url': None,
                'motivation_letter_available': available,
            }
        return {
            'invoice_url': self.signed_url(registration.invoice_file_url),
            'rib_url': self.signed_url(registration.rib_file_url),
            'motivation_letter_available': False,
        }

    def document_keys(self, registrations) -> list[str]:
        keys = []
        for registration in registrations:
            for value in (registration.invoice_file_url, registration.rib_file_url):
                path = self.document_path(value)
                if path:
                    keys.append(path)
        return keys

    def delete_documents(self, registration) -> int:
        """Remove the documents of one registration now; failures are logged, not raised."""
        failures = 0
        for path in self.document_keys([registration]):
            if not self.storage.delete_file(self.bucket, path):
                failures += 1
        if failures:
            logger.warning(f'{failures} document(s) of registration {registration.id} could not be deleted')
        return failures

    def queue_documents_cleanup(self, registrations) -> list[str]:
        """Schedule removal of the documents once the current transaction commits."""
        keys = self.document_keys(registrations)
        if keys:
            bucket = self.bucket
            transaction.on_commit(lambda: delete_storage_objects_task.delay(bucket, keys))
        return keys
