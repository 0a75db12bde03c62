"""
Test helpers shared by every app: an in-memory storage backend and an
authenticated staff API client.
"""

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.shared.container import get_container
from apps.shared.storage.base import AbstractStorageService

User = get_user_model()


class InMemoryStorageService(AbstractStorageService):
    """Storage backend keeping objects in a dict, keyed by (bucket, key)."""

    def __init__(self, fail_deletes: bool = False, fail_signing: bool = False):
        self.objects = {}
        self.fail_deletes = fail_deletes
        self.fail_signing = fail_signing
        self.signed = []

    @property
    def provider_name(self) -> str:
        return 'memory'

    def upload_file(self, bucket, key, fileobj, content_type=None):
        self.objects[(bucket, key)] = fileobj.read()
        return key

    def delete_file(self, bucket, key):
        if self.fail_deletes:
            return False
        self.objects.pop((bucket, key), None)
        return True

    def bulk_delete_files(self, bucket, keys):
        if self.fail_deletes:
            return [], list(keys)
        for key in keys:
            self.objects.pop((bucket, key), None)
        return list(keys), []

    def get_public_url(self, bucket, key):
        return f'https://storage.test/{bucket}/{key}'

    def generate_signed_url(self, bucket, key, expires_in=3600):
        if self.fail_signing:
            raise RuntimeError('signing backend down')
        self.signed.append((bucket, key, expires_in))
        return f'https://signed.test/{bucket}/{key}?expires={expires_in}'

    def file_exists(self, bucket, key):
        return (bucket, key) in self.objects

    def bucket_exists(self, bucket):
        return True

    def create_bucket(self, bucket, public=True):
        return True

    def keys(self, bucket):
        return sorted(key for stored_bucket, key in self.objects if stored_bucket == bucket)


class StorageOverrideMixin:
    """Route every service built by the container to an in-memory storage."""

    def setUp(self):
        super().setUp()
        self.storage = InMemoryStorageService()
        get_container().override_storage_service(lambda: self.storage)
        self.addCleanup(get_container().reset_to_defaults)


class StaffAPITestMixin(StorageOverrideMixin):
    """APIClient authenticated as a staff user."""

    def setUp(self):
        super().setUp()
        self.staff_user = User.objects.create_user(
            username='admin', email='admin@example.com', password='secret-pass-123', is_staff=True
        )
        self.client = APIClient()
        self.client.force_authenticate(user=self.staff_user)
