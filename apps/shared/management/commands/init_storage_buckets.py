from django.conf import settings
from django.core.management import BaseCommand

from apps.shared.storage.factory import get_storage_service


class Command(BaseCommand):
    help = 'Create every configured storage bucket that does not exist yet'

    def handle(self, *args, **options):  # noqa: ARG002
        storage = get_storage_service()
        private_aliases = set(getattr(settings, 'STORAGE_PRIVATE_BUCKETS', []))

        results = []
        for alias, bucket in settings.STORAGE_BUCKETS.items():
            try:
                if storage.bucket_exists(bucket):
                    results.append((bucket, 'exists'))
                    continue
                created = storage.create_bucket(bucket, public=alias not in private_aliases)
                results.append((bucket, 'created' if created else 'failed'))
            except Exception as e:
                self.stderr.write(f'{bucket}: {e}')
                results.append((bucket, 'failed'))

        for bucket, status in results:
            style = self.style.ERROR if status == 'failed' else self.style.SUCCESS
            self.stdout.write(style(f'{bucket}: {status}'))
