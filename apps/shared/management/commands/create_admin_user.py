from django.contrib.auth import get_user_model
from django.core.management import BaseCommand


class Command(BaseCommand):
    ADMIN_USERNAME = 'admin'
    ADMIN_EMAIL = 'admin@ateliers.local'
    ADMIN_PASSWORD = 'admin12345'  # nosec  # noqa: S105
    help = 'Check and create default development back-office user'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=self.ADMIN_USERNAME)
        parser.add_argument('--email', default=self.ADMIN_EMAIL)
        parser.add_argument('--password', default=self.ADMIN_PASSWORD)

    def handle(self, *args, **options):  # noqa: ARG002
        user_class = get_user_model()

        user, created = user_class.objects.update_or_create(
            username=options['username'],
            defaults={
                'email': options['email'],
                'is_staff': True,
                'is_active': True,
                'is_superuser': True,
            },
        )
        user.set_password(options['password'])
        user.save()

        verb = 'created' if created else 'updated'
        self.stdout.write(self.style.SUCCESS(f'Development admin user "{user.username}" has been {verb}!'))
