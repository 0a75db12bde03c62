from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import transaction
from django.test import TestCase

from apps.content.exceptions import ContentItemNotFoundError
from apps.content.exceptions import ContentReorderError
from apps.content.models import Faq
from apps.content.models import Partner
from apps.content.resources import RESOURCES
from apps.content.resources import display_field_name
from apps.content.services import ContentService
from apps.content.tests.factories import FaqFactory
from apps.content.tests.factories import PartnerFactory
from apps.content.tests.factories import TestimonialFactory
from apps.shared.exceptions import ValidationError
from apps.shared.tests.utils import InMemoryStorageService


def png(name='logo.png'):
    return SimpleUploadedFile(name, b'\x89PNG\r\n\x1a\n-image-', content_type='image/png')


class DisplayFieldNameTest(TestCase):
    def test_names(self):
        self.assertEqual(display_field_name('logo_url'), 'logo_display_url')
        self.assertEqual(display_field_name('media_logo'), 'media_logo_display_url')


class ContentServiceTest(TestCase):
    def setUp(self):
        self.storage = InMemoryStorageService()
        self.testimonials = ContentService(RESOURCES['testimonials'], storage=self.storage)
        self.partners = ContentService(RESOURCES['partners'], storage=self.storage)
        self.faqs = ContentService(RESOURCES['faqs'], storage=self.storage)

    def test_create_uploads_image_and_stores_key(self):
        item = self.testimonials.create_item({'partner_name': 'Acme', 'quote': 'Top', 'logo': png()})

        self.assertEqual(self.storage.keys('testimonials'), [item.logo_url])
        self.assertTrue(item.logo_url.endswith('.png'))
        self.assertEqual(
            self.testimonials.display_url(item.logo_url), f'https://storage.test/testimonials/{item.logo_url}'
        )

    def test_failed_create_removes_uploaded_image(self):
        PartnerFactory(name='Acme')

        with self.assertRaises(ValidationError), transaction.atomic():
            self.partners.create_item({'name': 'Acme', 'logo': png()})

        self.assertEqual(self.storage.keys('partners'), [])

    def test_update_replaces_image(self):
        partner = PartnerFactory()
        self.storage.objects[('partners', partner.logo_url)] = b'old'
        old_key = partner.logo_url

        updated = self.partners.update_item(partner.id, {'logo': png('new.png')})

        self.assertNotEqual(updated.logo_url, old_key)
        self.assertEqual(self.storage.keys('partners'), [updated.logo_url])

    def test_static_asset_is_kept_on_replace(self):
        partner = PartnerFactory(logo_url='/images/partners/acme.png')

        updated = self.partners.update_item(partner.id, {'logo': png()})

        self.assertEqual(self.storage.keys('partners'), [updated.logo_url])
        self.assertEqual(self.partners.display_url('/images/partners/acme.png'), '/images/partners/acme.png')
        self.assertEqual(self.partners.display_url('images/partners/acme.png'), '/images/partners/acme.png')

    def test_delete_removes_image(self):
        partner = PartnerFactory()
        self.storage.objects[('partners', partner.logo_url)] = b'logo'

        self.partners.delete_item(partner.id)

        self.assertFalse(Partner.objects.exists())
        self.assertEqual(self.storage.keys('partners'), [])

    def test_image_delete_failure_does_not_block(self):
        storage = InMemoryStorageService(fail_deletes=True)
        service = ContentService(RESOURCES['partners'], storage=storage)
        partner = PartnerFactory()

        with self.assertLogs('apps.shared.services.image_service', level='WARNING'):
            service.delete_item(partner.id)

        self.assertFalse(Partner.objects.exists())

    def test_get_unknown_item(self):
        with self.assertRaises(ContentItemNotFoundError):
            self.faqs.get_item(999999)

    def test_reorder(self):
        first, second, third = FaqFactory(), FaqFactory(), FaqFactory()

        self.faqs.reorder([third.id, first.id, second.id])

        self.assertEqual(list(Faq.objects.values_list('id', flat=True)), [third.id, first.id, second.id])
        self.assertEqual([faq.order for faq in self.faqs.list_items()], [0, 1, 2])

    def test_reorder_with_unknown_id(self):
        faq = FaqFactory()
        with self.assertRaises(ContentReorderError):
            self.faqs.reorder([faq.id, 999999])

    def test_reorder_of_unordered_resource(self):
        with self.assertRaises(ContentReorderError):
            self.partners.reorder([PartnerFactory().id])

    def test_testimonials_keep_manual_order(self):
        later = TestimonialFactory(order=2)
        earlier = TestimonialFactory(order=1)

        self.assertEqual(self.testimonials.list_items(), [earlier, later])
