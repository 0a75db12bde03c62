from datetime import date
from unittest.mock import patch

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase

from apps.events.exceptions import EventNotFoundError
from apps.events.models import Event
from apps.events.models import EventPhoto
from apps.events.services import EventPhotoService
from apps.events.services import EventService
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import EventPhotoFactory
from apps.shared.services import BucketImageService
from apps.shared.tests.utils import InMemoryStorageService


def jpeg(name='photo.jpg'):
    return SimpleUploadedFile(name, b'\xff\xd8\xff-photo-', content_type='image/jpeg')


class EventServiceTest(TestCase):
    def setUp(self):
        self.storage = InMemoryStorageService()
        self.service = EventService(image_service=BucketImageService('event_photos', storage=self.storage))

    def test_create_strips_text(self):
        event = self.service.create_event({'occasion': '  Atelier Lyon ', 'date': date(2025, 3, 14)})
        self.assertEqual(event.occasion, 'Atelier Lyon')

    def test_list_searches_and_paginates(self):
        EventFactory(occasion='Atelier Lyon', date=date(2025, 3, 14))
        EventFactory(occasion='Atelier Lyon', date=date(2025, 5, 2))
        EventFactory(occasion='Salon Paris', location='Paris')

        page = self.service.get_events_list({'search': 'lyon', 'page': 1, 'page_size': 1})

        self.assertEqual(page['meta']['total_items'], 2)
        self.assertEqual(page['items'][0].date, date(2025, 5, 2))

    def test_get_unknown_event(self):
        with self.assertRaises(EventNotFoundError):
            self.service.get_event_detail(999999)

    @patch('apps.events.services.event_service.delete_storage_objects_task.delay')
    def test_delete_queues_photo_cleanup(self, mock_delay):
        event = EventFactory()
        photos = [EventPhotoFactory(event=event), EventPhotoFactory(event=event)]
        EventPhotoFactory(event=event, src='/images/events/static.jpg')

        with self.captureOnCommitCallbacks(execute=True):
            self.service.delete_event(event.id)

        self.assertFalse(Event.objects.exists())
        self.assertFalse(EventPhoto.objects.exists())
        bucket, keys = mock_delay.call_args.args
        self.assertEqual(bucket, 'event-photos')
        self.assertCountEqual(keys, [photo.src for photo in photos])


class EventPhotoServiceTest(TestCase):
    def setUp(self):
        self.storage = InMemoryStorageService()
        self.service = EventPhotoService(image_service=BucketImageService('event_photos', storage=self.storage))
        self.event = EventFactory()

    def test_create_stores_under_event_folder(self):
        photo = self.service.create_photo({'event_id': self.event.id, 'image': jpeg(), 'alt': 'Groupe', 'order': 0})

        self.assertTrue(photo.src.startswith(f'{self.event.id}/'))
        self.assertEqual(self.storage.keys('event-photos'), [photo.src])
        self.assertEqual(self.service.get_src_url(photo), f'https://storage.test/event-photos/{photo.src}')

    def test_create_for_unknown_event_uploads_nothing(self):
        with self.assertRaises(EventNotFoundError):
            self.service.create_photo({'event_id': 999999, 'image': jpeg()})
        self.assertEqual(self.storage.keys('event-photos'), [])

    def test_replace_image(self):
        photo = EventPhotoFactory(event=self.event)
        self.storage.objects[('event-photos', photo.src)] = b'old'

        updated = self.service.update_photo(photo.id, {'image': jpeg('new.jpg')})

        self.assertEqual(self.storage.keys('event-photos'), [updated.src])

    def test_move_to_other_event(self):
        photo = EventPhotoFactory(event=self.event)
        other = EventFactory()

        updated = self.service.update_photo(photo.id, {'event_id': other.id, 'order': 3})

        self.assertEqual(updated.event, other)
        self.assertEqual(updated.order, 3)

    def test_list_in_display_order(self):
        second = EventPhotoFactory(event=self.event, order=2)
        first = EventPhotoFactory(event=self.event, order=1)
        EventPhotoFactory()

        self.assertEqual(self.service.get_photos_list(self.event.id), [first, second])

    def test_delete_removes_image(self):
        photo = EventPhotoFactory(event=self.event)
        self.storage.objects[('event-photos', photo.src)] = b'photo'

        self.service.delete_photo(photo.id)

        self.assertEqual(self.storage.keys('event-photos'), [])
        self.assertFalse(EventPhoto.objects.exists())
