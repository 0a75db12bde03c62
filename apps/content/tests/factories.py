import factory

from apps.content.models import Faq
from apps.content.models import Initiative
from apps.content.models import Partner
from apps.content.models import Testimonial


class TestimonialFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Testimonial

    partner_name = factory.Faker('company', locale='fr_FR')
    logo_url = factory.Sequence(lambda n: f'logo-{n}.png')
    quote = factory.Faker('sentence', locale='fr_FR')
    rating = 5
    order = factory.Sequence(lambda n: n)


class FaqFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Faq

    question = factory.Sequence(lambda n: f'Question {n} ?')
    answer = factory.Faker('paragraph', locale='fr_FR')
    order = factory.Sequence(lambda n: n)


class InitiativeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Initiative

    title = factory.Sequence(lambda n: f'Initiative {n}')
    image_url = '/images/initiatives/default.jpg'
    locations = ['Lyon']


class PartnerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Partner

    name = factory.Sequence(lambda n: f'Partenaire {n}')
    logo_url = factory.Sequence(lambda n: f'partner-{n}.png')
    resources = [{'url': 'https://example.org/guide.pdf', 'description': 'Guide'}]
