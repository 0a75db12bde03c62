"""
Registry of the public content resources managed by the back-office.

Each resource is one model with its image fields, the bucket those images
live in and whether the site displays it in a manual order.
"""

from dataclasses import dataclass
from dataclasses import field

from apps.content.models import Faq
from apps.content.models import Initiative
from apps.content.models import MediaHighlight
from apps.content.models import Partner
from apps.content.models import PressArticle
from apps.content.models import Testimonial


@dataclass(frozen=True)
class ContentResource:
    name: str
    model: type
    bucket_alias: str | None = None
    # model field holding a stored image -> name of its upload field
    image_fields: dict[str, str] = field(default_factory=dict)
    reorderable: bool = False

    @property
    def label(self) -> str:
        return self.model._meta.verbose_name


TESTIMONIALS = ContentResource(
    name='testimonials',
    model=Testimonial,
    bucket_alias='testimonials',
    image_fields={'logo_url': 'logo'},
    reorderable=True,
)

FAQS = ContentResource(name='faqs', model=Faq, reorderable=True)

INITIATIVES = ContentResource(
    name='initiatives',
    model=Initiative,
    bucket_alias='initiatives',
    image_fields={'image_url': 'image', 'logo_url': 'logo'},
)

PRESS_ARTICLES = ContentResource(
    name='press-articles',
    model=PressArticle,
    bucket_alias='press_articles',
    image_fields={'logo_url': 'logo'},
)

MEDIA_HIGHLIGHTS = ContentResource(
    name='media-highlights',
    model=MediaHighlight,
    bucket_alias='media_highlights',
    image_fields={'image_url': 'image', 'media_logo': 'media_logo_file'},
)

PARTNERS = ContentResource(
    name='partners',
    model=Partner,
    bucket_alias='partners',
    image_fields={'logo_url': 'logo'},
)

RESOURCES = {
    resource.name: resource
    for resource in (TESTIMONIALS, FAQS, INITIATIVES, PRESS_ARTICLES, MEDIA_HIGHLIGHTS, PARTNERS)
}


def display_field_name(image_field: str) -> str:
    """``logo_url`` -> ``logo_display_url``, ``media_logo`` -> ``media_logo_display_url``"""
    base = image_field.removesuffix('_url')
    return f'{base}_display_url'
