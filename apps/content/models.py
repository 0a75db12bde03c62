from django.core.validators import MaxValueValidator
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.base.models import OrderedModel


class Testimonial(OrderedModel):
    partner_name = models.CharField(_('Partner name'), max_length=255)
    logo_url = models.CharField(_('Logo'), max_length=500, blank=True)
    quote = models.TextField(_('Quote'))
    rating = models.PositiveSmallIntegerField(
        _('Rating'),
        default=5,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )

    class Meta:
        verbose_name = _('Testimonial')
        verbose_name_plural = _('Testimonials')
        ordering = ['order', 'id']

    def __str__(self):
        return self.partner_name


class Faq(OrderedModel):
    question = models.CharField(_('Question'), max_length=500)
    answer = models.TextField(_('Answer'))

    class Meta:
        verbose_name = _('FAQ')
        verbose_name_plural = _('FAQs')
        ordering = ['order', 'id']

    def __str__(self):
        return self.question


class Initiative(BaseModel):
    """
    Initiative promoted on the site. ``social_links`` is a list of
    ``{"url", "type", "label"}`` objects.
    """

    title = models.CharField(_('Title'), max_length=255)
    description = models.TextField(_('Description'), blank=True)
    image_url = models.CharField(_('Image'), max_length=500, blank=True)
    logo_url = models.CharField(_('Logo'), max_length=500, blank=True)
    website_url = models.URLField(_('Website'), max_length=500, blank=True)
    locations = models.JSONField(_('Locations'), default=list, blank=True)
    start_date = models.DateField(_('Start date'), null=True, blank=True)
    specializations = models.JSONField(_('Specializations'), default=list, blank=True)
    social_links = models.JSONField(_('Social links'), default=list, blank=True)

    class Meta:
        verbose_name = _('Initiative')
        verbose_name_plural = _('Initiatives')
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class PressArticle(BaseModel):
    publication = models.CharField(_('Publication'), max_length=255)
    logo_url = models.CharField(_('Logo'), max_length=500, blank=True)
    title = models.CharField(_('Title'), max_length=500)
    url = models.URLField(_('Article URL'), max_length=500)
    date = models.DateField(_('Publication date'), null=True, blank=True)
    featured = models.BooleanField(_('Featured'), default=False)

    class Meta:
        verbose_name = _('Press article')
        verbose_name_plural = _('Press articles')
        ordering = ['-featured', '-date']

    def __str__(self):
        return f'{self.publication}: {self.title}'


class MediaHighlight(BaseModel):
    title = models.CharField(_('Title'), max_length=500)
    media_name = models.CharField(_('Media name'), max_length=255)
    date = models.DateField(_('Broadcast date'), null=True, blank=True)
    video_id = models.CharField(_('Video ID'), max_length=100, blank=True)
    url = models.URLField(_('URL'), max_length=500, blank=True)
    media_logo = models.CharField(_('Media logo'), max_length=500, blank=True)
    image_url = models.CharField(_('Image'), max_length=500, blank=True)

    class Meta:
        verbose_name = _('Media highlight')
        verbose_name_plural = _('Media highlights')
        ordering = ['-date']

    def __str__(self):
        return f'{self.media_name}: {self.title}'


class Partner(BaseModel):
    """``resources`` is a list of ``{"url", "description"}`` objects."""

    name = models.CharField(_('Name'), max_length=255, unique=True)
    logo_url = models.CharField(_('Logo'), max_length=500, blank=True)
    website_url = models.URLField(_('Website'), max_length=500, blank=True)
    collaboration_date = models.DateField(_('Collaboration since'), null=True, blank=True)
    specializations = models.JSONField(_('Specializations'), default=list, blank=True)
    locations = models.JSONField(_('Locations'), default=list, blank=True)
    resources = models.JSONField(_('Resources'), default=list, blank=True)
    collaboration_status = models.CharField(_('Collaboration status'), max_length=100, blank=True)

    class Meta:
        verbose_name = _('Partner')
        verbose_name_plural = _('Partners')
        ordering = ['-created_at']

    def __str__(self):
        return self.name
