from rest_framework import serializers

from apps.content.models import Faq
from apps.content.models import Initiative
from apps.content.models import MediaHighlight
from apps.content.models import Partner
from apps.content.models import PressArticle
from apps.content.models import Testimonial
from apps.shared.serializers import ImageUploadField
from apps.shared.serializers import StorageURLField

# =============================================================================
# NESTED JSON ITEMS
# =============================================================================


class SocialLinkSerializer(serializers.Serializer):
    url = serializers.URLField(max_length=500)
    type = serializers.CharField(max_length=50)
    label = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class PartnerResourceSerializer(serializers.Serializer):
    url = serializers.URLField(max_length=500)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class TagListField(serializers.ListField):
    child = serializers.CharField(max_length=100)

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_empty', True)
        super().__init__(**kwargs)


# =============================================================================
# TESTIMONIALS / FAQ
# =============================================================================


class TestimonialSerializer(serializers.ModelSerializer):
    logo_display_url = StorageURLField(source='logo_url')

    class Meta:
        model = Testimonial
        fields = ['id', 'partner_name', 'logo_url', 'logo_display_url', 'quote', 'rating', 'order', 'created_at', 'updated_at']
        read_only_fields = fields


class TestimonialWriteSerializer(serializers.ModelSerializer):
    logo = ImageUploadField(required=False)

    class Meta:
        model = Testimonial
        fields = ['partner_name', 'logo_url', 'logo', 'quote', 'rating', 'order']


class FaqSerializer(serializers.ModelSerializer):
    class Meta:
        model = Faq
        fields = ['id', 'question', 'answer', 'order', 'created_at', 'updated_at']
        read_only_fields = fields


class FaqWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Faq
        fields = ['question', 'answer', 'order']


# =============================================================================
# INITIATIVES
# =============================================================================


class InitiativeSerializer(serializers.ModelSerializer):
    image_display_url = StorageURLField(source='image_url')
    logo_display_url = StorageURLField(source='logo_url')

    class Meta:
        model = Initiative
        fields = [
            'id',
            'title',
            'description',
            'image_url',
            'image_display_url',
            'logo_url',
            'logo_display_url',
            'website_url',
            'locations',
            'start_date',
            'specializations',
            'social_links',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class InitiativeWriteSerializer(serializers.ModelSerializer):
    image = ImageUploadField(required=False)
    logo = ImageUploadField(required=False)
    locations = TagListField()
    specializations = TagListField()
    social_links = SocialLinkSerializer(many=True, required=False)

    class Meta:
        model = Initiative
        fields = [
            'title',
            'description',
            'image_url',
            'image',
            'logo_url',
            'logo',
            'website_url',
            'locations',
            'start_date',
            'specializations',
            'social_links',
        ]


# =============================================================================
# PRESS / MEDIA
# =============================================================================


class PressArticleSerializer(serializers.ModelSerializer):
    logo_display_url = StorageURLField(source='logo_url')

    class Meta:
        model = PressArticle
        fields = ['id', 'publication', 'logo_url', 'logo_display_url', 'title', 'url', 'date', 'featured', 'created_at', 'updated_at']
        read_only_fields = fields


class PressArticleWriteSerializer(serializers.ModelSerializer):
    logo = ImageUploadField(required=False)

    class Meta:
        model = PressArticle
        fields = ['publication', 'logo_url', 'logo', 'title', 'url', 'date', 'featured']


class MediaHighlightSerializer(serializers.ModelSerializer):
    image_display_url = StorageURLField(source='image_url')
    media_logo_display_url = StorageURLField(source='media_logo')

    class Meta:
        model = MediaHighlight
        fields = [
            'id',
            'title',
            'media_name',
            'date',
            'video_id',
            'url',
            'media_logo',
            'media_logo_display_url',
            'image_url',
            'image_display_url',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class MediaHighlightWriteSerializer(serializers.ModelSerializer):
    image = ImageUploadField(required=False)
    media_logo_file = ImageUploadField(required=False)

    class Meta:
        model = MediaHighlight
        fields = ['title', 'media_name', 'date', 'video_id', 'url', 'media_logo', 'media_logo_file', 'image_url', 'image']


# =============================================================================
# PARTNERS
# =============================================================================


class PartnerSerializer(serializers.ModelSerializer):
    logo_display_url = StorageURLField(source='logo_url')

    class Meta:
        model = Partner
        fields = [
            'id',
            'name',
            'logo_url',
            'logo_display_url',
            'website_url',
            'collaboration_date',
            'specializations',
            'locations',
            'resources',
            'collaboration_status',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class PartnerWriteSerializer(serializers.ModelSerializer):
    logo = ImageUploadField(required=False)
    specializations = TagListField()
    locations = TagListField()
    resources = PartnerResourceSerializer(many=True, required=False)

    class Meta:
        model = Partner
        fields = [
            'name',
            'logo_url',
            'logo',
            'website_url',
            'collaboration_date',
            'specializations',
            'locations',
            'resources',
            'collaboration_status',
        ]


# resource name -> (read serializer, write serializer)
SERIALIZERS = {
    'testimonials': (TestimonialSerializer, TestimonialWriteSerializer),
    'faqs': (FaqSerializer, FaqWriteSerializer),
    'initiatives': (InitiativeSerializer, InitiativeWriteSerializer),
    'press-articles': (PressArticleSerializer, PressArticleWriteSerializer),
    'media-highlights': (MediaHighlightSerializer, MediaHighlightWriteSerializer),
    'partners': (PartnerSerializer, PartnerWriteSerializer),
}
