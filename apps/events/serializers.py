from rest_framework import serializers

from apps.events.models import Event
from apps.events.models import EventPhoto
from apps.shared.serializers import ImageUploadField
from apps.shared.serializers import PaginationQuerySerializer
from apps.shared.serializers import StorageURLField

# =============================================================================
# EVENT SERIALIZERS
# =============================================================================


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ['id', 'occasion', 'date', 'location', 'description', 'people', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']


class EventWriteSerializer(serializers.ModelSerializer):
    """Create or update an event"""

    class Meta:
        model = Event
        fields = ['occasion', 'date', 'location', 'description', 'people']
        extra_kwargs = {
            'occasion': {'required': True, 'max_length': 255},
            'location': {'required': False, 'allow_blank': True},
            'description': {'required': False, 'allow_blank': True},
            'people': {'required': False},
        }

    def validate_people(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('People must be a JSON object')
        return value


class EventListQuerySerializer(PaginationQuerySerializer):
    search = serializers.CharField(required=False, allow_blank=True, default='')


# =============================================================================
# EVENT PHOTO SERIALIZERS
# =============================================================================


class EventPhotoSerializer(serializers.ModelSerializer):
    src_url = StorageURLField(source='src')

    class Meta:
        model = EventPhoto
        fields = ['id', 'event', 'src', 'src_url', 'alt', 'order', 'created_at']
        read_only_fields = fields


class EventPhotoCreateSerializer(serializers.Serializer):
    event_id = serializers.IntegerField(min_value=1)
    image = ImageUploadField()
    alt = serializers.CharField(required=False, allow_blank=True, max_length=255, default='')
    order = serializers.IntegerField(required=False, min_value=0, default=0)


class EventPhotoUpdateSerializer(serializers.Serializer):
    event_id = serializers.IntegerField(required=False, min_value=1)
    image = ImageUploadField(required=False)
    alt = serializers.CharField(required=False, allow_blank=True, max_length=255)
    order = serializers.IntegerField(required=False, min_value=0)


class EventPhotoListQuerySerializer(serializers.Serializer):
    event_id = serializers.IntegerField(required=False, min_value=1)
