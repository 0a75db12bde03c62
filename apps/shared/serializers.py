from rest_framework import serializers

from apps.shared.utils.validators import validate_image_upload


class StorageURLField(serializers.ReadOnlyField):
    """
    Displayable URL for an image reference stored on the instance.

    Requires ``image_service`` (a BucketImageService) in the serializer context.
    """

    def to_representation(self, value):
        return self.context['image_service'].url(value or '')


class ImageUploadField(serializers.FileField):
    """Write-only image upload checked against the public bucket rules."""

    def __init__(self, **kwargs):
        kwargs.setdefault('write_only', True)
        kwargs.setdefault('validators', [validate_image_upload])
        super().__init__(**kwargs)


class ReorderSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)

    def validate_ids(self, value):
        if len(set(value)) != len(value):
            raise serializers.ValidationError('Duplicate ids in ordering')
        return value


class PaginationQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    page_size = serializers.IntegerField(required=False, min_value=1, default=50)
