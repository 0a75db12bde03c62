"""
Validators for uploaded files and storage keys.
"""

import pathlib
import re

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


class StorageKeyValidator:
    """Validator for storage keys and file names"""

    SAFE_FILENAME_PATTERN = re.compile(r'^[a-zA-Z0-9\-_\.]+$')
    MAX_FILENAME_LENGTH = 255

    @classmethod
    def safe_extension(cls, filename: str, default: str = 'bin') -> str:
        """
        Return a lowercase extension usable in a storage key.

        Unsafe or missing extensions fall back to ``default``.
        """
        suffix = pathlib.PurePath(filename or '').suffix.lstrip('.').lower()
        if not suffix or not cls.SAFE_FILENAME_PATTERN.match(suffix) or len(suffix) > 10:
            return default
        return suffix

    @classmethod
    def validate_key(cls, key: str) -> str:
        if not key:
            raise ValidationError(_('Storage key cannot be empty'))
        if '..' in key or key.startswith('/'):
            raise ValidationError(_('Storage key contains unsafe segments'))
        if len(key) > 1024:
            raise ValidationError(_('Storage key is too long'))
        return key


class ImageUploadValidator:
    """Validator for images uploaded to public buckets"""

    ALLOWED_CONTENT_TYPES = {
        'image/jpeg',
        'image/jpg',
        'image/png',
        'image/gif',
        'image/webp',
        'image/svg+xml',
    }

    def __call__(self, uploaded_file):
        content_type = getattr(uploaded_file, 'content_type', '') or ''
        if content_type not in self.ALLOWED_CONTENT_TYPES:
            raise ValidationError(
                _('Unsupported file type: %(content_type)s. Allowed types: %(allowed)s')
                % {'content_type': content_type or 'unknown', 'allowed': ', '.join(sorted(self.ALLOWED_CONTENT_TYPES))}
            )

        max_size = getattr(settings, 'STORAGE_MAX_IMAGE_SIZE', 5 * 1024 * 1024)
        if uploaded_file.size <= 0:
            raise ValidationError(_('File is empty'))
        if uploaded_file.size > max_size:
            raise ValidationError(
                _('Image is too large (max %(max_mb)s MB)') % {'max_mb': max_size // (1024 * 1024)}
            )


validate_image_upload = ImageUploadValidator()
