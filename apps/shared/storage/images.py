"""
Helpers for image and document references stored on records.

A record field holds one of:
- an absolute URL (http/https), kept as-is
- a path to a static asset of the public site (``/images/...``)
- a key inside a storage bucket
"""

import uuid
from urllib.parse import unquote
from urllib.parse import urlparse

from apps.shared.utils.validators import StorageKeyValidator


def is_absolute_url(value: str) -> bool:
    return value.startswith(('http://', 'https://'))


def resolve_image_url(value: str, bucket: str, storage) -> str:
    """
    Return a displayable URL for ``value``.

    Static site paths are normalised to start with a slash, bucket keys
    become the bucket's public URL.
    """
    if not value:
        return ''
    if is_absolute_url(value):
        return value
    if value.startswith('/images/'):
        return value
    if value.startswith('images/'):
        return f'/{value}'
    return storage.get_public_url(bucket, value)


def extract_storage_path(value: str, bucket: str) -> str:
    """
    Return the key inside ``bucket`` referenced by ``value``.

    Full URLs are cut after ``/<bucket>/``; a URL without that segment falls
    back to its last path segment. Anything else is already a key.
    """
    if not value:
        return ''
    if not is_absolute_url(value):
        return value

    path = unquote(urlparse(value).path)
    marker = f'/{bucket}/'
    index = path.find(marker)
    if index != -1:
        return path[index + len(marker) :]
    return path.rstrip('/').split('/')[-1]


def build_upload_key(filename: str, folder: str | None = None) -> str:
    """``<folder>/<uuid>.<ext>`` for a newly uploaded file."""
    extension = StorageKeyValidator.safe_extension(filename)
    name = f'{uuid.uuid4().hex}.{extension}'
    return f'{folder.strip("/")}/{name}' if folder else name
