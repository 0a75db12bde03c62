"""
Storage backends and utilities

Import directly from submodules:
- from .base import AbstractStorageService
- from .factory import get_storage_service, get_bucket_name
- from .images import resolve_image_url, extract_storage_path
"""
