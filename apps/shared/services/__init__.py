from .image_service import BucketImageService

__all__ = ['BucketImageService']
