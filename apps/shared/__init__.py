"""
Shared utilities and base classes for the workshop back-office

- Base classes (BaseModel, BaseAPIView)
- Storage (S3 backend, bucket images, signed URLs)
- Exceptions and the DRF exception handler
- Utilities (codes, pagination, validators)
- The service container used by views

Import specific classes directly from their modules:
- from apps.shared.base.base_api_view import BaseAPIView
- from apps.shared.container import get_workshop_service
"""

# Empty init to avoid circular imports
# All imports should be done directly from submodules
