from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ResourceNotFoundError


class ContentItemNotFoundError(ResourceNotFoundError):
    """Raised when a content item does not exist."""

    def __init__(self, resource_name: str, item_id=None, **kwargs):
        message = f'{resource_name} not found'
        if item_id is not None:
            message = f"{resource_name} '{item_id}' not found"
        super().__init__(message, error_code='content_item_not_found', **kwargs)


class ContentReorderError(BusinessRuleViolation):
    """Raised when a reorder request does not match the existing items."""

    def __init__(self, details: str, **kwargs):
        super().__init__(f'Invalid ordering: {details}', error_code='content_reorder_invalid', **kwargs)
