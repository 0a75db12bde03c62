"""
Domain-specific business exceptions for the events app.

HTTP mapping happens in the global exception handler.
"""

from apps.shared.exceptions import ResourceNotFoundError


class EventNotFoundError(ResourceNotFoundError):
    """Raised when requested event does not exist."""

    def __init__(self, event_identifier=None, **kwargs):
        message = 'Event not found'
        if event_identifier:
            message = f"Event '{event_identifier}' not found"
        super().__init__(message, error_code='event_not_found', **kwargs)


class EventPhotoNotFoundError(ResourceNotFoundError):
    """Raised when requested event photo does not exist."""

    def __init__(self, photo_identifier=None, **kwargs):
        message = 'Event photo not found'
        if photo_identifier:
            message = f"Event photo '{photo_identifier}' not found"
        super().__init__(message, error_code='event_photo_not_found', **kwargs)
