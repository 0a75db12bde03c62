"""
Domain-specific business exceptions for the workshops app.

HTTP mapping happens in the global exception handler.
"""

from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ResourceNotFoundError


class WorkshopNotFoundError(ResourceNotFoundError):
    """Raised when no workshop exists for the requested id or date."""

    def __init__(self, workshop_identifier=None, **kwargs):
        message = 'Workshop not found'
        if workshop_identifier:
            message = f"Workshop '{workshop_identifier}' not found"
        super().__init__(message, error_code='workshop_not_found', **kwargs)


class WorkshopDateTakenError(BusinessRuleViolation):
    """Raised when a second workshop is created on the same date."""

    def __init__(self, workshop_date, **kwargs):
        super().__init__(
            f'A workshop already exists on {workshop_date}',
            error_code='workshop_date_taken',
            **kwargs,
        )


class TrainerNotFoundError(ResourceNotFoundError):
    """Raised when a trainer id or trainer code is unknown."""

    def __init__(self, trainer_identifier=None, **kwargs):
        message = 'Trainer not found'
        if trainer_identifier:
            message = f"Trainer '{trainer_identifier}' not found"
        super().__init__(message, error_code='trainer_not_found', **kwargs)


class TrainerCodeTakenError(BusinessRuleViolation):
    """Raised when a trainer code is already used by another trainer."""

    def __init__(self, trainer_code: str, **kwargs):
        super().__init__(
            f"Trainer code '{trainer_code}' is already in use",
            error_code='trainer_code_taken',
            **kwargs,
        )


class RegistrationNotFoundError(ResourceNotFoundError):
    """Raised when requested trainer registration does not exist."""

    def __init__(self, registration_identifier=None, **kwargs):
        message = 'Registration not found'
        if registration_identifier:
            message = f"Registration '{registration_identifier}' not found"
        super().__init__(message, error_code='registration_not_found', **kwargs)


class GuidelinesNotFoundError(ResourceNotFoundError):
    """Raised when a workshop has no guidelines."""

    def __init__(self, guidelines_identifier=None, **kwargs):
        message = 'Workshop guidelines not found'
        if guidelines_identifier:
            message = f"Workshop guidelines '{guidelines_identifier}' not found"
        super().__init__(message, error_code='guidelines_not_found', **kwargs)


class WorkshopDateLockedError(BusinessRuleViolation):
    """Raised when moving a workshop that already has trainers, contracts or guidelines."""

    def __init__(self, workshop_date, **kwargs):
        super().__init__(
            f'The workshop of {workshop_date} already has dependent records, its date can no longer change',
            error_code='workshop_date_locked',
            **kwargs,
        )


class TrainerLockedError(BusinessRuleViolation):
    """Raised when changing the code or workshop of a trainer with a registration or a contract."""

    def __init__(self, trainer_code: str, **kwargs):
        super().__init__(
            f"Trainer '{trainer_code}' has a registration or a contract, its code and workshop can no longer change",
            error_code='trainer_locked',
            **kwargs,
        )
