"""
Domain-specific business exceptions for the contracts app.

HTTP mapping happens in the global exception handler.
"""

from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ResourceNotFoundError

# =============================================================================
# Templates
# =============================================================================


class TemplateNotFoundError(ResourceNotFoundError):
    """Raised when a contract template does not exist (or no longer exists)."""

    def __init__(self, template_identifier=None, **kwargs):
        message = 'Contract template not found'
        if template_identifier:
            message = f"Contract template '{template_identifier}' not found"
        super().__init__(message, error_code='template_not_found', **kwargs)


class InvalidTemplateTypeError(BusinessRuleViolation):
    """Raised when a template of the wrong kind is used."""

    def __init__(self, expected: str, actual: str, **kwargs):
        super().__init__(
            f"Expected a '{expected}' contract template, got '{actual}'",
            error_code='invalid_template_type',
            **kwargs,
        )


# =============================================================================
# Assignments
# =============================================================================


class AssignmentNotFoundError(ResourceNotFoundError):
    def __init__(self, assignment_identifier=None, **kwargs):
        message = 'Contract assignment not found'
        if assignment_identifier:
            message = f"Contract assignment '{assignment_identifier}' not found"
        super().__init__(message, error_code='assignment_not_found', **kwargs)


class NoContractAssignedError(ResourceNotFoundError):
    """Raised when a trainer has no contract template assigned."""

    def __init__(self, trainer_code: str = None, **kwargs):
        message = 'No contract assigned to this trainer'
        if trainer_code:
            message = f"No contract assigned to trainer '{trainer_code}'"
        super().__init__(message, error_code='no_contract_assigned', **kwargs)


class TrainerAlreadyAssignedError(BusinessRuleViolation):
    def __init__(self, trainer_code: str, **kwargs):
        super().__init__(
            f"Trainer '{trainer_code}' already has a contract assigned",
            error_code='trainer_already_assigned',
            **kwargs,
        )


class TrainerWorkshopMismatchError(BusinessRuleViolation):
    """Raised when a trainer and a template belong to different workshops."""

    def __init__(self, trainer_code: str, workshop_date, **kwargs):
        super().__init__(
            f"Trainer '{trainer_code}' does not belong to the workshop of {workshop_date}",
            error_code='invalid_trainer_workshop',
            **kwargs,
        )


class AssignmentLockedError(BusinessRuleViolation):
    """Raised when unassigning a contract the trainer has already accepted."""

    def __init__(self, trainer_code: str, **kwargs):
        super().__init__(
            f"Trainer '{trainer_code}' has accepted the contract, the assignment can no longer be removed",
            error_code='assignment_locked',
            **kwargs,
        )


# =============================================================================
# Client contracts
# =============================================================================


class ClientContractNotFoundError(ResourceNotFoundError):
    def __init__(self, contract_identifier=None, **kwargs):
        message = 'Client contract not found'
        if contract_identifier:
            message = f"Client contract '{contract_identifier}' not found"
        super().__init__(message, error_code='client_contract_not_found', **kwargs)


class ClientContractExistsError(BusinessRuleViolation):
    """Raised when a workshop already has its client contract."""

    def __init__(self, workshop_date, **kwargs):
        super().__init__(
            f'The workshop of {workshop_date} already has a client contract',
            error_code='client_contract_exists',
            **kwargs,
        )


class TemplateInUseError(BusinessRuleViolation):
    """Raised when changing or deleting a template a client contract relies on."""

    def __init__(self, template_id, details: str = None, **kwargs):
        message = f"Contract template '{template_id}' is in use"
        if details:
            message = f'{message}. {details}'
        super().__init__(message, error_code='template_in_use', **kwargs)
