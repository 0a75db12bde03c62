from apps.workshops.services.document_service import RegistrationDocumentService
from apps.workshops.services.guidelines_service import GuidelinesService
from apps.workshops.services.registration_service import RegistrationService
from apps.workshops.services.status_service import WorkshopStatusService
from apps.workshops.services.trainer_service import TrainerService
from apps.workshops.services.workshop_service import WorkshopService

__all__ = [
    'GuidelinesService',
    'RegistrationDocumentService',
    'RegistrationService',
    'TrainerService',
    'WorkshopService',
    'WorkshopStatusService',
]
