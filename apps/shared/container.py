from collections.abc import Callable

from apps.content.resources import RESOURCES
from apps.content.services import ContentService
from apps.contracts.dal.assignment_dal import ContractAssignmentDAL
from apps.contracts.dal.client_contract_dal import ClientContractDAL
from apps.contracts.dal.template_dal import ContractTemplateDAL
from apps.contracts.services import ClientContractService
from apps.contracts.services import ContractAssignmentService
from apps.contracts.services import ContractRenderingService
from apps.contracts.services import ContractTemplateService
from apps.events.services import EventPhotoService
from apps.events.services import EventService
from apps.events.services.event_service import EVENT_PHOTOS_BUCKET
from apps.shared.services.image_service import BucketImageService
from apps.shared.storage.factory import get_storage_service
from apps.workshops.dal.trainer_dal import TrainerRegistrationDAL
from apps.workshops.dal.trainer_dal import WorkshopTrainerDAL
from apps.workshops.dal.workshop_dal import WorkshopDAL
from apps.workshops.services import GuidelinesService
from apps.workshops.services import RegistrationDocumentService
from apps.workshops.services import RegistrationService
from apps.workshops.services import TrainerService
from apps.workshops.services import WorkshopService
from apps.workshops.services import WorkshopStatusService


class Container:
    """
    Simple DI Container for managing service dependencies.

    DAL and storage factories can be overridden in tests; every service
    built afterwards receives the replacement.
    """

    def __init__(self):
        self._dal_factories = {}
        self._service_factories = {}

        self._setup_default_factories()

    def _setup_default_factories(self):
        self._dal_factories = {
            'workshop_dal': WorkshopDAL,
            'trainer_dal': WorkshopTrainerDAL,
            'registration_dal': TrainerRegistrationDAL,
            'template_dal': ContractTemplateDAL,
            'assignment_dal': ContractAssignmentDAL,
            'client_contract_dal': ClientContractDAL,
        }

        self._service_factories = {
            'storage_service': get_storage_service,
        }

    def _dal(self, name: str):
        return self._dal_factories[name]()

    def _storage(self):
        return self._service_factories['storage_service']()

    def event_photo_images(self):
        return BucketImageService(EVENT_PHOTOS_BUCKET, storage=self._storage())

    def event_service(self):
        return EventService(image_service=self.event_photo_images())

    def event_photo_service(self):
        return EventPhotoService(image_service=self.event_photo_images())

    def content_service(self, resource_name: str):
        """ContentService for one registered content resource ('faqs', 'partners', ...)"""
        return ContentService(RESOURCES[resource_name], storage=self._storage())

    def document_service(self):
        return RegistrationDocumentService(storage=self._storage())

    def workshop_service(self):
        return WorkshopService(
            dal=self._dal('workshop_dal'),
            trainer_dal=self._dal('trainer_dal'),
            registration_dal=self._dal('registration_dal'),
            template_dal=self._dal('template_dal'),
            assignment_dal=self._dal('assignment_dal'),
            client_contract_dal=self._dal('client_contract_dal'),
            document_service=self.document_service(),
        )

    def workshop_status_service(self):
        return WorkshopStatusService(
            workshop_dal=self._dal('workshop_dal'),
            trainer_dal=self._dal('trainer_dal'),
            registration_dal=self._dal('registration_dal'),
            assignment_dal=self._dal('assignment_dal'),
            client_contract_dal=self._dal('client_contract_dal'),
        )

    def trainer_service(self):
        return TrainerService(
            dal=self._dal('trainer_dal'),
            workshop_dal=self._dal('workshop_dal'),
            assignment_dal=self._dal('assignment_dal'),
            document_service=self.document_service(),
        )

    def registration_service(self):
        return RegistrationService(
            dal=self._dal('registration_dal'),
            trainer_dal=self._dal('trainer_dal'),
            assignment_dal=self._dal('assignment_dal'),
            document_service=self.document_service(),
        )

    def guidelines_service(self):
        return GuidelinesService(workshop_dal=self._dal('workshop_dal'))

    def contract_template_service(self):
        return ContractTemplateService(
            dal=self._dal('template_dal'),
            workshop_dal=self._dal('workshop_dal'),
            assignment_dal=self._dal('assignment_dal'),
            registration_dal=self._dal('registration_dal'),
        )

    def contract_assignment_service(self):
        return ContractAssignmentService(
            dal=self._dal('assignment_dal'),
            template_dal=self._dal('template_dal'),
            trainer_dal=self._dal('trainer_dal'),
            registration_dal=self._dal('registration_dal'),
        )

    def client_contract_service(self):
        return ClientContractService(
            dal=self._dal('client_contract_dal'),
            template_dal=self._dal('template_dal'),
            workshop_dal=self._dal('workshop_dal'),
        )

    def contract_rendering_service(self):
        return ContractRenderingService(
            assignment_dal=self._dal('assignment_dal'),
            client_contract_dal=self._dal('client_contract_dal'),
            trainer_dal=self._dal('trainer_dal'),
            registration_dal=self._dal('registration_dal'),
        )

    # Override methods for testing
    def override_storage_service(self, factory: Callable):
        """Override the storage backend factory for testing"""
        self._service_factories['storage_service'] = factory

    def reset_to_defaults(self):
        """Reset all factories to defaults - useful for test cleanup"""
        self._setup_default_factories()


# Global container instance
_container = Container()


def get_container() -> Container:
    """Get the global container instance"""
    return _container


# Convenient functions for quick service access
def get_event_service():
    return get_container().event_service()


def get_event_photo_service():
    return get_container().event_photo_service()


def get_content_service(resource_name: str):
    return get_container().content_service(resource_name)


def get_workshop_service():
    return get_container().workshop_service()


def get_workshop_status_service():
    return get_container().workshop_status_service()


def get_trainer_service():
    return get_container().trainer_service()


def get_registration_service():
    return get_container().registration_service()


def get_guidelines_service():
    return get_container().guidelines_service()


def get_contract_template_service():
    return get_container().contract_template_service()


def get_contract_assignment_service():
    return get_container().contract_assignment_service()


def get_client_contract_service():
    return get_container().client_contract_service()


def get_contract_rendering_service():
    return get_container().contract_rendering_service()
