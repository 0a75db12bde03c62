from apps.workshops.views.guidelines_views import GuidelinesDeleteAPIView
from apps.workshops.views.guidelines_views import GuidelinesDetailAPIView
from apps.workshops.views.guidelines_views import GuidelinesListAPIView
from apps.workshops.views.guidelines_views import GuidelinesUpsertAPIView
from apps.workshops.views.registration_views import RegistrationContractAPIView
from apps.workshops.views.registration_views import RegistrationDeleteAPIView
from apps.workshops.views.registration_views import RegistrationDetailAPIView
from apps.workshops.views.registration_views import RegistrationListAPIView
from apps.workshops.views.registration_views import RegistrationTogglePaidAPIView
from apps.workshops.views.trainer_views import TrainerCodeGenerateAPIView
from apps.workshops.views.trainer_views import TrainerCreateAPIView
from apps.workshops.views.trainer_views import TrainerDeleteAPIView
from apps.workshops.views.trainer_views import TrainerDetailAPIView
from apps.workshops.views.trainer_views import TrainerListAPIView
from apps.workshops.views.trainer_views import TrainerToggleCodeSentAPIView
from apps.workshops.views.trainer_views import TrainerUpdateAPIView
from apps.workshops.views.workshop_views import WorkshopCreateAPIView
from apps.workshops.views.workshop_views import WorkshopDeleteAPIView
from apps.workshops.views.workshop_views import WorkshopDetailAPIView
from apps.workshops.views.workshop_views import WorkshopListAPIView
from apps.workshops.views.workshop_views import WorkshopPasswordGenerateAPIView
from apps.workshops.views.workshop_views import WorkshopStatusDetailAPIView
from apps.workshops.views.workshop_views import WorkshopStatusListAPIView
from apps.workshops.views.workshop_views import WorkshopUpdateAPIView

__all__ = [
    'GuidelinesDeleteAPIView',
    'GuidelinesDetailAPIView',
    'GuidelinesListAPIView',
    'GuidelinesUpsertAPIView',
    'RegistrationContractAPIView',
    'RegistrationDeleteAPIView',
    'RegistrationDetailAPIView',
    'RegistrationListAPIView',
    'RegistrationTogglePaidAPIView',
    'TrainerCodeGenerateAPIView',
    'TrainerCreateAPIView',
    'TrainerDeleteAPIView',
    'TrainerDetailAPIView',
    'TrainerListAPIView',
    'TrainerToggleCodeSentAPIView',
    'TrainerUpdateAPIView',
    'WorkshopCreateAPIView',
    'WorkshopDeleteAPIView',
    'WorkshopDetailAPIView',
    'WorkshopListAPIView',
    'WorkshopPasswordGenerateAPIView',
    'WorkshopStatusDetailAPIView',
    'WorkshopStatusListAPIView',
    'WorkshopUpdateAPIView',
]
