from .guidelines import WorkshopGuidelines
from .registration import VOLUNTEER_NO_MOTIVATION_PLACEHOLDER
from .registration import TrainerRegistration
from .trainer import WorkshopTrainer
from .workshop import Workshop
from .workshop import default_available_tools

__all__ = [
    'VOLUNTEER_NO_MOTIVATION_PLACEHOLDER',
    'TrainerRegistration',
    'Workshop',
    'WorkshopGuidelines',
    'WorkshopTrainer',
    'default_available_tools',
]
