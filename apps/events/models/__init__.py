from .event import Event
from .event import EventPhoto

__all__ = [
    'Event',
    'EventPhoto',
]
