"""
Service interfaces (ports) for dependency inversion.
Use cases depend on these; adapters in webinar_api.infrastructure implement them.
"""

from .date_generator import DateGenerator
from .id_generator import IdGenerator
from .webinar_repository import WebinarRepository

__all__ = ['DateGenerator', 'IdGenerator', 'WebinarRepository']
