"""
Infrastructure layer - adapters for the service interfaces and external systems.
Keeps business logic clean from implementation details.
"""

from .generators import FixedDateGenerator, FixedIdGenerator, RealDateGenerator, RealIdGenerator
from .in_memory_webinar_repository import InMemoryWebinarRepository
from .redis_client import RedisClient, close_redis, get_redis
from .sqlalchemy_webinar_repository import SqlAlchemyWebinarRepository

__all__ = [
    'RealDateGenerator',
    'FixedDateGenerator',
    'RealIdGenerator',
    'FixedIdGenerator',
    'InMemoryWebinarRepository',
    'SqlAlchemyWebinarRepository',
    'RedisClient',
    'get_redis',
    'close_redis',
]
