"""
Redis client for caching.
Separated from business logic for clean architecture.
"""

from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from webinar_api.core.config import get_settings
from webinar_api.core.logging import get_logger

logger = get_logger(__name__)


class RedisClient:
    """Lazily connected, process-wide async Redis client."""

    _instance: Optional[redis.Redis] = None

    @classmethod
    async def get_client(cls) -> Optional[redis.Redis]:
        """Get or create the client. None when Redis is disabled or unreachable."""
        settings = get_settings()
        if not settings.REDIS_ENABLED:
            return None

        if cls._instance is None:
            client = redis.from_url(
                settings.REDIS_URL,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
            )
            try:
                await client.ping()
            except RedisError as e:
                logger.error("redis_connection_failed", url=settings.REDIS_URL, error=str(e))
                await client.aclose()
                return None
            logger.info("redis_connected", url=settings.REDIS_URL)
            cls._instance = client
        return cls._instance

    @classmethod
    async def close(cls):
        if cls._instance:
            await cls._instance.aclose()
            cls._instance = None


async def get_redis() -> Optional[redis.Redis]:
    return await RedisClient.get_client()


async def close_redis() -> None:
    await RedisClient.close()
