"""
Redis caching for single-webinar reads.

What we cache:
  - GET /webinars/{id} responses, JSON-serialized
  - Key pattern: "webinars:{id}"

Invalidation:
  - A successful seat change deletes the webinar's key
  - TTL (REDIS_CACHE_TTL) as safety net

Redis is advisory only. Any Redis failure is logged and treated as a miss so
reads fall through to the database.
"""

import json
from typing import Optional

from redis.exceptions import RedisError

from webinar_api.core.config import get_settings
from webinar_api.core.logging import get_logger
from webinar_api.core.metrics import record_cache_operation
from webinar_api.infrastructure.redis_client import get_redis

logger = get_logger(__name__)


def _make_webinar_key(webinar_id: str) -> str:
    return f"webinars:{webinar_id}"


async def get_cached_webinar(webinar_id: str) -> Optional[dict]:
    client = await get_redis()
    if not client:
        return None

    key = _make_webinar_key(webinar_id)
    try:
        data = await client.get(key)
    except RedisError as e:
        record_cache_operation("get", "error")
        logger.error("cache_get_error", key=key, error=str(e))
        return None

    if data:
        record_cache_operation("get", "hit")
        logger.debug("cache_hit", key=key)
        return json.loads(data)
    record_cache_operation("get", "miss")
    logger.debug("cache_miss", key=key)
    return None


async def set_cached_webinar(webinar_id: str, data: dict) -> None:
    client = await get_redis()
    if not client:
        return

    ttl = get_settings().REDIS_CACHE_TTL
    key = _make_webinar_key(webinar_id)
    try:
        await client.setex(key, ttl, json.dumps(data, default=str))
        record_cache_operation("set", "ok")
        logger.debug("cache_set", key=key, ttl=ttl)
    except RedisError as e:
        record_cache_operation("set", "error")
        logger.error("cache_set_error", key=key, error=str(e))


async def invalidate_webinar_cache(webinar_id: str) -> None:
    client = await get_redis()
    if not client:
        return

    key = _make_webinar_key(webinar_id)
    try:
        deleted = await client.delete(key)
        record_cache_operation("invalidate", "ok")
        logger.info("cache_invalidated", key=key, keys_deleted=deleted)
    except RedisError as e:
        record_cache_operation("invalidate", "error")
        logger.error("cache_invalidation_error", key=key, error=str(e))


async def get_cache_stats() -> dict:
    """Redis keyspace hit/miss statistics for the health endpoint."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
    except RedisError as e:
        return {"status": "error", "error": str(e)}

    hits = info.get("keyspace_hits", 0)
    misses = info.get("keyspace_misses", 0)
    return {
        "status": "connected",
        "hits": hits,
        "misses": misses,
        "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
    }
