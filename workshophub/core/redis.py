from __future__ import annotations

import logging

import redis

from .config import settings

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None
_redis_initialized = False


def _initialize_redis() -> None:
    """Connect to Redis once, if configured. Failures leave revocation disabled."""
    global _redis_client, _redis_initialized

    if _redis_initialized:
        return
    _redis_initialized = True

    redis_url = settings.REDIS_URL
    if not redis_url or redis_url.lower() in ("none", "disabled"):
        logger.info("Redis is not configured. Token revocation on logout is disabled.")
        return

    try:
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
            retry_on_timeout=False,
        )
        client.ping()
    except redis.RedisError as e:
        logger.warning("Redis not available: %s. Token revocation on logout is disabled.", e)
        return

    _redis_client = client
    logger.info("Redis connection established successfully")


def get_redis_client() -> redis.Redis | None:
    """Get Redis client if available, otherwise return None."""
    _initialize_redis()
    return _redis_client


def is_redis_available() -> bool:
    return get_redis_client() is not None
