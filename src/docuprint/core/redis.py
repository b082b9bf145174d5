"""
Redis Configuration

Optional async Redis client, used as the rate-limit backend when REDIS_URL
is configured.
"""

from redis.asyncio import Redis, from_url

from docuprint.core.config import settings

# Redis client instance
redis_client: Redis | None = None


async def init_redis() -> Redis | None:
    """
    Initialize Redis connection.

    Call this on application startup. Does nothing when REDIS_URL is unset.
    """
    global redis_client
    if not settings.redis_url:
        return None

    redis_client = from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
    )
    # Test connection
    await redis_client.ping()
    return redis_client


def get_redis() -> Redis | None:
    """Get the Redis client, or None if Redis is not configured."""
    return redis_client


def is_redis_available() -> bool:
    """Check if Redis client is initialized and available."""
    return redis_client is not None


async def close_redis() -> None:
    """Close Redis connection."""
    global redis_client
    if redis_client:
        await redis_client.aclose()
        redis_client = None
