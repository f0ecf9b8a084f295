"""Supabase client bootstrap.

Usage:
    from argus.bootstrap.supabase import get_supabase_client

    client = await get_supabase_client()
"""

from __future__ import annotations

from structlog import get_logger
from supabase import AsyncClient, acreate_client

from argus.config.app_config import SupabaseConfig

logger = get_logger()

_client: AsyncClient | None = None


async def get_supabase_client(config: SupabaseConfig | None = None) -> AsyncClient:
    """Get the process-wide async Supabase client.

    Creates the client on first call.

    Args:
        config: Connection settings. Read from the environment when omitted.

    Raises:
        ValueError: If the Supabase settings are missing.
    """
    global _client

    if _client is None:
        settings = config or SupabaseConfig.from_environment()
        logger.info(
            "creating_supabase_client",
            component="supabase_bootstrap",
            url=settings.url,
        )
        _client = await acreate_client(settings.url, settings.key)
    return _client


def reset_supabase_bootstrap() -> None:
    """Reset the client singleton for testing."""
    global _client
    _client = None
