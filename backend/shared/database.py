"""
Database client factory for Supabase.

The backend talks to the store with the service-role key, so Row Level
Security is bypassed: every ownership rule is enforced by the repositories'
conditional queries.
"""

import logging

from supabase import create_client, Client, ClientOptions

from .config import Settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role.

    Args:
        settings: Application settings

    Returns:
        Supabase client configured with the service role key and a bounded
        request timeout.

    Raises:
        ConfigurationError: If the store URL or key is missing
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ConfigurationError(
            "Supabase configuration missing. "
            "Set CHIRP_SUPABASE_URL and CHIRP_SUPABASE_SERVICE_ROLE_KEY environment variables.",
            code="STORE_NOT_CONFIGURED",
        )

    logger.info("Connecting to store at %s", settings.supabase_url)
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(
            postgrest_client_timeout=settings.store_timeout_seconds,
        ),
    )
