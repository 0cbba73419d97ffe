from __future__ import annotations

import logging
from typing import Optional

from supabase import Client, create_client

from app.core.config import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Optional[Client]:
    """
    Initialize and cache a Supabase client when user-document storage is
    switched to Supabase. Returns None otherwise so the app keeps per-user
    documents in memory.
    """
    global _client
    if _client is not None:
        return _client

    if not settings.use_supabase:
        return None

    if not (settings.supabase_url and settings.supabase_anon_key):
        logger.warning("USE_SUPABASE is set but credentials are missing; using in-memory storage.")
        return None

    try:
        _client = create_client(settings.supabase_url, settings.supabase_anon_key)
        logger.info("Supabase client initialized.")
    except Exception as exc:  # pragma: no cover - depends on remote project
        logger.exception("Failed to initialize Supabase client: %s", exc)
        _client = None
    return _client
