"""Supabase Auth (GoTrue) identity provider adapter."""

from src.infrastructure.providers.supabase.supabase_auth_client import (
    SupabaseAuthClient,
)

__all__ = ["SupabaseAuthClient"]
