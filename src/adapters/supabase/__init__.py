"""Auth provider adapters - Supabase Auth REST implementation."""

from .client import SupabaseAuthClient

__all__ = ["SupabaseAuthClient"]
