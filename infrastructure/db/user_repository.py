"""
Supabase User Repository Implementation.

This module implements the UserRepository protocol using Supabase as the backend.
Username uniqueness is enforced by a unique constraint on the users table.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

from application.exceptions import StoreError
from domain.identifiers import generate_short_id
from infrastructure.db.errors import to_store_error

logger = logging.getLogger(__name__)


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = "users"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the users table
        """
        self._client = client
        self._table = table

    def create(self, username: str) -> Dict[str, Any]:
        """Insert a user with a generated short id."""
        record = {"id": generate_short_id(), "username": username}
        try:
            result = self._client.table(self._table).insert(record).execute()
        except Exception as e:
            raise to_store_error(e, f"create user {username!r}") from e

        if not result.data:
            logger.error("Failed to insert user: empty result")
            raise StoreError("User insert returned no data")

        saved = result.data[0]
        logger.info(f"User created: {saved['id']}")
        return saved

    def list_all(self) -> List[Dict[str, Any]]:
        """Get every user."""
        try:
            result = self._client.table(self._table).select("id, username").execute()
        except Exception as e:
            raise to_store_error(e, "list users") from e
        return result.data if result.data else []

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a single user by id."""
        try:
            result = self._client.table(self._table) \
                .select("id, username") \
                .eq("id", user_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            raise to_store_error(e, f"get user {user_id}") from e
        return result.data[0] if result.data else None
