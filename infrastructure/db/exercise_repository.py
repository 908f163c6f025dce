"""
Supabase Exercise Repository Implementation.

This module implements the ExerciseRepository protocol using Supabase as the backend.
Dates are stored in a timestamptz column and compared as ISO 8601 strings.
"""
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any, Union

from supabase import Client

from application.exceptions import StoreError
from domain.dates import to_iso
from infrastructure.db.errors import to_store_error

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    All Supabase query logic for exercises is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = "exercises"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the exercises table
        """
        self._client = client
        self._table = table

    def add(
        self,
        user_id: str,
        username: str,
        *,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> Dict[str, Any]:
        """Persist a new exercise for a user."""
        record = {
            "user_id": user_id,
            "username": username,
            "description": description,
            "duration": duration,
            "date": to_iso(date),
        }
        try:
            result = self._client.table(self._table).insert(record).execute()
        except Exception as e:
            raise to_store_error(e, f"save exercise for user {user_id}") from e

        if not result.data:
            logger.error("Failed to insert exercise: empty result")
            raise StoreError("Exercise insert returned no data")

        logger.info(f"Exercise saved for user {user_id}: {result.data[0].get('id')}")
        return result.data[0]

    def query(
        self,
        user_id: str,
        *,
        date_from: datetime,
        date_to: datetime,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Get exercises strictly between date_from and date_to, newest first."""
        try:
            query = self._client.table(self._table) \
                .select("*") \
                .eq("user_id", user_id) \
                .gt("date", to_iso(date_from)) \
                .lt("date", to_iso(date_to)) \
                .order("date", desc=True)

            if limit:
                query = query.limit(limit)

            result = query.execute()
        except Exception as e:
            raise to_store_error(e, f"query exercises for user {user_id}") from e
        return result.data if result.data else []
