"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import asyncio
from typing import Any, Callable, TypeVar, Generic
from supabase import Client


T = TypeVar("T")
R = TypeVar("R")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _run() to execute blocking client calls off the event loop

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            async def get_by_id(self, user_id: UUID) -> User:
                result = await self._run(
                    lambda: self._db.table("users").select("*").eq("id", str(user_id)).execute()
                )
                ...
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    async def _run(self, query: Callable[[], R]) -> R:
        """
        Run a blocking Supabase query in a worker thread.

        Awaiting this from a task means cancelling the task abandons the
        query promptly instead of blocking the event loop until it returns.
        """
        return await asyncio.to_thread(query)

    @staticmethod
    def _first(rows: Any) -> Any:
        """Return the first row of a result set, or None when empty."""
        if not rows:
            return None
        return rows[0]
