"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Lookups match email and username exactly (case-sensitive); the table's
UNIQUE constraints back up the service-level uniqueness checks.
"""

from typing import Any, Callable, TypeVar
from uuid import UUID

from shared.repository import BaseRepository

from .exceptions import UserNotFoundError, UserStoreError
from .models import User

USERS_TABLE = "users"
USER_COLUMNS = "id, email, password_hash, username, created_at, updated_at"

R = TypeVar("R")


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Every client failure is re-raised as UserStoreError with the failed
    action in the message. A missing row raises UserNotFoundError.
    """

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create(self, user: User) -> User:
        """
        Insert a new user row.

        Args:
            user: The user to persist, with ID and timestamps already set.

        Returns:
            The stored user as returned by the database.
        """
        data = {
            "id": str(user.id),
            "email": user.email,
            "password_hash": user.password_hash,
            "username": user.username,
            "created_at": user.created_at.isoformat(),
            "updated_at": user.updated_at.isoformat(),
        }
        result = await self._execute(
            "create user",
            lambda: self._db.table(USERS_TABLE).insert(data).execute(),
        )
        row = self._first(result.data)
        if row is None:
            raise UserStoreError("failed to create user: no row returned")
        return self._map_to_user(row)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a user by ID."""
        result = await self._execute(
            "get user by id",
            lambda: self._db.table(USERS_TABLE)
            .select(USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute(),
        )
        row = self._first(result.data)
        if row is None:
            raise UserNotFoundError("id", str(user_id))
        return self._map_to_user(row)

    async def get_by_email(self, email: str) -> User:
        """Get a user by exact email."""
        result = await self._execute(
            "get user by email",
            lambda: self._db.table(USERS_TABLE)
            .select(USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute(),
        )
        row = self._first(result.data)
        if row is None:
            raise UserNotFoundError("email", email)
        return self._map_to_user(row)

    async def email_exists(self, email: str) -> bool:
        """Check whether any user has this email."""
        return await self._exists("email", email)

    async def username_exists(self, username: str) -> bool:
        """Check whether any user has this username."""
        return await self._exists("username", username)

    async def ping(self) -> None:
        """Run a trivial query to check the store is reachable."""
        await self._execute(
            "ping user store",
            lambda: self._db.table(USERS_TABLE).select("id").limit(1).execute(),
        )

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    async def _exists(self, column: str, value: str) -> bool:
        result = await self._execute(
            f"check {column} existence",
            lambda: self._db.table(USERS_TABLE)
            .select("id")
            .eq(column, value)
            .limit(1)
            .execute(),
        )
        return bool(result.data)

    async def _execute(self, action: str, query: Callable[[], R]) -> R:
        """Run a query, wrapping client failures in UserStoreError."""
        try:
            return await self._run(query)
        except Exception as e:
            raise UserStoreError(f"failed to {action}: {e}") from e

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=UUID(str(data["id"])),
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
