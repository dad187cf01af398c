"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    @pytest.mark.asyncio
    async def test_run_returns_query_result(self):
        """_run should execute the query and return its result."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            async def get_all(self) -> list[dict]:
                result = await self._run(lambda: self._db.table("test").select("*").execute())
                return result.data

        repo = TestRepository(mock_db)
        result = await repo.get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("test")

    @pytest.mark.asyncio
    async def test_run_propagates_errors(self):
        """Errors raised by the query reach the caller unchanged."""
        repo = BaseRepository(MagicMock())

        def failing():
            raise ConnectionError("refused")

        with pytest.raises(ConnectionError, match="refused"):
            await repo._run(failing)

    @pytest.mark.parametrize(
        "rows, expected",
        [
            ([{"id": 1}, {"id": 2}], {"id": 1}),
            ([], None),
            (None, None),
        ],
    )
    def test_first(self, rows, expected):
        assert BaseRepository._first(rows) == expected
