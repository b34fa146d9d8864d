"""애플리케이션 생명주기 테스트"""

from unittest.mock import AsyncMock, patch

import pytest

from app.main import app, lifespan


@pytest.mark.asyncio
async def test_lifespan_migrates_on_startup_and_closes_db_on_shutdown():
    with patch("app.main.run_migrations_on_startup") as migrate, patch(
        "app.main.close_db", new_callable=AsyncMock
    ) as close_db:
        async with lifespan(app):
            migrate.assert_called_once()
            close_db.assert_not_awaited()

        close_db.assert_awaited_once()
