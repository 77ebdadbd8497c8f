"""
Тест миграций Alembic на временной SQLite базе
"""
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parent.parent


class TestMigrations:
    """Схема, создаваемая миграциями"""

    def test_upgrade_and_downgrade(self, tmp_path):
        db_path = tmp_path / "knowbase.db"
        config = Config(str(ROOT / "alembic.ini"))
        config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")

        command.upgrade(config, "head")

        engine = create_engine(f"sqlite:///{db_path}")
        try:
            inspector = inspect(engine)
            assert {"users", "documents"} <= set(inspector.get_table_names())

            user_indexes = {index["name"]: index for index in inspector.get_indexes("users")}
            assert user_indexes["ix_users_email"]["unique"]

            foreign_keys = inspector.get_foreign_keys("documents")
            assert foreign_keys[0]["referred_table"] == "users"
            assert foreign_keys[0]["constrained_columns"] == ["created_by"]
        finally:
            engine.dispose()

        command.downgrade(config, "base")

        engine = create_engine(f"sqlite:///{db_path}")
        try:
            assert "documents" not in inspect(engine).get_table_names()
        finally:
            engine.dispose()
