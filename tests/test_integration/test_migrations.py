import os
import tempfile
import unittest
from pathlib import Path

from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect, select
from sqlalchemy.orm import sessionmaker

import models_bootstrap
from main import app
from core.config_loader import settings
from core.database import Base, enable_sqlite_foreign_keys, get_db
from account.models import Role

ROOT = Path(__file__).resolve().parents[2]


class MigrationTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.url = "sqlite:///" + os.path.join(self._tmp.name, "movietheater.db")

        self.config = Config()
        self.config.set_main_option("script_location", str(ROOT / "alembic"))
        self.config.set_main_option("sqlalchemy.url", self.url)

        self.engine = create_engine(self.url, connect_args={"check_same_thread": False}, future=True)
        enable_sqlite_foreign_keys(self.engine)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        self.engine.dispose()
        self._tmp.cleanup()

    def test_upgrade_creates_every_table(self):
        command.upgrade(self.config, "head")

        tables = set(inspect(self.engine).get_table_names()) - {"alembic_version"}
        self.assertEqual(tables, set(Base.metadata.tables))

    def test_upgrade_seeds_roles(self):
        command.upgrade(self.config, "head")

        with sessionmaker(bind=self.engine, future=True)() as db:
            roles = [(r.role_id, r.role_name) for r in db.scalars(select(Role).order_by(Role.role_id))]
        self.assertEqual(roles, [(1, "admin"), (2, "employee"), (3, "member")])

    def test_downgrade_drops_everything(self):
        command.upgrade(self.config, "head")
        command.downgrade(self.config, "base")

        self.assertEqual(set(inspect(self.engine).get_table_names()) - {"alembic_version"}, set())

    def test_migrated_database_accepts_employee_registration(self):
        command.upgrade(self.config, "head")
        rounds = settings.PASSWORD_HASH_ROUNDS
        settings.PASSWORD_HASH_ROUNDS = 4
        self.addCleanup(setattr, settings, "PASSWORD_HASH_ROUNDS", rounds)

        TestingSession = sessionmaker(bind=self.engine, future=True)

        def _test_db():
            session = TestingSession()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = _test_db
        client = TestClient(app)

        resp = client.post("/api/employees", json={"username": "thao", "password": "pw"})
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(client.get("/api/employees/EM001").json()["account"]["role_id"], 2)


if __name__ == "__main__":
    unittest.main()
