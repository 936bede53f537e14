import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from clientreport.config.settings import Settings
from clientreport.database.connection import close_pool, get_connection, init_pool
from clientreport.database.models import ProjectRecord
from clientreport.database.repositories.project_repository import ProjectRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS projects (
    id BIGSERIAL PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    owner_id TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
CREATE TABLE IF NOT EXISTS files (
    id BIGSERIAL PRIMARY KEY,
    project_id BIGINT NOT NULL REFERENCES projects (id) ON DELETE CASCADE,
    file_name TEXT NOT NULL,
    media_type TEXT,
    file_size BIGINT NOT NULL,
    storage_path TEXT NOT NULL,
    uploaded_by TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
CREATE TABLE IF NOT EXISTS reports (
    id BIGSERIAL PRIMARY KEY,
    project_id BIGINT NOT NULL REFERENCES projects (id) ON DELETE CASCADE,
    file_id BIGINT REFERENCES files (id) ON DELETE SET NULL,
    title TEXT NOT NULL,
    content TEXT,
    summary TEXT,
    insights JSONB,
    generated_by TEXT NOT NULL,
    generated_at TIMESTAMPTZ NOT NULL DEFAULT now(),
    status TEXT NOT NULL DEFAULT 'completed'
);
"""


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "clientreport_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(_SCHEMA)
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to point at one.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def owner_id() -> str:
    return f"user-{uuid.uuid4()}"


@pytest.fixture
def seed_project(integration_pool: None, owner_id: str) -> Generator[ProjectRecord, None, None]:
    project = ProjectRepository().create("Integration project", owner_id, "seeded")
    try:
        yield project
    finally:
        with get_connection() as conn:
            conn.execute("DELETE FROM projects WHERE id = %s", (project.id,))
            conn.commit()


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    return tmp_path
