"""Shared fixtures. Environment must be set before umlgen.core.config is imported."""
import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")
os.environ.setdefault("EXPORTS_DIR", tempfile.mkdtemp(prefix="umlgen-exports-"))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def db_session():
    """In-memory SQLite session with the export_jobs table created."""
    from umlgen.db.session import Base
    from umlgen.db import models  # noqa: F401  registers ExportJob

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    db = TestSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def library_diagram():
    """Author/Book diagram in the HTTP input shape."""
    return {
        "classes": [
            {"name": "Author", "attributes": ["name: String"], "methods": []},
            {"name": "Book", "attributes": ["title: String", "int pages"], "methods": ["read()"]},
        ],
        "relations": [
            {"source": "Author", "target": "Book", "type": "ONE_TO_MANY", "bidirectional": False},
        ],
        "package_name": "com.example.library",
        "project_name": "library-api",
    }
