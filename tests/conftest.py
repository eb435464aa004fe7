import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from progress_log import create_app
from progress_log.repository import EntryRepository


@pytest.fixture
def app(tmp_path):
    """Fixture for an app backed by a throwaway SQLite file."""
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'progress_log.db'}",
        "RATELIMIT_ENABLED": False,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'repository.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    """Repository over a plain SQLAlchemy session, no Flask involved."""
    with Session(engine) as session:
        repo = EntryRepository(session)
        repo.ensure_schema()
        yield repo
