import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.database import get_db
from app.main import app
from app.config import settings
from app.schemas.portfolio import PortfolioRecord, Speciality
from app.services.account_service import account_service
from app.services.synonyms import SynonymDictionary


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _make_record(name: str, *specialities: tuple[str, str], url: str | None = None) -> PortfolioRecord:
    return PortfolioRecord(
        name=name,
        url=url or name.lower().replace(" ", "-"),
        image="/static/no-image.png",
        description=f"{name} portfolio",
        specialities=[Speciality(title=title, description=desc) for title, desc in specialities],
    )


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def synonyms():
    return SynonymDictionary.default()


@pytest.fixture
def tmp_data_dir(tmp_path):
    data_dir = tmp_path / "TestDirectory"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def test_db(tmp_data_dir):
    db_path = tmp_data_dir / "db.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    from app.database import init_db
    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_account_service():
    """Reset session state for each test."""
    original = account_service.__dict__.copy()
    account_service._active_tokens = {}
    yield account_service
    account_service.__dict__.update(original)


@pytest.fixture
def client(tmp_data_dir, test_db, fresh_account_service):
    original_data_dir = settings.data_dir
    settings.data_dir = tmp_data_dir
    with TestClient(app) as c:
        yield c
    settings.data_dir = original_data_dir
