import os
import sys
import tempfile
from pathlib import Path

# Keep the module-level engine and log files off the real data dir
os.environ.setdefault("PETCLINIC_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("PETCLINIC_DATA_DIR", str(Path(tempfile.gettempdir()) / "petclinic-tests"))

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from models import Base, Owner
from repositories.owner_repository import OwnerRepository
from services.owner_service import OwnerService


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test, shared across threads"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def owner_repository(db_session):
    return OwnerRepository(db_session)


@pytest.fixture
def owner_service(db_session):
    return OwnerService(db_session)


@pytest.fixture
def test_owner():
    """Unsaved owner used as the starting point of most tests"""
    return Owner(
        first_name="John",
        last_name="Doe",
        address="123 Main St",
        city="Springfield",
        telephone="555-1234",
    )


@pytest.fixture
def client(db_engine):
    """TestClient whose routes use the per-test database"""
    from fastapi.testclient import TestClient
    from database import get_db
    from main import app

    SessionLocal = sessionmaker(bind=db_engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would create tables on the module engine
    yield TestClient(app)
    app.dependency_overrides.clear()
