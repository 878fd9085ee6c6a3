import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine
from sqlmodel.pool import StaticPool

from salon.db import get_session, init_db
from salon.main import app
from salon.notifications import get_notifier


class RecordingNotifier:
    """Stands in for BookingNotifier; remembers what would have been sent."""

    def __init__(self):
        self.sent = []

    def submit(self, booking):
        self.sent.append(booking)
        return None


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(engine, notifier):
    def session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = session_override
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def booking_payload():
    return {
        "name": "Jane",
        "email": "jane@example.com",
        "date": "2025-11-20",
        "time": "10:00",
        "services": ["haircut"],
    }
