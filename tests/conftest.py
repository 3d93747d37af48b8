import itertools
import os
from datetime import date, timedelta

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from concert_manager.utils.database import Base, get_db, db_session_context


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """A session bound to the test database and installed as the current one."""
    session = session_factory()
    token = db_session_context.set(session)
    yield session
    db_session_context.reset(token)
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def days_from_today(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


_unique = itertools.count(1)


@pytest.fixture
def make_staff(client):
    def _make(**overrides):
        payload = {"name": f"Manager {next(_unique)}", "role": "Manager"}
        payload.update(overrides)
        response = client.post("/api/staff", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_venue(client):
    def _make(**overrides):
        payload = {"name": f"Hall {next(_unique)}", "location": "Downtown", "capacity": 500}
        payload.update(overrides)
        response = client.post("/api/venues", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_artist(client):
    def _make(**overrides):
        payload = {"name": f"Artist {next(_unique)}", "genre": "Rock", "contactInfo": "booking@example.com"}
        payload.update(overrides)
        response = client.post("/api/artists", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_platform(client):
    def _make(**overrides):
        payload = {"name": "LiveCast", "url": "https://livecast.example.com", "streamingDate": days_from_today(30)}
        payload.update(overrides)
        response = client.post("/api/streaming", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_attendee(client):
    def _make(**overrides):
        payload = {"name": "Alex Fan", "contactInfo": f"fan{next(_unique)}@example.com", "password": "s3cret"}
        payload.update(overrides)
        response = client.post("/api/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_concert(client, make_venue, make_artist, make_staff):
    def _make(**overrides):
        payload = {
            "name": f"Concert {next(_unique)}",
            "date": days_from_today(30),
            "time": "19:30",
            "ticketSalesLimit": 100,
            "price": 50.0,
        }
        payload.update(overrides)
        if "venueId" not in payload:
            payload["venueId"] = make_venue()["venueId"]
        if "artistId" not in payload:
            payload["artistId"] = make_artist()["artistId"]
        if "managerId" not in payload:
            payload["managerId"] = make_staff()["staffId"]
        response = client.post("/api/concerts", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def buy_ticket(client):
    def _buy(concert_id, attendee_id, **overrides):
        payload = {"concertId": concert_id, "attendeeId": attendee_id}
        payload.update(overrides)
        return client.post("/api/tickets", json=payload)
    return _buy
