import init_db
from concert_manager.entities.admin_user import AdminUser
from concert_manager.utils.config import settings
from concert_manager.utils.database import SessionLocal


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Welcome" in response.json()["message"]


def test_metrics_exposes_request_counters(client):
    client.get("/api/venues")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "fastapi_requests_total" in response.text
    assert 'path="/api/venues"' in response.text


def test_init_database_and_seed_admin():
    init_db.init_database()

    admin = init_db.seed_admin("root", "changeme")
    again = init_db.seed_admin("root", "changeme")

    assert admin.id == again.id
    with SessionLocal() as session:
        assert session.query(AdminUser).filter_by(username="root").count() == 1


def test_seed_admin_skipped_without_credentials(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_USERNAME", None)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", None)

    assert init_db.seed_admin() is None


def test_middleware_handles_every_route_kind(client, make_concert):
    concert = make_concert()

    # TestClient re-raises anything that escapes the middleware
    assert client.get("/").status_code == 200
    assert client.get("/metrics").status_code == 200
    assert client.get(f"/api/concerts/{concert['id']}").status_code == 200
    assert client.get("/api/concerts/9999").status_code == 404
    assert client.get("/not-a-route").status_code == 404
    assert client.post("/api/login", json={}).status_code == 400

    metrics = client.get("/metrics").text
    assert 'status_code="404"' in metrics
