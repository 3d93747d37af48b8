import pytest

from concert_manager.entities.admin_user import AdminUser
from concert_manager.repositories.admin_repository import admin_repository
from concert_manager.utils.security import hash_password


@pytest.fixture
def admin(db):
    return admin_repository.ensure_admin("root", "changeme")


def test_admin_login(client, admin, session_factory):
    response = client.post("/api/admin/login", json={"username": "root", "password": "changeme"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "adminId": admin.id, "username": "root"}

    with session_factory() as session:
        assert session.get(AdminUser, admin.id).last_login_date is not None


def test_admin_login_wrong_password(client, admin):
    response = client.post("/api/admin/login", json={"username": "root", "password": "wrong"})

    assert response.status_code == 401


def test_inactive_admin_cannot_login(client, db):
    db.add(AdminUser(username="retired", password=hash_password("pw"), is_active=False))
    db.commit()

    response = client.post("/api/admin/login", json={"username": "retired", "password": "pw"})

    assert response.status_code == 401


def test_admin_login_requires_fields(client):
    assert client.post("/api/admin/login", json={"password": "x"}).status_code == 400


def test_ensure_admin_is_idempotent(db):
    first = admin_repository.ensure_admin("root", "changeme")
    second = admin_repository.ensure_admin("root", "other")

    assert first.id == second.id
    assert db.query(AdminUser).count() == 1
