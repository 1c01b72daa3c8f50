"""
Tests de los endpoints de usuarios y del registro de auditoría
"""
from visit_report.models import AuditLog, User
from visit_report.utils import verify_password


def test_get_me(client, auth_headers, sales_user):
    response = client.get("/api/users/me", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["email"] == "rep@canna.com"
    assert "password_hash" not in response.json()


def test_update_own_profile(client, auth_headers):
    response = client.put(
        "/api/users/profile",
        json={"full_name": "  Rita Rep ", "territory": "North"},
        headers=auth_headers
    )
    
    assert response.status_code == 200
    assert response.json()["full_name"] == "Rita Rep"
    assert response.json()["territory"] == "North"


def test_list_users_requires_admin(client, auth_headers, admin_headers):
    assert client.get("/api/users", headers=auth_headers).status_code == 403
    
    response = client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200
    assert {u["email"] for u in response.json()} == {"rep@canna.com", "admin@canna.com"}


def test_admin_update_user_writes_audit_log(client, admin_headers, sales_user, db):
    response = client.put(
        f"/api/users/{sales_user.id}",
        json={"role": "manager", "territory": "South"},
        headers=admin_headers
    )
    
    assert response.status_code == 200
    assert response.json()["role"] == "manager"
    
    entry = db.query(AuditLog).filter(AuditLog.action == "update_user").one()
    assert entry.actor_email == "admin@canna.com"
    assert entry.target_user_id == sales_user.id
    assert entry.details == {"role": "manager", "territory": "South"}


def test_admin_update_unknown_user(client, admin_headers):
    response = client.put("/api/users/missing", json={"role": "admin"}, headers=admin_headers)
    
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_reset_password(client, admin_headers, sales_user, db):
    response = client.post(
        f"/api/users/{sales_user.id}/reset-password",
        json={"password": "n3w-Passw0rd"},
        headers=admin_headers
    )
    
    assert response.status_code == 200
    assert response.json()["message"] == "Password reset successfully"
    
    db.expire_all()
    user = db.query(User).filter(User.id == sales_user.id).one()
    assert verify_password("n3w-Passw0rd", user.password_hash)
    assert not verify_password("wrong", user.password_hash)
    assert user.password_reset_required is True
    assert user.password_reset_by == "admin@canna.com"
    assert db.query(AuditLog).filter(AuditLog.action == "reset_password").count() == 1


def test_reset_password_too_short(client, admin_headers, sales_user):
    response = client.post(
        f"/api/users/{sales_user.id}/reset-password",
        json={"password": "short"},
        headers=admin_headers
    )
    
    assert response.status_code == 422


def test_deactivated_user_loses_access(client, admin_headers, auth_headers, sales_user):
    client.put(f"/api/users/{sales_user.id}", json={"status": "inactive"}, headers=admin_headers)
    
    assert client.get("/api/users/me", headers=auth_headers).status_code == 401


def test_health(client):
    response = client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
