"""
Tests de los endpoints de configuración
"""
import pytest


@pytest.fixture
def purposes(client, admin_headers):
    created = []
    for order, (name, value) in enumerate([("Training", "training"), ("Routine check", "routine_check")]):
        response = client.post(
            "/api/configurations",
            json={
                "config_type": "visit_purposes",
                "config_name": f" {name} ",
                "config_value": value,
                "display_order": 2 - order
            },
            headers=admin_headers
        )
        assert response.status_code == 201
        created.append(response.json())
    return created


def test_list_configurations_by_type_in_display_order(client, auth_headers, purposes):
    response = client.get(
        "/api/configurations",
        params={"config_type": "visit_purposes"},
        headers=auth_headers
    )
    
    assert response.status_code == 200
    assert [c["config_value"] for c in response.json()] == ["routine_check", "training"]
    assert response.json()[0]["config_name"] == "Routine check"


def test_inactive_configurations_not_listed(client, auth_headers, admin_headers, purposes):
    client.put(f"/api/configurations/{purposes[0]['id']}", json={"is_active": False}, headers=admin_headers)
    
    response = client.get("/api/configurations", headers=auth_headers)
    
    assert [c["config_value"] for c in response.json()] == ["routine_check"]


def test_non_admin_cannot_create_configuration(client, auth_headers):
    response = client.post(
        "/api/configurations",
        json={"config_type": "canna_products", "config_name": "Terra", "config_value": "terra"},
        headers=auth_headers
    )
    
    assert response.status_code == 403
    assert response.json()["detail"] == "Insufficient permissions"


def test_unknown_config_type_rejected(client, admin_headers):
    response = client.post(
        "/api/configurations",
        json={"config_type": "colors", "config_name": "Red", "config_value": "red"},
        headers=admin_headers
    )
    
    assert response.status_code == 422


def test_delete_configuration(client, admin_headers, purposes):
    response = client.delete(f"/api/configurations/{purposes[0]['id']}", headers=admin_headers)
    missing = client.delete(f"/api/configurations/{purposes[0]['id']}", headers=admin_headers)
    
    assert response.status_code == 200
    assert missing.status_code == 404
