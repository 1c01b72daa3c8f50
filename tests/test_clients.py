"""
Tests de los clientes HTTP y del ciclo de vida completo contra el API
"""
import asyncio
import json

import httpx
import pytest

from conftest import make_token
from visit_report.clients import CustomerApiClient, VisitApiClient
from visit_report.lifecycle import LifecycleState, PersistenceError, VisitReportLifecycle
from visit_report.main import app
from visit_report.models import ShopVisit


BASE_URL = "http://visits.test/api"


def mock_client(cls, handler):
    return cls("token-123", base_url=BASE_URL, transport=httpx.MockTransport(handler))


# ============================================================================
# Clientes con transporte simulado
# ============================================================================

def test_create_sends_bearer_token_and_returns_record():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["Authorization"]
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "v1", "is_draft": True})

    record = asyncio.run(mock_client(VisitApiClient, handler).create({"customer_id": "c1"}))

    assert record["id"] == "v1"
    assert seen["auth"] == "Bearer token-123"
    assert seen["url"] == f"{BASE_URL}/visits"
    assert seen["body"] == {"customer_id": "c1"}


def test_unexpected_status_raises_persistence_error():
    def handler(request):
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(PersistenceError) as exc_info:
        asyncio.run(mock_client(VisitApiClient, handler).update("v1", {"notes": "x"}))

    assert exc_info.value.status_code == 500


def test_connection_error_raises_persistence_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PersistenceError) as exc_info:
        asyncio.run(mock_client(VisitApiClient, handler).delete("v1"))

    assert exc_info.value.status_code is None


def test_timeout_raises_persistence_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PersistenceError):
        asyncio.run(mock_client(VisitApiClient, handler).create({}))


def test_malformed_body_raises_persistence_error():
    def handler(request):
        return httpx.Response(200, content=b"<html>gateway</html>")

    with pytest.raises(PersistenceError) as exc_info:
        asyncio.run(mock_client(VisitApiClient, handler).update("v1", {"notes": "x"}))

    assert exc_info.value.status_code == 200


def test_missing_records_return_none():
    def handler(request):
        return httpx.Response(404, json={"detail": "not found"})

    assert asyncio.run(mock_client(VisitApiClient, handler).get("v1")) is None
    assert asyncio.run(mock_client(CustomerApiClient, handler).get_by_id("c1")) is None


def test_get_customer_by_id():
    def handler(request):
        assert request.url.path == "/api/customers/c1"
        return httpx.Response(200, json={"id": "c1", "shop_name": "Acme Grow"})

    customer = asyncio.run(mock_client(CustomerApiClient, handler).get_by_id("c1"))

    assert customer["shop_name"] == "Acme Grow"


# ============================================================================
# Ciclo de vida completo contra la aplicación
# ============================================================================

@pytest.mark.integration
def test_full_lifecycle_against_api(sales_user, customer, db):
    token = make_token(sales_user)
    transport = httpx.ASGITransport(app=app)
    visits = VisitApiClient(token, base_url="http://testserver/api", transport=transport)
    customers = CustomerApiClient(token, base_url="http://testserver/api", transport=transport)
    customer_id = customer.id

    async def scenario():
        lifecycle = VisitReportLifecycle(visits, customers=customers, autosave_interval=3600)
        await lifecycle.select_customer(customer_id)
        lifecycle.update_fields({"visit_purpose": "routine_check", "organic_percentage": 37})
        await lifecycle.advance_section(0)
        state_after_create = lifecycle.state

        lifecycle.update_fields({
            "product_visibility_score": 50,
            "commercial_outcome": "information_only",
            "overall_satisfaction": 6,
            "visit_photos": ["https://files.example.com/shelf.jpg"],
            "signature": "data:image/png;base64,iVBORw0KGgo=",
            "signature_signer_name": "Anna Schmidt",
            "signature_date": "2024-01-01T15:30:00Z",
        })
        assert await lifecycle.save_draft()
        record = await lifecycle.submit()
        return lifecycle, state_after_create, record

    lifecycle, state_after_create, record = asyncio.run(scenario())

    assert state_after_create is LifecycleState.DRAFT_PERSISTED
    assert lifecycle.state is LifecycleState.FINALIZED
    assert record["is_draft"] is False
    assert record["calculated_score"] == pytest.approx(35)
    assert record["priority_level"] == "high"

    stored = db.query(ShopVisit).one()
    assert stored.id == lifecycle.visit_id
    assert stored.shop_name == "Acme Grow"
    assert stored.mineral_percentage == 63
    assert stored.created_by == sales_user.id
