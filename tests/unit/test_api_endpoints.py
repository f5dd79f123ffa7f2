"""Tests for the HTTP API (health, products, checks, sessions)."""

import httpx
import pytest
from fastapi.testclient import TestClient

from tests.conftest import RecordingHandler, session_payload
from walletgate_demo.dependencies import get_walletgate_client
from walletgate_demo.main import app


@pytest.fixture
def walletgate_handler():
    return RecordingHandler(httpx.Response(201, json={"data": session_payload()}))


@pytest.fixture
def client(make_walletgate, walletgate_handler):
    walletgate = make_walletgate(walletgate_handler)
    app.dependency_overrides[get_walletgate_client] = lambda: walletgate
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  HEALTH & ROOT
# ==========================================


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["walletgate_api"].startswith("http")


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["api"]["v1"]["products"] == "/api/v1/products"


# ==========================================
#  PRODUCTS
# ==========================================


def test_list_products(client):
    response = client.get("/api/v1/products")
    assert response.status_code == 200
    assert len(response.json()) == 8


def test_list_products_by_category(client):
    response = client.get("/api/v1/products", params={"category": "Gaming"})
    assert [p["id"] for p in response.json()] == ["racing-game", "tactical-game"]


def test_list_products_bad_category(client):
    response = client.get("/api/v1/products", params={"category": "Weapons"})
    assert response.status_code == 422


def test_product_detail(client):
    response = client.get("/api/v1/products/cbd-gummies")
    assert response.status_code == 200
    body = response.json()
    assert body["product"]["requires"] == {"age": 18, "residency": True, "identity": False}
    assert body["pricing"]["tax"] == pytest.approx(7.98)
    assert [r["short"] for r in body["requirements"]] == ["18+ age check", "EU residency"]


def test_unknown_product_is_404(client):
    response = client.get("/api/v1/products/unknown")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "DEMO_NOT_FOUND"
    assert error["message"] == "Product not found: unknown"


def test_product_checks_wire_shape(client):
    response = client.get("/api/v1/products/cbd-gummies/checks")
    assert response.json() == [{"type": "age_over", "value": 18}, {"type": "residency_eu"}]


def test_product_snippets(client):
    response = client.get("/api/v1/products/racing-game/snippets")
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"node", "python", "curl", "ruby", "go", "java", "kotlin"}
    assert '{"type":"age_over","value":16}' in body["curl"]


# ==========================================
#  CHECK BUILDER
# ==========================================


def test_build_checks_endpoint(client):
    response = client.post("/api/v1/checks/build", json={
        "ageEnabled": True,
        "ageValue": 5,
        "residencyEnabled": True,
        "identityEnabled": True,
    })
    assert response.status_code == 200
    assert response.json() == [
        {"type": "age_over", "value": 13},
        {"type": "residency_eu"},
        {"type": "identity_verified"},
    ]


def test_build_checks_empty(client):
    response = client.post("/api/v1/checks/build", json={
        "ageEnabled": False, "ageValue": 18, "residencyEnabled": False, "identityEnabled": False,
    })
    assert response.status_code == 200
    assert response.json() == []


def test_build_checks_blank_age_defaults(client):
    response = client.post("/api/v1/checks/build", json={"ageEnabled": True, "ageValue": None})
    assert response.json() == [{"type": "age_over", "value": 18}]


# ==========================================
#  SESSIONS
# ==========================================


def test_start_checkout(client, walletgate_handler):
    response = client.post("/api/v1/checkout/festival-vip/sessions")
    assert response.status_code == 201
    body = response.json()
    assert body["productId"] == "festival-vip"
    assert body["orderId"].startswith("EU-")
    assert body["checks"] == [{"type": "age_over", "value": 18}, {"type": "identity_verified"}]
    assert body["session"]["verificationUrl"].endswith("/v/3f2a9c1e")
    assert body["statusLabel"] == "Waiting for scan"
    assert walletgate_handler.json_body() == {"checks": body["checks"]}


def test_start_checkout_unknown_product(client, walletgate_handler):
    response = client.post("/api/v1/checkout/unknown/sessions")
    assert response.status_code == 404
    assert walletgate_handler.requests == []


def test_start_checkout_rate_limited(client, walletgate_handler):
    walletgate_handler.responses = [httpx.Response(429, headers={"Retry-After": "7"})]
    response = client.post("/api/v1/checkout/craft-beer/sessions")
    assert response.status_code == 429
    assert response.headers["Retry-After"] == "7"
    assert response.json()["error"]["message"] == "Too many requests. Try again in 7s."


def test_start_checkout_upstream_failure(client, walletgate_handler):
    walletgate_handler.responses = [httpx.Response(500, json={"message": "db down"})]
    response = client.post("/api/v1/checkout/craft-beer/sessions")
    assert response.status_code == 502
    assert response.json()["error"]["message"] == "db down"


def test_start_checkout_timeout(client, walletgate_handler):
    walletgate_handler.responses = [httpx.ReadTimeout("slow")]
    response = client.post("/api/v1/checkout/craft-beer/sessions")
    assert response.status_code == 504


def test_get_session(client, walletgate_handler):
    walletgate_handler.responses = [
        httpx.Response(200, json={"data": session_payload(status="in_progress")})
    ]
    response = client.get("/api/v1/sessions/3f2a9c1e-77b0-4c1d-9e52-0a6f7d1b2c3d")
    assert response.status_code == 200
    assert response.json()["status"] == "in_progress"


def test_simulate_session(client, walletgate_handler):
    walletgate_handler.responses = [
        httpx.Response(200, json={"data": session_payload(
            status="completed", results={"age_over_18": True}, riskScore=0.1,
        )})
    ]
    response = client.post(
        "/api/v1/sessions/3f2a9c1e-77b0-4c1d-9e52-0a6f7d1b2c3d/simulate",
        json={"outcome": "pass_all"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["session"]["status"] == "completed"
    assert body["session"]["riskScore"] == pytest.approx(0.1)
    assert walletgate_handler.json_body() == {"outcome": "pass_all"}


def test_simulate_rejects_unknown_outcome(client):
    response = client.post("/api/v1/sessions/abc/simulate", json={"outcome": "explode"})
    assert response.status_code == 422
