# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Membership Service — HTTP tests
================================
Run:  pytest test_main.py -v
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from membership.core.config import settings
from membership.core.dependencies import get_member_repo, get_member_service
from membership.middleware import normalize_path
from membership.repositories import InMemoryMemberRepository
from membership.services.member_service import MemberService

client = TestClient(app)


# ============================================
# Fixtures
# ============================================
@pytest.fixture(autouse=True)
def fresh_state():
    """Each test gets its own empty store and service."""
    repo = InMemoryMemberRepository()
    service = MemberService(member_repo=repo)
    app.dependency_overrides[get_member_repo] = lambda: repo
    app.dependency_overrides[get_member_service] = lambda: service
    yield repo
    app.dependency_overrides.clear()


def _register(name):
    return client.post("/api/v1/members", json={"name": name})


# ============================================
# Health & Metrics
# ============================================
class TestHealth:
    def test_health_ok(self):
        r = client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "ok"
        assert data["service"] == settings.SERVICE_NAME
        assert data["version"] == settings.SERVICE_VERSION
        assert "timestamp" in data

    def test_health_counts_members(self):
        _register("spring")
        assert client.get("/health").json()["members_count"] == 1

    def test_readiness_ok(self):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["storage"] == "connected"

    def test_readiness_fails_when_storage_down(self):
        broken = MagicMock()
        broken.verify_connection.side_effect = Exception("boom")
        app.dependency_overrides[get_member_repo] = lambda: broken
        r = client.get("/health/ready")
        assert r.status_code == 503
        assert "boom" in r.json()["detail"]


class TestMetrics:
    def test_metrics_endpoint(self):
        r = client.get("/metrics")
        assert r.status_code == 200

    def test_metrics_contain_registration_counter(self):
        _register("spring")
        text = client.get("/metrics").text
        assert "members_registered_total" in text
        assert "membership_requests_total" in text

    def test_metrics_contain_duplicate_counter(self):
        _register("spring")
        _register("spring")
        assert "member_duplicate_rejections_total" in client.get("/metrics").text

    def test_normalize_path_hides_ids(self):
        assert normalize_path("/api/v1/members/42") == "/api/v1/members/{param}"
        assert normalize_path("/api/v1/members") == "/api/v1/members"
        assert normalize_path("/") == "/"


class TestRequestID:
    def test_request_id_generated(self):
        r = client.get("/health")
        assert len(r.headers.get("X-Request-ID", "")) > 0

    def test_request_id_propagated(self):
        r = client.post(
            "/api/v1/members",
            json={"name": "spring"},
            headers={"X-Request-ID": "my-req-42"},
        )
        assert r.headers["X-Request-ID"] == "my-req-42"


# ============================================
# POST /api/v1/members
# ============================================
class TestRegisterMember:
    def test_register_success(self):
        r = _register("spring")
        assert r.status_code == 201
        assert r.json() == {"id": 1, "name": "spring"}

    def test_register_duplicate_conflict(self, fresh_state):
        _register("spring")
        r = _register("spring")
        assert r.status_code == 409
        assert "already exists" in r.json()["detail"]
        assert fresh_state.count() == 1

    def test_register_strips_whitespace(self):
        r = _register("  spring  ")
        assert r.status_code == 201
        assert r.json()["name"] == "spring"

    def test_register_trimmed_duplicate_conflict(self):
        _register("spring")
        assert _register(" spring ").status_code == 409

    def test_register_empty_name_rejected(self):
        assert _register("").status_code == 422

    def test_register_blank_name_rejected(self):
        assert _register("   ").status_code == 422

    def test_register_missing_name_rejected(self):
        r = client.post("/api/v1/members", json={})
        assert r.status_code == 422

    def test_register_name_too_long_rejected(self):
        assert _register("x" * 256).status_code == 422

    def test_scenario(self):
        assert _register("spring").json()["id"] == 1
        assert _register("spring").status_code == 409
        assert len(client.get("/api/v1/members").json()) == 1
        assert _register("spring2").json()["id"] == 2
        assert len(client.get("/api/v1/members").json()) == 2


# ============================================
# GET /api/v1/members, /api/v1/members/{id}
# ============================================
class TestQueryMembers:
    def test_list_empty(self):
        r = client.get("/api/v1/members")
        assert r.status_code == 200
        assert r.json() == []

    def test_list_in_registration_order(self):
        for name in ("spring1", "spring2", "spring3"):
            _register(name)
        r = client.get("/api/v1/members")
        assert [m["name"] for m in r.json()] == ["spring1", "spring2", "spring3"]
        assert [m["id"] for m in r.json()] == [1, 2, 3]

    def test_get_member(self):
        member_id = _register("spring").json()["id"]
        r = client.get(f"/api/v1/members/{member_id}")
        assert r.status_code == 200
        assert r.json() == {"id": member_id, "name": "spring"}

    def test_get_member_not_found(self):
        r = client.get("/api/v1/members/99")
        assert r.status_code == 404

    def test_get_member_invalid_id(self):
        r = client.get("/api/v1/members/abc")
        assert r.status_code == 422


# ============================================
# Hello page & error handling
# ============================================
class TestHello:
    def test_hello_page(self):
        r = client.get("/hello")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "hello!!" in r.text


class TestErrorHandling:
    def test_openapi_validation_error_schema(self):
        spec = client.get("/openapi.json").json()
        post = spec["paths"]["/api/v1/members"]["post"]["responses"]
        assert post["422"]["content"]["application/json"]["schema"]["$ref"].endswith(
            "/HTTPValidationError"
        )
        assert post["500"]["content"]["application/json"]["schema"]["$ref"].endswith(
            "/ErrorResponse"
        )

    def test_storage_failure_returns_500(self):
        broken = MagicMock()
        broken.find_all.side_effect = RuntimeError("disk on fire")
        app.dependency_overrides[get_member_service] = lambda: MemberService(member_repo=broken)
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/api/v1/members")
        assert r.status_code == 500
        body = r.json()
        assert body["error"] == "internal_server_error"
        assert body["detail"] == "disk on fire"
