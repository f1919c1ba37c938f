import pytest
from fastapi.testclient import TestClient

import app.utils as api_utils
from app.main import app
from app.services import CheckerService
from app.utils import scan_stats


class _StubRefiner:
    def refine(self, issue):
        return f"Refined: {issue.feature_name}"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(api_utils, "checker_svc", CheckerService(refiner=_StubRefiner()))
    scan_stats.reset()
    with TestClient(app) as c:
        yield c
    scan_stats.reset()


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Baseline Compatibility Checker API" in r.text
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_ai_status_without_key(client, monkeypatch):
    monkeypatch.delenv("TOGETHER_API_KEY", raising=False)
    monkeypatch.setattr("app.ai_status._status_cache", None)
    body = client.get("/ai-status").json()
    assert body["available"] is False
    assert body["api_key_set"] is False


def test_check_returns_wire_shape(client):
    r = client.post("/check", json={"code": "const g = Object.groupBy(a, f);", "language": "javascript"})
    assert r.status_code == 200
    body = r.json()
    assert body["score"] == 85
    issue = body["issues"][0]
    assert issue["featureName"] == "Object.groupBy()"
    assert issue["lineNumber"] == 1
    assert issue["browsersUnsupported"][0] == {"name": "Chrome", "version": "109", "supportStatus": "partial"}
    assert not issue["suggestedFix"].startswith("Refined")
    assert body["fixedCode"].startswith('import "core-js/actual/object/group-by";')


def test_check_omits_absent_optional_fields(client):
    body = client.post("/check", json={"code": "a ?? b", "language": "javascript"}).json()
    assert body["score"] == 100
    assert body["issues"] == []
    assert "fixedCode" not in body

    body = client.post("/check", json={"code": ".a { .b { color: red; } }", "language": "css"}).json()
    assert "lineNumber" not in body["issues"][0]


def test_analyze_refines_and_records_stats(client):
    r = client.post("/analyze", json={"code": "items.toSorted();", "language": "typescript"})
    assert r.status_code == 200
    assert r.json()["issues"][0]["suggestedFix"] == "Refined: Array.prototype.toSorted()"

    client.post("/analyze", json={"code": "", "language": "html"})
    stats = client.get("/stats").json()
    assert stats["totalScans"] == 2
    assert stats["averageScore"] == 96
    assert stats["currentScore"] == 100
    assert stats["issuesFound"] == 0
    assert "High Compatibility" in stats["badges"]


def test_check_does_not_record_stats(client):
    client.post("/check", json={"code": "items.toSorted();", "language": "javascript"})
    assert client.get("/stats").json()["totalScans"] == 0


def test_invalid_language_is_400(client):
    r = client.post("/check", json={"code": "print(1)", "language": "python"})
    assert r.status_code == 400
    assert "Unsupported language" in r.json()["detail"]


def test_missing_code_is_422(client):
    assert client.post("/analyze", json={"language": "css"}).status_code == 422


def test_report_is_plain_text(client):
    r = client.post("/report", json={"code": ".card:has(img) { }", "language": "css"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert ":has() selector" in r.text


def test_features_lists_catalog(client):
    features = client.get("/features").json()
    by_id = {f["id"]: f for f in features}
    assert by_id["temporal"]["browserMinVersions"]["Safari"] is None
    assert by_id["css-has"]["category"] == "css"
    assert by_id["css-has"]["defaultSeverity"] == "high"


def test_error_model_documented_for_post_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    for path in ("/check", "/analyze", "/report"):
        schema = paths[path]["post"]["responses"]["400"]["content"]["application/json"]["schema"]
        assert schema["$ref"].endswith("/ErrorDetail")
