# src/e2e/test_frontend_analyze_api_json.py
import pytest
from wordmatch.engine import Engine
from frontend.web import app as flask_app, JSON_UTF


@pytest.fixture
def client():
    import frontend.web as webmod
    eng = Engine(seed=1)
    webmod._engine = eng
    yield flask_app.test_client()
    eng.shutdown()
    webmod._engine = None


@pytest.mark.e2e
def test_first_request_gets_nulls_then_matches(client):
    rv = client.post("/analyze", json={"text": "cat"})
    assert rv.status_code == 200
    assert rv.headers["Content-Type"] == JSON_UTF
    assert rv.get_json() == {"value": None, "lexical": None}

    rv = client.post("/analyze", json={"text": "bat"})
    assert rv.status_code == 200
    assert rv.get_json() == {"value": "cat", "lexical": "cat"}


@pytest.mark.e2e
def test_body_parsed_without_json_content_type(client):
    rv = client.post("/analyze", data='{"text": "Hello"}', content_type="text/plain")
    assert rv.status_code == 200
    assert set(rv.get_json()) == {"value", "lexical"}


@pytest.mark.e2e
def test_health_reports_corpus_size(client):
    client.post("/analyze", json={"text": "cat"})
    client.post("/analyze", json={"text": "act"})
    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True, "words": 2, "buckets": 1}


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "/analyze" in r.data.decode("utf-8")
