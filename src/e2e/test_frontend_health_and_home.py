# src/e2e/test_frontend_health_and_home.py

import pytest

import frontend as api
from focusindex import config as CFG
from frontend.web import app as flask_app


@pytest.mark.e2e
def test_health_reports_open_items():
    api.initialize(["a.py", "b.py"])
    try:
        r = flask_app.test_client().get("/health")
        assert r.status_code == 200
        assert r.get_json() == {"ok": True, "items": 2}
    finally:
        api.shutdown()


@pytest.mark.e2e
def test_not_initialized_is_service_unavailable():
    api.shutdown()
    client = flask_app.test_client()
    for path in ("/health", "/api/items"):
        r = client.get(path)
        assert r.status_code == 503
        assert r.get_json()["ok"] is False


@pytest.mark.e2e
def test_home_page_renders():
    api.initialize(["a.py"])
    try:
        r = flask_app.test_client().get("/")
        assert r.status_code == 200
        html = r.data.decode("utf-8")
        assert CFG.PLACEHOLDER in html
        assert f"const LIMIT = {CFG.DIGIT_JUMP_LIMIT};" in html
    finally:
        api.shutdown()
