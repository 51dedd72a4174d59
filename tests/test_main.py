from fastapi.testclient import TestClient

from support_portal import dependencies as deps
from support_portal.main import app
from support_portal.settings import Settings


def test_health_endpoint():
    with TestClient(app) as client:
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"message": "Support portal is running"}


def test_static_assets_are_served():
    with TestClient(app) as client:
        res = client.get("/static/portal.js")
        assert res.status_code == 200
        assert "requestAnimationFrame" in res.text


def test_pages_and_api_are_mounted(sample_posts):
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_settings] = lambda: Settings(
        CONTENT_DIR=str(sample_posts)
    )
    try:
        with TestClient(app) as client:
            assert client.get("/").status_code == 200
            assert client.get("/support/a").status_code == 200
            assert client.get("/support/missing").status_code == 404
            assert [p["slug"] for p in client.get("/api/posts").json()] == ["b", "a"]
    finally:
        app.dependency_overrides = original_overrides
