# Tests for the web server: page rendering, static assets, headers, health.
# Created: 2026-10-19

import pytest
from fastapi.testclient import TestClient

from drivegallery import page_state
from drivegallery.config import get_settings


@pytest.fixture
def client():
    from drivegallery.dashboard import app

    with TestClient(app) as c:
        yield c


class TestIndex:
    def test_renders_form(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Public Drive Folder URL" in resp.text
        assert "Get images" in resp.text
        assert "/static/js/gallery.js" in resp.text

    def test_link_field_is_bound_locally(self, client):
        # Server responses must not rewrite the field while the user types.
        resp = client.get("/")
        assert ':value="link"' in resp.text
        assert "page.folder_link" not in resp.text

    def test_each_load_creates_a_page(self, client):
        client.get("/")
        client.get("/")
        assert len(page_state._pages) == 2

    def test_page_id_is_usable_from_api(self, client):
        client.get("/")
        page_id = next(iter(page_state._pages))
        resp = client.get(f"/api/v1/pages/{page_id}")
        assert resp.status_code == 200
        assert resp.json()["state"] == "idle"


class TestSecurityHeaders:
    def test_headers(self, client):
        resp = client.get("/")
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        csp = resp.headers["Content-Security-Policy"]
        assert "https://drive.google.com" in csp
        assert "googleusercontent.com" in csp
        assert "Strict-Transport-Security" not in resp.headers


class TestStatic:
    def test_js_served(self, client):
        resp = client.get("/static/js/gallery.js")
        assert resp.status_code == 200
        assert "function gallery" in resp.text
        assert "'/submit', { folder_link: this.link }" in resp.text
        assert "This page has expired" in resp.text

    def test_css_served(self, client):
        assert client.get("/static/css/gallery.css").status_code == 200


class TestHealth:
    def test_ok_with_key(self, client):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["api_key_configured"] is True

    def test_degraded_without_key(self, client, monkeypatch):
        monkeypatch.delenv("DRIVEGALLERY_GOOGLE_API_KEY")
        get_settings.cache_clear()
        data = client.get("/api/v1/health").json()
        assert data["status"] == "degraded"
        assert data["api_key_configured"] is False
