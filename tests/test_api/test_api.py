"""Tests for the HTTP host surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.conftest import HOME_SVG

from svgsprite.config import settings
from svgsprite.dependencies import get_plugin
from svgsprite.engine.config import ComponentOptions, SpriteOptions
from svgsprite.main import app
from svgsprite.plugin import confined_reader, create_plugin


@pytest.fixture
def svg_root(tmp_path):
    root = tmp_path / "svgs"
    root.mkdir()
    return root


@pytest.fixture
def client(svg_root):
    plugin = create_plugin(
        options=SpriteOptions(component=ComponentOptions(type="vue", default_export=True)),
        loader=confined_reader(str(svg_root)),
    )
    app.dependency_overrides[get_plugin] = lambda: plugin
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["stages_registered"] == 5
    assert data["cached_entries"] == 0


def test_transform_with_content(client):
    response = client.post(
        "/api/transform",
        json={"path": "/icons/icon-home.svg", "source": "", "content": HOME_SVG},
    )
    assert response.status_code == 200
    data = response.json()
    assert 'document.getElementById("icon-home")' in data["code"]
    assert "export default IconHome;" in data["code"]
    assert data["map"]["mappings"] == ""
    assert data["cached"] is False

    again = client.post("/api/transform", json={"path": "/icons/icon-home.svg"})
    assert again.json()["cached"] is True
    assert again.json()["code"] == data["code"]
    assert client.get("/api/health").json()["cached_entries"] == 1


def test_transform_non_svg(client):
    response = client.post("/api/transform", json={"path": "/src/app.js", "source": "let a;"})
    assert response.status_code == 200
    assert response.json()["code"] == "let a;"


def test_transform_reads_under_root(client, svg_root):
    (svg_root / "star.svg").write_text(HOME_SVG, encoding="utf-8")
    response = client.post("/api/transform", json={"path": "star.svg"})
    assert response.status_code == 200
    assert 'document.getElementById("star")' in response.json()["code"]


def test_transform_missing_file(client):
    response = client.post("/api/transform", json={"path": "missing.svg"})
    assert response.status_code == 404


def test_transform_outside_root_forbidden(client, svg_root):
    (svg_root.parent / "secret.svg").write_text(HOME_SVG, encoding="utf-8")
    for path in ("../secret.svg", str(svg_root.parent / "secret.svg"), "/etc/passwd.svg"):
        response = client.post("/api/transform", json={"path": path})
        assert response.status_code == 403
    assert client.get("/api/health").json()["cached_entries"] == 0


def test_settings_plugin_confined_to_svg_root(monkeypatch, svg_root):
    monkeypatch.setattr(settings, "svg_root", str(svg_root))
    get_plugin.cache_clear()
    try:
        plugin = get_plugin()
        (svg_root / "dot.svg").write_text(HOME_SVG, encoding="utf-8")
        assert plugin.loader("dot.svg") == HOME_SVG
        with pytest.raises(PermissionError):
            plugin.loader("../dot.svg")
    finally:
        get_plugin.cache_clear()
