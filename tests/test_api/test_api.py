"""Tests for API endpoints."""

from __future__ import annotations

import inspect

from fastapi.testclient import TestClient

from vd2svg import __version__
from vd2svg.api.convert import convert
from vd2svg.main import app
from tests.conftest import GRADIENT_VD, MINIMAL_VD


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_convert_minimal():
    response = client.post("/api/convert", json={"xml": MINIMAL_VD, "indent": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["element_count"] == 1
    assert data["gradient_count"] == 0
    assert data["clip_path_count"] == 0
    assert '\n  <path d="M0 0L24 24" fill="#112233" />\n' in data["svg"]


def test_convert_gradients():
    response = client.post("/api/convert", json={"xml": GRADIENT_VD})
    assert response.status_code == 200
    data = response.json()
    assert data["gradient_count"] == 2
    assert "<defs>" in data["svg"]


def test_convert_unsupported_feature():
    xml = MINIMAL_VD.replace("#FF112233", "@color/accent")
    response = client.post("/api/convert", json={"xml": xml})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "unsupported_feature"
    assert "@color/accent" in detail["message"]


def test_convert_malformed_xml():
    response = client.post("/api/convert", json={"xml": "<vector"})
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "structural"


def test_convert_runs_in_threadpool():
    # FastAPI only offloads plain (non-async) handlers
    assert not inspect.iscoroutinefunction(convert)


def test_convert_requires_xml():
    response = client.post("/api/convert", json={})
    assert response.status_code == 422
