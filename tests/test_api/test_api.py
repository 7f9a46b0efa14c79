"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from textcircle.main import app
from tests.conftest import DIAMOND_5, DIAMOND_5_GAP, DIAMOND_5_GAP_DIAGRAM, INVERTED_CENTRE_5


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 7


def test_validate_valid_ring():
    response = client.post("/api/validate", json={"text": DIAMOND_5})
    assert response.status_code == 200
    data = response.json()
    assert data["report"] == "This is a valid text circle of radius 2."
    assert data["outcome"] == "valid"
    assert data["valid"] is True
    assert data["radius"] == 2
    assert data["background"] == "."
    assert data["path"] == []


def test_validate_escape_path():
    response = client.post("/api/validate", json={"text": DIAMOND_5_GAP})
    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "escape_path_exists"
    assert data["valid"] is False
    assert data["diagram"] == DIAMOND_5_GAP_DIAGRAM
    assert data["path"] == [[2, 0], [2, 1], [2, 2]]
    assert f"<code>{DIAMOND_5_GAP_DIAGRAM}</code>" in data["report"]


def test_validate_misplaced():
    response = client.post("/api/validate", json={"text": INVERTED_CENTRE_5})
    data = response.json()
    assert data["outcome"] == "misplaced_background"
    assert data["misplaced"] == [[2, 1], [1, 2], [3, 2], [2, 3]]


def test_validate_empty_is_not_an_http_error():
    response = client.post("/api/validate", json={"text": ""})
    assert response.status_code == 200
    assert response.json()["report"] == "Invalid. The input is empty."


def test_validate_missing_field():
    response = client.post("/api/validate", json={})
    assert response.status_code == 422


def test_validate_plain_text():
    response = client.post(
        "/api/validate/text",
        content="ab",
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 200
    assert response.text == "Invalid. The input is not square."


def test_validate_plain_text_empty_body():
    response = client.post("/api/validate/text", headers={"Content-Type": "text/plain"})
    assert response.status_code == 200
    assert response.text == "Invalid. The input is empty."


def test_validate_plain_text_valid_ring():
    response = client.post(
        "/api/validate/text",
        content=DIAMOND_5.encode("utf-8"),
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 200
    assert response.text == "This is a valid text circle of radius 2."


def test_validate_plain_text_rejects_invalid_utf8():
    response = client.post(
        "/api/validate/text",
        content=b"\xff\xfe",
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Request body is not valid UTF-8"
