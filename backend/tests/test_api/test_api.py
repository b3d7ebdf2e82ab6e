"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from polysym.main import app
from polysym.utils.geometry import regular_polygon
from tests.conftest import ASYMMETRIC_7, BOWTIE, TRAPEZOID


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_symmetry_trapezoid():
    response = client.post("/api/symmetry", json={"vertices": TRAPEZOID})
    assert response.status_code == 200
    data = response.json()
    assert data["symmetric"] is True
    assert data["vertex_count"] == 4
    assert data["winding"] == -1
    assert data["candidates_checked"] == 4
    assert data["processing_time_ms"] >= 0
    axis = data["axis"]
    assert axis["kind"] == "midpoint_to_midpoint"
    assert axis["anchor"] == 1
    assert axis["start"] == [0.0, 1.0]
    assert axis["end"] == [0.0, -1.0]


def test_symmetry_asymmetric():
    response = client.post("/api/symmetry", json={"vertices": ASYMMETRIC_7})
    assert response.status_code == 200
    data = response.json()
    assert data["symmetric"] is False
    assert data["axis"] is None
    assert data["candidates_checked"] == 7


def test_symmetry_too_few_vertices():
    response = client.post("/api/symmetry", json={"vertices": [[0, 0], [1, 1]]})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "too_few_vertices"
    assert "at least 3" in detail["message"]


PENTAGRAM = regular_polygon(5)[[0, 2, 4, 1, 3]].tolist()


def test_symmetry_accepts_self_intersecting_by_default():
    response = client.post("/api/symmetry", json={"vertices": PENTAGRAM})
    assert response.status_code == 200
    data = response.json()
    assert data["symmetric"] is True
    assert data["axis"]["kind"] == "vertex_to_midpoint"
    assert data["axis"]["anchor"] == 0


def test_symmetry_simple_check_on_request():
    response = client.post("/api/symmetry", json={"vertices": PENTAGRAM, "require_simple": True})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "non_simple_polygon"


def test_symmetry_bowtie_has_degenerate_axis():
    # Opposite edge midpoints of this bowtie both sit at (0.5, 0.5)
    response = client.post("/api/symmetry", json={"vertices": BOWTIE})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "degenerate_line"


def test_symmetry_tolerance_override():
    nearly = [[-2.0 + 1e-6, -1.0], [-1.0, 1.0], [1.0, 1.0], [2.0, -1.0]]
    strict = client.post("/api/symmetry", json={"vertices": nearly})
    assert strict.json()["symmetric"] is False

    loose = client.post("/api/symmetry", json={"vertices": nearly, "abs_tol": 1e-4, "rel_tol": 1e-4})
    assert loose.json()["symmetric"] is True


def test_symmetry_malformed_body():
    response = client.post("/api/symmetry", json={"vertices": [[0, 0, 0]]})
    assert response.status_code == 422
    response = client.post("/api/symmetry", json={"vertices": [[0, 0], [1, 0], [0, 1]], "abs_tol": -1})
    assert response.status_code == 422
