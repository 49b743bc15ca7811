"""
Tests for the terrain HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from fault_terrain.api import main as api_main
from fault_terrain.api.main import app

SMALL_TERRAIN = {"width": 8, "height": 6, "iterations": 20, "seed": 3}


class TestTerrainAPI:
    """Test generate, regenerate and read endpoints."""

    @pytest.fixture(autouse=True)
    def reset_terrain(self, monkeypatch):
        monkeypatch.setattr(api_main, "_terrain", None)
        monkeypatch.setattr(api_main, "_terrain_seed", None)

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        """Test the root endpoint lists service info and palettes."""
        response = self.client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["palettes"] == ["water_grass", "lava_ash", "ice_snow"]

    def test_health(self):
        """Test the health endpoint before any terrain exists."""
        response = self.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "terrain_loaded": False}

    def test_terrain_missing_before_generate(self):
        """Test terrain endpoints return 404 before generation."""
        for path in ("/terrain", "/terrain/heightmap", "/terrain/colors"):
            assert self.client.get(path).status_code == 404
        assert self.client.post("/terrain/regenerate").status_code == 404
        assert self.client.post("/terrain/redraw").status_code == 404

    def test_generate(self):
        """Test generating a terrain returns its summary."""
        response = self.client.post("/terrain/generate", json=SMALL_TERRAIN)

        assert response.status_code == 200
        data = response.json()
        assert data["width"] == 8
        assert data["height"] == 6
        assert data["iterations"] == 20
        assert data["seed"] == 3
        assert data["palette"] in (1, 2, 3)
        assert data["min_height"] <= data["mean_height"] <= data["max_height"]
        assert data["generation_seconds"] >= 0

    def test_generate_with_seed_is_reproducible(self):
        """Test the same seed produces the same terrain."""
        first = self.client.post("/terrain/generate", json=SMALL_TERRAIN).json()
        second = self.client.post("/terrain/generate", json=SMALL_TERRAIN).json()

        assert first["mean_height"] == second["mean_height"]
        assert first["palette"] == second["palette"]

    def test_generate_rejects_oversized_terrain(self):
        """Test terrains above the size limit are rejected."""
        response = self.client.post("/terrain/generate", json={"width": 5000, "height": 10})

        assert response.status_code == 400

    def test_generate_rejects_invalid_dimensions(self):
        """Test zero dimensions fail request validation."""
        response = self.client.post("/terrain/generate", json={"width": 0, "height": 10})

        assert response.status_code == 422

    def test_generate_rejects_negative_seed(self):
        """Test a negative seed fails request validation."""
        response = self.client.post(
            "/terrain/generate", json={"width": 4, "height": 4, "iterations": 2, "seed": -1}
        )

        assert response.status_code == 422
        assert self.client.get("/terrain").status_code == 404

    def test_heightmap_covers_extended_grid(self):
        """Test the heightmap endpoint returns the extended grid."""
        self.client.post("/terrain/generate", json=SMALL_TERRAIN)
        data = self.client.get("/terrain/heightmap").json()

        assert data["width"] == 9
        assert data["height"] == 7
        assert len(data["heights"]) == 9
        assert all(len(column) == 7 for column in data["heights"])

    def test_colors_cover_visible_grid(self):
        """Test the colors endpoint returns one color per visible cell."""
        self.client.post("/terrain/generate", json=SMALL_TERRAIN)
        data = self.client.get("/terrain/colors").json()

        assert len(data["colors"]) == 8 * 6
        assert all(color.startswith("#") and len(color) == 7 for color in data["colors"])
        assert len(set(data["colors"])) <= 2

    def test_regenerate_keeps_configuration(self):
        """Test regeneration keeps dimensions but replaces heights."""
        self.client.post("/terrain/generate", json=SMALL_TERRAIN)
        before = self.client.get("/terrain/heightmap").json()

        response = self.client.post("/terrain/regenerate")
        after = self.client.get("/terrain/heightmap").json()

        assert response.status_code == 200
        assert response.json()["width"] == 8
        assert after["width"] == before["width"]
        assert after["heights"] != before["heights"]

    def test_redraw_keeps_heights(self):
        """Test redrawing leaves the heightmap untouched."""
        self.client.post("/terrain/generate", json=SMALL_TERRAIN)
        before = self.client.get("/terrain/heightmap").json()

        response = self.client.post("/terrain/redraw")

        assert response.status_code == 200
        assert self.client.get("/terrain/heightmap").json() == before
