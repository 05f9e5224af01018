"""
Tests for the design-token routes.

Routes are mounted on a bare app with the catalogue dependency overridden
to the shipped vibes.yaml.
"""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_catalog_rules
from src.api.routes import tokens
from src.components.C1_ColorSpace import contrast_ratio

# --- Test Setup ---


@pytest.fixture
def app(catalog_rules) -> FastAPI:
    """Test FastAPI app with token routes."""
    app = FastAPI()
    app.include_router(tokens.router, prefix="/api/tokens")
    app.dependency_overrides[get_catalog_rules] = lambda: catalog_rules
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def colors() -> dict[str, str]:
    return {
        "primary": "#3B5BDB",
        "secondary": "#e8590c",
        "accent": "#12b886",
        "background": "#fff",
        "text": "#bbbbbb",
    }


# --- Vibes ---


class TestVibes:
    def test_free_list(self, client: TestClient) -> None:
        response = client.get("/api/tokens/vibes")
        assert response.status_code == 200
        data = response.json()
        assert data["tier"] == "free"
        ids = [v["id"] for v in data["vibes"]]
        assert "minimal" in ids
        assert "cyber-mint" not in ids

    def test_pro_list(self, client: TestClient) -> None:
        data = client.get("/api/tokens/vibes", params={"tier": "pro"}).json()
        pro = {v["id"] for v in data["vibes"] if v["pro"]}
        assert pro == {"magazine-brutalism", "cyber-mint", "dark"}

    def test_bad_tier(self, client: TestClient) -> None:
        assert client.get("/api/tokens/vibes", params={"tier": "gold"}).status_code == 422


# --- Palettes ---


class TestPalette:
    def test_generate(self, client: TestClient) -> None:
        response = client.post("/api/tokens/palette", json={"vibe_id": "minimal", "seed": 0.4217})
        assert response.status_code == 200
        data = response.json()
        assert set(data["colors"]) == {"primary", "secondary", "accent", "background", "text"}
        assert "surface" in data["palette"]

    def test_deterministic(self, client: TestClient) -> None:
        body = {"vibe_id": "pastel", "seed": 2.5}
        first = client.post("/api/tokens/palette", json=body).json()
        assert client.post("/api/tokens/palette", json=body).json() == first

    def test_locks(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post(
            "/api/tokens/palette",
            json={
                "vibe_id": "pastel",
                "seed": 0.9,
                "prev_palette": colors,
                "locks": {"primary": True},
            },
        )
        assert response.json()["colors"]["primary"] == "#3b5bdb"

    def test_unknown_vibe(self, client: TestClient) -> None:
        response = client.post("/api/tokens/palette", json={"vibe_id": "nope", "seed": 1})
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_pro_vibe_requires_pro(self, client: TestClient) -> None:
        body = {"vibe_id": "cyber-mint", "seed": 0.5}
        response = client.post("/api/tokens/palette", json=body)
        assert response.status_code == 403
        assert "cyber-mint" in response.json()["detail"]
        pro = client.post("/api/tokens/palette", json={**body, "tier": "pro"})
        assert pro.status_code == 200

    def test_invalid_hex(self, client: TestClient, colors: dict[str, str]) -> None:
        bad = dict(colors, primary="#12")
        response = client.post(
            "/api/tokens/palette",
            json={"vibe_id": "pastel", "seed": 1, "prev_palette": bad},
        )
        assert response.status_code == 422


class TestHarmony:
    def test_requires_pro(self, client: TestClient) -> None:
        response = client.post("/api/tokens/harmony", json={"vibe_id": "minimal", "seed": 0.3})
        assert response.status_code == 403

    def test_pro(self, client: TestClient) -> None:
        response = client.post(
            "/api/tokens/harmony",
            json={"vibe_id": "minimal", "seed": 0.3, "tier": "pro", "harmony_type": "triadic"},
        )
        assert response.status_code == 200
        assert response.json()["harmony_type"] == "triadic"

    def test_random_type(self, client: TestClient) -> None:
        data = client.post(
            "/api/tokens/harmony", json={"vibe_id": "minimal", "seed": 0.3, "tier": "pro"}
        ).json()
        assert data["harmony_type"] in {
            "analogous",
            "split-complementary",
            "triadic",
            "tetradic",
            "complementary",
        }


# --- Contrast ---


class TestContrast:
    def test_check(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post("/api/tokens/contrast/check", json={"colors": colors})
        assert response.status_code == 200
        data = response.json()
        assert len(data["checks"]) == 6
        assert data["checks"][0]["severity"] == "fail"
        assert data["violations"]["aa"] >= 1
        assert data["adjusted"] == []

    def test_fix_requires_pro(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post("/api/tokens/contrast/fix", json={"colors": colors})
        assert response.status_code == 403

    def test_fix(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post(
            "/api/tokens/contrast/fix", json={"colors": colors, "target": "aa", "tier": "pro"}
        )
        assert response.status_code == 200
        data = response.json()
        assert "text" in data["adjusted"]
        palette = data["palette"]
        assert contrast_ratio(palette["text"], palette["background"]) >= 4.5

    def test_fix_base_only(self, client: TestClient, colors: dict[str, str]) -> None:
        data = client.post(
            "/api/tokens/contrast/fix",
            json={"colors": colors, "tier": "pro", "include_derived": False},
        ).json()
        assert data["adjusted"] == ["text"]


# --- Typography ---


class TestTypography:
    def test_from_vibe_defaults(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post(
            "/api/tokens/typography",
            json={"vibe_id": "brutalist", "colors": colors, "seed": 0.1},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["typography"]["heading"]["weight"] >= 700
        assert data["typography"]["subheading"] is not None
        assert data["colors"]["heading"] == "#bbbbbb"

    def test_pro_vibe_requires_pro(self, client: TestClient, colors: dict[str, str]) -> None:
        response = client.post("/api/tokens/typography", json={"vibe_id": "dark", "colors": colors})
        assert response.status_code == 403

    def test_with_current(self, client: TestClient, colors: dict[str, str]) -> None:
        current = {
            "heading": {"size": "md", "weight": 400},
            "body": {"size": "md", "weight": 400},
            "accent": {"size": "md", "weight": 900},
        }
        data = client.post(
            "/api/tokens/typography",
            json={"vibe_id": "pastel", "colors": colors, "current": current},
        ).json()
        heading = data["typography"]["heading"]
        body = data["typography"]["body"]
        assert heading["weight"] - body["weight"] >= 200


# --- Design ---


class TestDesign:
    def test_free_design(self, client: TestClient) -> None:
        response = client.post("/api/tokens/design", json={"vibe_id": "luxury", "seed": 0.7})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["css_variables"].startswith(":root {")
        assert json.loads(data["json_tokens"])["meta"]["vibe"] == "luxury"
        assert len(data["contrast"]) == 6

    def test_locked_feature_reported(self, client: TestClient) -> None:
        data = client.post(
            "/api/tokens/design",
            json={"vibe_id": "luxury", "seed": 0.7, "mode": "harmony"},
        ).json()
        assert data["success"] is False
        assert data["errors"][0]["code"] == "feature_locked"
        assert data["errors"][0]["feature"] == "harmony_mode"

    def test_pro_design_with_fix(self, client: TestClient) -> None:
        data = client.post(
            "/api/tokens/design",
            json={
                "vibe_id": "dark",
                "seed": 0.7,
                "tier": "pro",
                "mode": "harmony",
                "contrast_target": "aaa",
                "fonts": {"heading": "Fraunces", "body": "Inter"},
            },
        ).json()
        assert data["success"] is True
        assert '"Fraunces"' in data["css_variables"]

    def test_pro_vibe_refused_on_free(self, client: TestClient) -> None:
        response = client.post("/api/tokens/design", json={"vibe_id": "cyber-mint", "seed": 0.7})
        assert response.status_code == 403

    def test_custom_fonts_reported_on_free(self, client: TestClient) -> None:
        data = client.post(
            "/api/tokens/design",
            json={
                "vibe_id": "luxury",
                "seed": 0.7,
                "fonts": {"heading": "Fraunces", "body": "Inter"},
            },
        ).json()
        assert data["success"] is False
        assert data["errors"][0]["feature"] == "custom_fonts"
        assert "Fraunces" not in data["css_variables"]
