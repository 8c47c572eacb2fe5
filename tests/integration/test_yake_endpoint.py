"""
Integration Tests for the YAKE API Endpoints

Tests for:
- POST /api/v1/yake endpoint
- POST /api/v1/yake/batch endpoint
- Request/Response validation
- Per-request parameter overrides
- Error handling

Anti-Patterns Avoided:
- S1192: No duplicated string literals
- #2.2: Full type annotations
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

# Module constants per S1192 (no duplicated literals)
YAKE_ENDPOINT: str = "/api/v1/yake"
YAKE_BATCH_ENDPOINT: str = "/api/v1/yake/batch"

SAMPLE_TEXT: str = (
    "Machine learning and deep learning are subfields of artificial intelligence. "
    "Neural networks power many modern machine learning systems."
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with the lifespan handler run."""
    from keyword_extraction.main import app

    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# POST /api/v1/yake
# =============================================================================


class TestYakeEndpoint:
    """Single-document extraction."""

    def test_returns_keywords(self, client: TestClient) -> None:
        response = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert len(data["keywords"]) > 0
        assert data["processing_time_ms"] >= 0

    def test_keywords_have_scores(self, client: TestClient) -> None:
        data = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT}).json()

        scores = [item["score"] for item in data["keywords"]]
        assert all(isinstance(item["keyword"], str) for item in data["keywords"])
        assert all(0.0 <= score <= 1.0 for score in scores)
        assert scores == sorted(scores, reverse=True)

    def test_respects_top_n(self, client: TestClient) -> None:
        data = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT, "top_n": 3}).json()
        assert len(data["keywords"]) <= 3

    def test_top_n_zero(self, client: TestClient) -> None:
        data = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT, "top_n": 0}).json()
        assert data["keywords"] == []

    def test_respects_ngram(self, client: TestClient) -> None:
        data = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT, "ngram": 1}).json()
        for item in data["keywords"]:
            assert len(item["keyword"].split()) == 1

    def test_custom_stopwords_merged(self, client: TestClient) -> None:
        data = client.post(
            YAKE_ENDPOINT,
            json={"text": SAMPLE_TEXT, "ngram": 1, "top_n": 100, "stop_words": ["Learning"]},
        ).json()

        keywords = [item["keyword"] for item in data["keywords"]]
        assert "learning" not in keywords
        assert "are" not in keywords

    def test_custom_stopwords_replace(self, client: TestClient) -> None:
        data = client.post(
            YAKE_ENDPOINT,
            json={
                "text": "alpha the beta the gamma",
                "ngram": 1,
                "stop_words": ["alpha"],
                "merge_stopwords": False,
            },
        ).json()

        keywords = {item["keyword"] for item in data["keywords"]}
        assert keywords == {"the", "beta", "gamma"}

    def test_empty_text(self, client: TestClient) -> None:
        response = client.post(YAKE_ENDPOINT, json={"text": ""})

        assert response.status_code == 200
        assert response.json()["keywords"] == []

    def test_is_deterministic(self, client: TestClient) -> None:
        first = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT}).json()
        second = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT}).json()
        assert first["keywords"] == second["keywords"]


class TestYakeEndpointValidation:
    """Invalid requests are rejected."""

    def test_missing_text(self, client: TestClient) -> None:
        assert client.post(YAKE_ENDPOINT, json={}).status_code == 422

    @pytest.mark.parametrize(
        "overrides",
        [
            {"ngram": 0},
            {"window_size": 0},
            {"threshold": 0.0},
            {"threshold": 1.5},
            {"top_n": -1},
            {"top_n": 1000},
        ],
    )
    def test_out_of_range_parameters(self, client: TestClient, overrides: dict) -> None:
        response = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT, **overrides})
        assert response.status_code == 422


# =============================================================================
# POST /api/v1/yake/batch
# =============================================================================


class TestYakeBatchEndpoint:
    """Multi-document extraction."""

    def test_one_list_per_text(self, client: TestClient) -> None:
        response = client.post(
            YAKE_BATCH_ENDPOINT,
            json={"texts": [SAMPLE_TEXT, "Rust developers write Rust code.", ""]},
        )

        assert response.status_code == 200
        keywords = response.json()["keywords"]
        assert len(keywords) == 3
        assert len(keywords[0]) > 0
        assert keywords[2] == []

    def test_batch_matches_single(self, client: TestClient) -> None:
        single = client.post(YAKE_ENDPOINT, json={"text": SAMPLE_TEXT, "top_n": 5}).json()
        batch = client.post(
            YAKE_BATCH_ENDPOINT, json={"texts": [SAMPLE_TEXT], "top_n": 5}
        ).json()

        assert batch["keywords"][0] == single["keywords"]

    def test_empty_batch(self, client: TestClient) -> None:
        response = client.post(YAKE_BATCH_ENDPOINT, json={"texts": []})

        assert response.status_code == 200
        assert response.json()["keywords"] == []

    def test_batch_too_large(self, client: TestClient) -> None:
        response = client.post(YAKE_BATCH_ENDPOINT, json={"texts": ["a"] * 101})
        assert response.status_code == 422
