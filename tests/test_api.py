"""Tests for the HTTP endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from diff_review.llm.errors import INVALID_CREDENTIALS_MESSAGE, APIError
from diff_review.llm.prompts import DEFAULT_REVIEW_INSTRUCTIONS
from diff_review.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def payload():
    return {
        "diff": "+x",
        "reviewInstructions": "review this",
        "provider": "gemini",
        "apiKey": "k1",
    }


class TestReviewEndpoint:
    def test_success(self, client, payload, fake_handle):
        with patch("diff_review.review.resolve", return_value=fake_handle) as mock_resolve:
            response = client.post("/api/review", json=payload)

        assert response.status_code == 200
        assert response.json() == {"review": "LGTM"}
        mock_resolve.assert_called_once_with("gemini", "k1", False)

    def test_use_pro_model(self, client, payload, fake_handle):
        payload["useProModel"] = True
        with patch("diff_review.review.resolve", return_value=fake_handle) as mock_resolve:
            client.post("/api/review", json=payload)
        mock_resolve.assert_called_once_with("gemini", "k1", True)

    def test_missing_api_key(self, client, payload):
        del payload["apiKey"]
        with patch("diff_review.review.resolve") as mock_resolve:
            response = client.post("/api/review", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "missing_api_key"
        mock_resolve.assert_not_called()

    def test_empty_diff(self, client, payload):
        payload["diff"] = ""
        response = client.post("/api/review", json=payload)
        assert response.status_code == 400
        assert response.json() == {"detail": "Diff content cannot be empty.", "error": "empty_input"}

    def test_unsupported_provider(self, client, payload):
        payload["provider"] = "vendorZ"
        response = client.post("/api/review", json=payload)
        assert response.status_code == 422
        assert response.json()["error"] == "unsupported_provider"

    def test_missing_provider(self, client, payload):
        del payload["provider"]
        response = client.post("/api/review", json=payload)
        assert response.status_code == 422
        assert response.json() == {"detail": "Unsupported provider: ", "error": "unsupported_provider"}

    @pytest.mark.parametrize("field", ["diff", "reviewInstructions", "apiKey", "provider"])
    def test_null_field(self, client, payload, field):
        payload[field] = None
        with patch("diff_review.review.resolve") as mock_resolve:
            response = client.post("/api/review", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_request"
        assert isinstance(body["detail"], str)
        assert field in body["detail"]
        mock_resolve.assert_not_called()

    def test_invalid_field_does_not_echo_api_key(self, client, payload):
        payload["apiKey"] = "secret-key-123"
        payload["useProModel"] = "not-a-bool"
        response = client.post("/api/review", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"
        assert "secret-key-123" not in response.text

    def test_malformed_json(self, client):
        response = client.post(
            "/api/review",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"
        assert isinstance(response.json()["detail"], str)

    def test_invalid_credentials(self, client, payload, fake_handle):
        fake_handle.generate.side_effect = APIError("PERMISSION_DENIED", status_code=None)
        with patch("diff_review.review.resolve", return_value=fake_handle):
            response = client.post("/api/review", json=payload)

        assert response.status_code == 401
        assert response.json() == {"detail": INVALID_CREDENTIALS_MESSAGE, "error": "invalid_credentials"}

    def test_upstream_failure(self, client, payload, fake_handle):
        fake_handle.generate.side_effect = APIError("Resource has been exhausted", status_code=429)
        with patch("diff_review.review.resolve", return_value=fake_handle):
            response = client.post("/api/review", json=payload)

        assert response.status_code == 502
        assert response.json() == {"detail": "Resource has been exhausted", "error": "upstream_failure"}

    def test_empty_upstream_response(self, client, payload, fake_handle):
        fake_handle.generate.return_value = ""
        with patch("diff_review.review.resolve", return_value=fake_handle):
            response = client.post("/api/review", json=payload)

        assert response.status_code == 502
        assert response.json()["error"] == "upstream_empty_response"


class TestSummaryEndpoint:
    def test_success(self, client, fake_handle):
        fake_handle.generate.return_value = "Summary"
        with patch("diff_review.review.resolve", return_value=fake_handle):
            response = client.post(
                "/api/review/summary",
                json={"diff": "+x", "provider": "openai", "apiKey": "k1"},
            )

        assert response.status_code == 200
        assert response.json() == {"summary": "Summary"}

    def test_null_diff(self, client):
        response = client.post(
            "/api/review/summary",
            json={"diff": None, "provider": "openai", "apiKey": "k1"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"


class TestMetadataEndpoints:
    def test_providers(self, client):
        response = client.get("/api/providers")
        assert response.status_code == 200
        data = response.json()
        assert [p["provider"] for p in data["providers"]] == ["gemini", "openai", "anthropic", "zhipu"]
        for entry in data["providers"]:
            assert entry["weak_model"] != entry["strong_model"]

    def test_default_instructions(self, client):
        response = client.get("/api/review/default-instructions")
        assert response.status_code == 200
        assert response.json() == {"instructions": DEFAULT_REVIEW_INSTRUCTIONS}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
