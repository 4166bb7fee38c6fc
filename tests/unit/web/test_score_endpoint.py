#!/usr/bin/env python3
"""
Unit tests for the scoring API.
Tests POST /score, GET /health and the HTTP error mapping.
"""

import unittest
from unittest.mock import patch

from core.config_loader import AppConfig, AuthConfig
from core.exceptions import InvalidInput
from tests import TEST_JWT_SECRET, make_token


def _score_payload(**bid_overrides):
    bid = {
        "id": "bid-001",
        "tenderId": "tender-42",
        "vendorId": "vendor-7",
        "technicalProposal": {"experience": 8, "certifications": ["ISO9001", "ISO14001", "ISO27001", "SOC2"]},
        "commercialProposal": {"deliveryTime": 21, "warranty": 24},
        "financialProposal": {"totalPrice": 250000},
    }
    bid.update(bid_overrides)
    return {
        "bidData": bid,
        "criteria": {
            "technicalWeight": 0.5,
            "commercialWeight": 0.3,
            "financialWeight": 0.2,
            "criteria": {},
        },
    }


class _ApiTestCase(unittest.TestCase):

    def setUp(self):
        from fastapi.testclient import TestClient
        from web.backend.app import create_app
        from web.backend.routers.scoring import limiter

        # Disable rate limiting for tests
        limiter.enabled = False
        self.addCleanup(setattr, limiter, "enabled", True)

        config = AppConfig(auth=AuthConfig(jwt_secret=TEST_JWT_SECRET))
        self.app = create_app(config)
        self.client = TestClient(self.app)

    def _auth(self, role="USER", **kwargs):
        return {"Authorization": f"Bearer {make_token(role=role, **kwargs)}"}


class TestScoreEndpoint(_ApiTestCase):
    """POST /score"""

    def test_score_as_user(self):
        response = self.client.post("/score", json=_score_payload(), headers=self._auth("USER"))

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(set(data), {
            "bidId", "technicalScore", "commercialScore", "financialScore",
            "totalScore", "recommendation", "riskAssessment",
        })
        self.assertEqual(data["bidId"], "bid-001")
        self.assertAlmostEqual(data["technicalScore"], 1.0)
        self.assertAlmostEqual(data["commercialScore"], 1.0)
        self.assertEqual(data["financialScore"], 0.8)
        self.assertAlmostEqual(data["totalScore"], 0.96)
        self.assertEqual(data["recommendation"], "STRONGLY_RECOMMENDED")
        self.assertEqual(data["riskAssessment"], "LOW_RISK")

    def test_score_as_admin(self):
        response = self.client.post("/score", json=_score_payload(), headers=self._auth("ADMIN"))
        self.assertEqual(response.status_code, 200)

    def test_absent_proposals(self):
        payload = _score_payload(technicalProposal=None, commercialProposal={})
        del payload["bidData"]["financialProposal"]

        response = self.client.post("/score", json=payload, headers=self._auth())

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["technicalScore"], 0.0)
        self.assertEqual(data["commercialScore"], 0.6)
        self.assertEqual(data["financialScore"], 0.0)
        self.assertAlmostEqual(data["totalScore"], 0.18)
        self.assertEqual(data["riskAssessment"], "HIGH_RISK")
        self.assertEqual(data["recommendation"], "NOT_RECOMMENDED")

    def test_identical_requests_give_identical_responses(self):
        headers = self._auth()
        first = self.client.post("/score", json=_score_payload(), headers=headers)
        second = self.client.post("/score", json=_score_payload(), headers=headers)
        self.assertEqual(first.content, second.content)

    def test_missing_authorization_header(self):
        response = self.client.post("/score", json=_score_payload())

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "Authorization header required")
        self.assertEqual(response.json()["type"], "Unauthenticated")
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

    def test_invalid_token(self):
        response = self.client.post(
            "/score", json=_score_payload(), headers={"Authorization": "Bearer not-a-token"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "Invalid token")

    def test_expired_token(self):
        response = self.client.post("/score", json=_score_payload(), headers=self._auth(expires_in=-60))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "Invalid token")

    def test_token_signed_with_other_secret(self):
        headers = self._auth(secret="a-completely-different-secret-of-sufficient-length-for-hmac-512!")
        response = self.client.post("/score", json=_score_payload(), headers=headers)
        self.assertEqual(response.status_code, 401)

    def test_disallowed_role(self):
        for role in ("VENDOR", "admin", None):
            with self.subTest(role=role):
                response = self.client.post("/score", json=_score_payload(), headers=self._auth(role))
                self.assertEqual(response.status_code, 403)
                self.assertEqual(response.json()["error"], "Access denied. Required roles: USER, ADMIN")
                self.assertEqual(response.json()["type"], "Forbidden")

    def test_engine_gate_holds_without_transport_gate(self):
        """Test the engine rejects a bad role even if the route's gate is bypassed."""
        with patch('web.backend.dependencies.authorize'):
            response = self.client.post("/score", json=_score_payload(), headers=self._auth("VENDOR"))

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "forbidden: insufficient permissions for scoring")

    def test_malformed_json(self):
        response = self.client.post(
            "/score",
            content="{not json",
            headers={**self._auth(), "Content-Type": "application/json"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidInput")

    def test_missing_sections(self):
        response = self.client.post("/score", json={"bidData": {"id": "x"}}, headers=self._auth())
        self.assertEqual(response.status_code, 400)
        self.assertIn("details", response.json())

    def test_wrong_shaped_proposal(self):
        payload = _score_payload(technicalProposal="lots of experience")
        response = self.client.post("/score", json=payload, headers=self._auth())
        self.assertEqual(response.status_code, 400)

    def test_wrong_typed_bonus_fields_still_score(self):
        payload = _score_payload(
            technicalProposal={"experience": "8", "certifications": "many"},
            financialProposal={"totalPrice": "cheap"},
        )
        response = self.client.post("/score", json=payload, headers=self._auth())

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["technicalScore"], 0.7)
        self.assertEqual(response.json()["financialScore"], 0.5)

    def test_huge_integer_fields_still_score(self):
        payload = _score_payload(
            technicalProposal={"experience": 10**400},
            financialProposal={"totalPrice": 10**400},
        )
        response = self.client.post("/score", json=payload, headers=self._auth())

        self.assertEqual(response.status_code, 200)
        self.assertAlmostEqual(response.json()["technicalScore"], 0.9)
        self.assertEqual(response.json()["financialScore"], 0.3)

    def test_invalid_input_maps_to_bad_request(self):
        def reject_bid():
            raise InvalidInput("bid payload could not be decoded")

        self.app.add_api_route("/bids/reject", reject_bid, methods=["POST"])
        response = self.client.post("/bids/reject")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {
            "success": False,
            "error": "bid payload could not be decoded",
            "type": "InvalidInput",
        })

    def test_get_not_allowed(self):
        response = self.client.get("/score", headers=self._auth())
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json()["success"], False)


class TestHealthAndCors(_ApiTestCase):

    def test_health_needs_no_auth(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "status": "healthy",
            "service": "bid-scoring",
            "version": "1.0.0",
            "role_access": ["USER", "ADMIN"],
        })

    def test_cors_preflight(self):
        response = self.client.options(
            "/score",
            headers={
                "Origin": "https://procurement.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            }
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")
        self.assertIn("POST", response.headers["access-control-allow-methods"])

    def test_cors_header_on_simple_request(self):
        response = self.client.get("/health", headers={"Origin": "https://procurement.example.com"})
        self.assertEqual(response.headers["access-control-allow-origin"], "*")


if __name__ == '__main__':
    unittest.main()
