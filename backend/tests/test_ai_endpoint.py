"""Tests for /api/v1/admin/ai/generate (POST + GET)."""

import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app
from app.services.ai.contracts import Provider
from app.services.ai.gateway import GenerationGateway, get_gateway
from app.services.ai.registry import ProviderRegistry
from tests.conftest import RecordingTransport, gemini_ok, grok_ok, no_network, reply

ADMIN_SECRET = "test-admin-secret"
URL = "/api/v1/admin/ai/generate"


@patch.dict(os.environ, {"ADMIN_SECRET_KEY": ADMIN_SECRET}, clear=False)
class AIGenerateEndpointTests(unittest.TestCase):
    def setUp(self):
        from app.core.config import get_settings

        get_settings.cache_clear()
        self.use_gateway({Provider.GEMINI: "gm-key"}, reply(200, gemini_ok("Fresh copy.")))
        self.client = TestClient(app, cookies={"admin_session": ADMIN_SECRET})

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()

    def use_gateway(self, credentials, handler):
        self.transport = RecordingTransport(handler)
        gateway = GenerationGateway(ProviderRegistry(credentials), transport=self.transport)
        app.dependency_overrides[get_gateway] = lambda: gateway

    def test_product_name_generates_description(self):
        resp = self.client.post(URL, json={"model": "gemini", "productName": "Doodles Heavy Tee", "category": "Puff Print"})

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["text"], "Fresh copy.")
        self.assertEqual(data["model"], "gemini")
        self.assertIn("timestamp", data)

        sent = self.transport.json_body()["contents"][0]["parts"][0]["text"]
        self.assertIn("Product Name: Doodles Heavy Tee", sent)
        self.assertIn("Category: Puff Print", sent)

    def test_custom_prompt_wins_over_product_name(self):
        self.use_gateway({Provider.GROK: "xai-key"}, reply(200, grok_ok("custom")))

        resp = self.client.post(URL, json={"model": "grok", "prompt": "Write a tagline", "productName": "Tee"})

        self.assertEqual(resp.status_code, 200)
        messages = self.transport.json_body()["messages"]
        self.assertEqual(messages[-1], {"role": "user", "content": "Write a tagline"})

    def test_missing_fields_returns_400(self):
        for body in ({"productName": "Tee"}, {"model": "gemini"}, {"model": "gemini", "prompt": "  "}):
            with self.subTest(body=body):
                resp = self.client.post(URL, json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("requiredFields", resp.json())
        self.assertEqual(self.transport.requests, [])

    def test_invalid_model_returns_400_with_configured_models(self):
        self.use_gateway({Provider.GEMINI: "gm-key"}, no_network)

        resp = self.client.post(URL, json={"model": "gpt-4", "prompt": "hi"})

        self.assertEqual(resp.status_code, 400)
        data = resp.json()
        self.assertIn("gpt-4", data["error"])
        self.assertEqual(data["configuredModels"], ["gemini"])

    def test_unconfigured_model_returns_400_with_env_var(self):
        self.use_gateway({Provider.GEMINI: "gm-key"}, no_network)

        resp = self.client.post(URL, json={"model": "grok", "productName": "Tee"})

        self.assertEqual(resp.status_code, 400)
        data = resp.json()
        self.assertEqual(data["requiredEnvVar"], "GROK_API_KEY")
        self.assertEqual(data["configuredModels"], ["gemini"])
        self.assertEqual(self.transport.requests, [])

    def test_provider_failure_returns_500(self):
        self.use_gateway({Provider.GEMINI: "gm-key"}, reply(403, {"error": {"message": "quota exceeded"}}))

        resp = self.client.post(URL, json={"model": "gemini", "prompt": "hi"})

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "quota exceeded", "model": "gemini"})

    def test_status_lists_models(self):
        resp = self.client.get(URL)

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["availableModels"], ["grok", "gemini"])
        self.assertEqual(data["configuredModels"], ["gemini"])
        self.assertFalse(data["models"]["grok"]["configured"])
        self.assertTrue(data["models"]["gemini"]["configured"])
        self.assertEqual(data["models"]["grok"]["envVar"], "GROK_API_KEY")
        self.assertEqual(data["models"]["gemini"]["name"], "Gemini Pro")

    def test_missing_cookie_returns_401(self):
        with TestClient(app) as anon:
            self.assertEqual(anon.post(URL, json={"model": "gemini", "prompt": "hi"}).status_code, 401)
            self.assertEqual(anon.get(URL).status_code, 401)
        self.assertEqual(self.transport.requests, [])

    def test_wrong_cookie_returns_401(self):
        with TestClient(app, cookies={"admin_session": "nope"}) as other:
            self.assertEqual(other.get(URL).status_code, 401)

    def test_admin_responses_are_not_cached(self):
        resp = self.client.get(URL)
        self.assertEqual(resp.headers["Cache-Control"], "no-store")


class AdminGateWithoutSecretTests(unittest.TestCase):
    @patch.dict(os.environ, {"ADMIN_SECRET_KEY": ""}, clear=False)
    def test_unset_secret_rejects_everyone(self):
        from app.core.config import get_settings

        get_settings.cache_clear()
        with TestClient(app, cookies={"admin_session": ""}) as c:
            self.assertEqual(c.get(URL).status_code, 401)


class HealthTests(unittest.TestCase):
    def test_health(self):
        with TestClient(app) as c:
            resp = c.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})
        self.assertEqual(resp.headers["X-Content-Type-Options"], "nosniff")


if __name__ == "__main__":
    unittest.main()
