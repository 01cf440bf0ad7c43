"""Tests for the App class."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers
from fastapi import FastAPI
from google.api_core import exceptions as api_exceptions
from httpx import ASGITransport, AsyncClient

from contact_form.application.app import HEALTH_FAILURE, App
from contact_form.domain.errors import ConfigurationError


def _fake_firestore_client() -> MagicMock:
    client = MagicMock()
    client.collection.return_value.limit.return_value.get = AsyncMock(return_value=[])
    return client


@pytest.fixture
def app():
    app = App()
    app.container.firestore_client.override(providers.Object(_fake_firestore_client()))
    yield app
    app.container.firestore_client.reset_override()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestApp:
    def test_app_has_fastapi_instance(self):
        assert isinstance(App().fastapi, FastAPI)

    def test_openapi_schema_is_generated(self):
        schema = App().fastapi.openapi()

        assert schema["info"]["title"] == "Contact Form Service"
        assert schema["info"]["version"] == "1.0.0"
        assert "/api/messages" in schema["paths"]
        assert "/api/messages/{message_id}" in schema["paths"]
        assert "/health" in schema["paths"]
        assert set(schema["paths"]["/api/messages"]) == {"get", "post"}
        assert set(schema["paths"]["/api/messages/{message_id}"]) == {"put", "delete"}

    def test_openapi_has_components(self):
        schemas = App().fastapi.openapi()["components"]["schemas"]

        assert "MessageRequest" in schemas
        assert "MessageConfirmation" in schemas
        assert "MessageItem" in schemas
        assert "ErrorResponse" in schemas

    def test_app_has_container(self):
        app = App()
        assert hasattr(app.container, "config")
        assert hasattr(app.container, "firestore_client")

    def test_container_receives_settings(self):
        app = App()
        assert app.container.config.collection_name() == "contactMessages"

    def test_app_is_callable(self):
        assert callable(App())


class TestAppMiddleware:
    async def test_adds_request_id_header_to_response(self, client):
        resp = await client.get("/health")
        assert "X-Request-ID" in resp.headers

    async def test_echoes_provided_request_id(self, client):
        resp = await client.get("/health", headers={"X-Request-ID": "my-req-123"})
        assert resp.headers["X-Request-ID"] == "my-req-123"

    async def test_unknown_route_returns_404(self, client):
        resp = await client.get("/api/nothing-here")
        assert resp.status_code == 404


class TestAppHealthEndpoint:
    async def test_health_returns_healthy_status(self, client):
        resp = await client.get("/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}

    async def test_health_check_queries_the_collection(self, app, client):
        await client.get("/health")

        fake = app.container.firestore_client()
        fake.collection.assert_called_with("contactMessages")
        fake.collection.return_value.limit.assert_called_with(1)

    async def test_health_uses_configured_collection(self, app, client):
        app.container.config.collection_name.from_value("otherCollection")

        await client.get("/health")

        app.container.firestore_client().collection.assert_called_with("otherCollection")

    async def test_store_failure_returns_json_error(self, app, client):
        fake = app.container.firestore_client()
        fake.collection.return_value.limit.return_value.get = AsyncMock(
            side_effect=api_exceptions.ServiceUnavailable("down")
        )

        resp = await client.get("/health")

        assert resp.status_code == 500
        error = resp.json()["error"]
        assert error.startswith(f"{HEALTH_FAILURE}: ")
        assert "down" in error


class TestAppLifespan:
    async def test_startup_builds_the_client(self, app):
        async with app._lifespan(app.fastapi):
            pass

    async def test_configuration_error_aborts_startup(self):
        app = App()

        def _fail():
            raise ConfigurationError("Arquivo de credenciais não encontrado em: /nope.json")

        app.container.firestore_client.override(providers.Callable(_fail))
        try:
            with pytest.raises(ConfigurationError):
                async with app._lifespan(app.fastapi):
                    pass
        finally:
            app.container.firestore_client.reset_override()
