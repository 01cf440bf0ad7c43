from __future__ import annotations

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from google.api_core import exceptions as api_exceptions

from contact_form.container import Container
from contact_form.infrastructure import settings
from contact_form.infrastructure.logging import setup_logging
from contact_form.infrastructure.request_context import (
    REQUEST_ID_HEADER,
    bind_request_context,
    clear_request_context,
    set_request_id,
)
from contact_form.infrastructure.web.errors import ApiError, api_error_handler
from contact_form.infrastructure.web.routes import router as messages_router

# Configure logging early so all logs use consistent formatting
setup_logging()
log = structlog.stdlib.get_logger()

HEALTH_FAILURE = "Falha ao acessar o banco de dados"


class App:
    def __init__(self) -> None:
        self._container = Container()
        self._container.config.from_dict(
            {
                "credentials_path": settings.CREDENTIALS_PATH,
                "bundled_credentials_path": settings.BUNDLED_CREDENTIALS_PATH,
                "database_id": settings.DATABASE_ID,
                "collection_name": settings.COLLECTION_NAME,
            }
        )
        self._container.wire()
        log.info(
            "app.firestore.configured",
            credentials_path=settings.CREDENTIALS_PATH or None,
            database_id=settings.DATABASE_ID or "(default)",
            collection=settings.COLLECTION_NAME,
        )

        self._fastapi = FastAPI(
            title="Contact Form Service",
            description="""
Backend for a website contact form. Messages are stored in Firestore.

## Features

* **Submit** - Validate and store a message sent through the form
* **List** - Retrieve every stored message, newest first
* **Update** - Correct the name, email or text of a stored message
* **Delete** - Permanently remove a message

Errors are returned as `{"error": "<description>"}`.
            """,
            version="1.0.0",
            openapi_tags=[
                {
                    "name": "messages",
                    "description": "Contact form messages",
                },
                {
                    "name": "health",
                    "description": "Health check endpoints for monitoring",
                },
            ],
            lifespan=self._lifespan,
        )
        self._fastapi.include_router(messages_router)
        self._fastapi.add_exception_handler(ApiError, api_error_handler)
        self._fastapi.middleware("http")(self._logging_middleware)
        # Added last so it wraps the logging middleware and answers preflights first
        self._fastapi.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER],
        )
        self._fastapi.get(
            "/health",
            tags=["health"],
            summary="Health check",
            response_description="Service health status",
        )(self._health_check)

    @property
    def fastapi(self) -> FastAPI:
        return self._fastapi

    @property
    def container(self) -> Container:
        return self._container

    async def __call__(self, scope, receive, send) -> None:
        await self._fastapi(scope, receive, send)

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        # Resolve credentials before serving; a ConfigurationError aborts startup
        self._container.firestore_client()
        log.info("app.started")
        yield
        # AsyncClient has no public close(); its gRPC channel goes away with the process
        log.info("app.shutdown")

    async def _health_check(self) -> dict:
        """Health check endpoint for Docker/Kubernetes liveness probes."""
        client = self._container.firestore_client()
        try:
            await client.collection(self._container.config.collection_name()).limit(1).get()
        except api_exceptions.GoogleAPIError as e:
            log.error("health.failed", error=str(e), error_type=type(e).__name__)
            raise ApiError(500, f"{HEALTH_FAILURE}: {e}") from e
        return {"status": "healthy"}

    @staticmethod
    async def _logging_middleware(request: Request, call_next) -> Response:
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        bind_request_context(
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

            if response.status_code >= 500:
                log.error(
                    "request.completed",
                    status_code=response.status_code,
                    elapsed_ms=elapsed_ms,
                )
            elif response.status_code >= 400:
                log.warning(
                    "request.completed",
                    status_code=response.status_code,
                    elapsed_ms=elapsed_ms,
                )
            else:
                log.info(
                    "request.completed",
                    status_code=response.status_code,
                    elapsed_ms=elapsed_ms,
                )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            log.error(
                "request.failed",
                elapsed_ms=elapsed_ms,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        finally:
            clear_request_context()
