"""FastAPI application exposing US address validation.

Run with: address-validation  (or uvicorn address_validation.api:app)
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .client import GeocodingClient
from .config import Settings, load_settings
from .engine import ClassifierConfig, ResultClassifier
from .exceptions import AddressValidationError, InvalidAddressPayload, RouteNotFound
from .logs import configure_logging
from .schemas import ADDRESS_ERROR_TYPE, ValidateAddressRequest, ValidateAddressResponse

logger = logging.getLogger(__name__)


def _payload_error(exc: RequestValidationError) -> InvalidAddressPayload:
    for error in exc.errors():
        if error.get("type") == ADDRESS_ERROR_TYPE:
            return InvalidAddressPayload(error["msg"])
    return InvalidAddressPayload("Invalid request body")


def _error_response(request: Request, exc: AddressValidationError) -> JSONResponse:
    logger.error(
        "request.error",
        extra={
            "requestId": getattr(request.state, "request_id", None),
            "status": exc.status_code,
            "error": exc.message,
            "details": exc.details,
        },
    )
    body: Dict[str, Any] = {"error": exc.message}
    if exc.details is not None:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


def build_client(settings: Settings) -> GeocodingClient:
    if not settings.google_api_key:
        logger.warning("config.missing_api_key")
    classifier = ResultClassifier(ClassifierConfig(similarity_threshold=settings.similarity_threshold))
    return GeocodingClient(
        api_key=settings.google_api_key,
        base_url=settings.geocoding_url,
        timeout=settings.request_timeout,
        classifier=classifier,
    )


def create_app(settings: Optional[Settings] = None, client: Optional[GeocodingClient] = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        if app.state.client is None:
            app.state.client = build_client(settings)
        logger.info("app.routes.ready")
        yield
        app.state.client.close()

    app = FastAPI(
        title="Address Validation",
        description="Classify free-form US addresses against the Google geocoder.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.client = client

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.completed",
            extra={
                "requestId": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "durationMs": round((time.perf_counter() - start) * 1000),
            },
        )
        return response

    @app.exception_handler(AddressValidationError)
    async def handle_validation_error(request: Request, exc: AddressValidationError):
        return _error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        return _error_response(request, _payload_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(request, RouteNotFound())
        return _error_response(
            request, AddressValidationError(str(exc.detail), status_code=exc.status_code)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error("request.unhandled", exc_info=exc)
        return _error_response(request, AddressValidationError("Internal server error"))

    @app.get("/", response_class=PlainTextResponse)
    def index() -> str:
        return "Server is up"

    @app.post(
        "/validate-address",
        response_model=ValidateAddressResponse,
        response_model_exclude_none=True,
    )
    def validate_address(request: Request, body: ValidateAddressRequest) -> ValidateAddressResponse:
        outcome = request.app.state.client.validate(body.address)
        return ValidateAddressResponse.from_outcome(body.address, outcome)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
