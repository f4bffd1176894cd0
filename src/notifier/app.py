"""Notifier FastAPI application.

Usage:
    uvicorn notifier.app:build_app --factory --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from notifier.api import router
from notifier.bootstrap import Container, build_container
from notifier.config import Settings
from notifier.exceptions import ValidationError
from notifier.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
async def domain_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Request rejected", path=request.url.path, code=exc.code, errors=exc.messages)
    return JSONResponse(
        status_code=400,
        content={
            "error": {field: "; ".join(errors) for field, errors in exc.messages.items()},
            "code": exc.code,
        },
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors[loc or "body"] = err.get("msg", "Invalid value")
    return JSONResponse(status_code=400, content={"error": errors, "code": "malformed_request"})


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """Build the API around an explicit container (a fresh one when omitted)."""
    container = container or build_container(settings)

    app = FastAPI(
        title="Notifier API",
        description="Multi-channel notification dispatch",
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ValidationError, domain_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "channels": container.registry.list_names(),
            }
        )

    return app


def build_app() -> FastAPI:
    """Entry point for servers: configure logging, then build from the environment."""
    configure_logging()
    return create_app()

