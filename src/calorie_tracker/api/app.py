"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calorie_tracker.api.entries import router as entries_router
from calorie_tracker.api.responses import bad_request, decode_json_body, error_response
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import ResolutionError

_HTTP_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(entries_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = _HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return JSONResponse(
            {"error": message}, status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return bad_request("Invalid request")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/parse-entry")
    async def parse_entry(request: Request) -> JSONResponse:
        """Resolve a free-text description into a meal or workout entry."""
        state_container: AppContainer = request.app.state.container
        body = decode_json_body(await request.body())
        try:
            entry = await state_container.entry_resolver.resolve(body.get("text"))
        except ResolutionError as exc:
            logger.info("Parse entry failed: %s", exc.kind.value)
            return error_response(exc)
        except Exception as exc:
            logger.exception("Parse entry error")
            return error_response(exc)
        return JSONResponse(entry.to_wire())

    return app
