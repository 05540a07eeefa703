"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rooflayout.application.config import ConfigError


class LayoutGenerationError(Exception):
    """Raised when a layout cannot be generated from a valid configuration."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(LayoutGenerationError)
    async def generation_error_handler(
        request: Request, exc: LayoutGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
