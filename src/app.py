"""Listwell Investor API - FastAPI server for landing page investor interest."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.shared.config import Settings, get_settings
from src.shared.investor.errors import InvestorInterestError, MissingField, RateLimited
from src.shared.investor.routes import router as investor_router

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def create_app(settings: Settings) -> FastAPI:
    """Build the API with CORS, error handlers and the landing page for the given settings."""
    app = FastAPI(
        title="Listwell Investor API",
        description="Receives investor interest from the landing page and forwards it by email",
        version="0.1.0"
    )

    # Log configuration status on startup
    @app.on_event("startup")
    async def startup_event():
        logging.info(f"Listwell Investor API running on port {settings.port}")
        logging.info("   POST /api/investor-interest")
        if settings.resend_api_key:
            logging.info("   Resend API key: configured")
        else:
            logging.warning("   Resend API key: missing - notifications will fail")
        if settings.audience_id:
            logging.info("   Audience ID:    configured")
        else:
            logging.warning("   Audience ID:    missing - contacts won't be saved")
        default_note = " (default)" if settings.notify_email_is_default else ""
        logging.info(f"   Notify email:   {settings.notify_email}{default_note}")

    # Include investor interest routes
    app.include_router(investor_router)

    # CORS configuration - must be added before exception handlers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["POST", "GET"],
        allow_headers=["*"],
    )

    def _cors_headers(request: Request) -> dict:
        """CORS headers for responses produced outside the CORS middleware."""
        headers = {}
        origin = request.headers.get("origin")
        if settings.allowed_origin == "*":
            headers["Access-Control-Allow-Origin"] = "*"
        elif origin == settings.allowed_origin:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
        return headers

    @app.exception_handler(InvestorInterestError)
    async def investor_interest_exception_handler(request: Request, exc: InvestorInterestError):
        """Report rate limit and validation failures as {"error": message}."""
        headers = {}
        if isinstance(exc, RateLimited) and exc.retry_after:
            headers["Retry-After"] = str(exc.retry_after)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
            headers=headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """A body that is not a form object is treated as missing fields."""
        logging.info(f"Rejected malformed submission: {exc.errors()}")
        error = MissingField()
        return JSONResponse(
            status_code=error.status_code,
            content={"error": error.message}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Ensure CORS headers are added to all exceptions."""
        logging.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=_cors_headers(request)
        )

    @app.get("/api/health")
    async def health():
        return {"status": "healthy"}

    # Serve the landing page (mounted last so API routes take precedence)
    public_dir = Path(settings.public_dir)
    if not public_dir.is_absolute():
        public_dir = PROJECT_ROOT / public_dir
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
    else:
        logging.warning(f"Static directory {public_dir} not found; landing page will not be served")

    return app


settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
