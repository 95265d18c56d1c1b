"""
Chat Proxy
Translates vendor-neutral chat requests to an OpenAI-compatible or Gemini API.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.api.routers import api_router
from chat_proxy.middleware.cors import CORSHeadersMiddleware
from chat_proxy.middleware.error_handling import ErrorHandlingMiddleware
from chat_proxy.middleware.request_logging import RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings = get_settings()
    logging.info(f"Starting {settings.app_name} for vendor '{settings.chat_vendor}'")

    if not settings.chat_api_key:
        logging.error(f"{settings.api_key_env} is not set; /chat will answer 500 until it is configured")

    yield

    logging.info("Shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    # httpx logs full request URLs at INFO, and the Gemini key travels in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app = FastAPI(
        title=settings.app_name,
        description="Stateless chat request translation proxy",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # Add custom middleware (last added runs outermost)
    app.add_middleware(ErrorHandlingMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware, settings=settings)
    app.add_middleware(CORSHeadersMiddleware)

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
