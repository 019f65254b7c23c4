"""FastAPI application exposing the translation pipeline over HTTP."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import Config, config as default_config
from ..logging_config import configure_logging
from ..translation.model_pipeline import ModelPipeline
from ..translation.router import TranslationRouter
from .routes import api, sse

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Config] = None,
    translator: Optional[TranslationRouter] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings used to build the translator (module default if not provided)
        translator: Prebuilt translator, mainly for tests
    """
    config = config or default_config
    if translator is None:
        translator = TranslationRouter(config=config)
        translator.model_pipeline = ModelPipeline.from_config(config, translator.registry)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = await app.state.translator.initialize()
        logger.info("Data files loaded: %s", loaded)
        yield

    app = FastAPI(
        title="LingoPivot",
        description="Offline translation and transliteration API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store services in app state
    app.state.translator = translator

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        supported = request.app.state.translator.registry.supported_languages()
        return api.error_response(400, f"Invalid request: {exc.errors()}", supported)

    # Include routers
    app.include_router(api.router, prefix="/api")
    app.include_router(sse.router, prefix="/api")

    return app


app = create_app()


def main():
    """Entry point for the lingopivot-web command."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the LingoPivot translation API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()
    serve(args.host, args.port, args.reload)


def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    configure_logging(default_config.log_level)
    print(f"Starting LingoPivot at http://{host}:{port}")
    uvicorn.run(
        "lingopivot.web.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
