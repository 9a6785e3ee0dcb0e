"""FastAPI application for the docrag knowledge base."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from ....config.logging import setup_logging
from ....config.settings import Settings, settings
from ....core.domain.exceptions import RAGError
from .routers import chat, documents, health, stats

logger = logging.getLogger(__name__)


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def create_app(config: Settings = settings) -> FastAPI:
    """Build the API application.

    Args:
        config: Settings controlling logging, CORS and error verbosity.

    Returns:
        Configured FastAPI app with every router mounted.
    """
    setup_logging(config.log_level, json_format=config.log_json)

    application = FastAPI(
        title="docrag API",
        description=(
            "In-memory semantic search and retrieval-augmented question answering "
            "over your own documents."
        ),
        version=__version__,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router_module in (health, chat, documents, stats):
        application.include_router(router_module.router)

    async def error_response(request: Request, exc: Exception) -> JSONResponse:
        log_exception(exc, log=logger, extra_context=_request_context(request))
        return JSONResponse(
            status_code=get_http_status_code(exc),
            content=format_exception_json(exc, include_trace=config.debug),
        )

    # Handlers for Exception run in ServerErrorMiddleware, which re-raises
    application.add_exception_handler(RAGError, error_response)
    application.add_exception_handler(Exception, error_response)

    logger.info("docrag API %s ready", __version__)
    return application


app = create_app()

__all__ = ["app", "create_app"]
