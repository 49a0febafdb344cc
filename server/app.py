"""FastAPI application factory."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config.config import Config
from context.session_context import QueryContext
from orchestrator.core import QueryGateway
from server.graphql_schema import create_graphql_router
from server.middleware import RequestIDMiddleware
from server.routes import health, query, records
from utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup/shutdown logic."""
    logger.info(
        "FastAPI server starting up",
        extra={"extra_fields": {"providers": app.state.context.registry.provider_ids()}},
    )
    yield
    logger.info(
        "FastAPI server shutting down",
        extra={"extra_fields": {"records": len(app.state.context.records)}},
    )


def create_app(config: Config | None = None, context: QueryContext | None = None) -> FastAPI:
    """
    Factory function to create the FastAPI application.

    Args:
        config: Configuration; read from the environment when omitted
        context: Pre-built query context (tests); built from config when omitted
    """
    config = config or Config()
    if not config.validate():
        raise ValueError("Invalid configuration")

    app = FastAPI(
        title="Tiered Query API",
        description="Cache, native system module and AI provider fallback behind GraphQL",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.context = context or QueryContext.from_config(config)
    app.state.gateway = QueryGateway(app.state.context)

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes – registered first so /graphql and /v1/* take precedence over static files
    app.include_router(health.router)
    app.include_router(query.router)
    app.include_router(records.router)
    app.include_router(create_graphql_router(), prefix="/graphql")

    # Serve the frontend SPA from the /frontend directory at root path
    frontend_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "frontend")
    if os.path.isdir(frontend_dir):
        app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
    else:
        logger.warning(f"Frontend directory not found at {frontend_dir}; skipping static mount")

    return app
