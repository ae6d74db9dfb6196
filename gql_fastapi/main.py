"""
FastAPI Application with the GraphQL Module
──────────────────────────────────────────────────────────────────────────
Application factory wiring settings, logging, middleware and the module.
"""

from contextlib import asynccontextmanager
from typing import Optional

import strawberry
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gql_fastapi.core.GraphQLModule import GraphQLModule, get_graphql_module
from gql_fastapi.core.logger import setup_logger
from gql_fastapi.core.pydanticConfig.settings import Settings, get_settings
from gql_fastapi.graphql.schema import schema as demo_schema

log = setup_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    schema: Optional[strawberry.Schema] = None,
) -> FastAPI:
    """
    FastAPI application factory. Builds the GraphQL module once, so both
    handlers exist before the first request, then installs its routes.
    """
    cfg = settings or get_settings()
    module = GraphQLModule(cfg.graphql_module_config(), schema or demo_schema)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Starting GraphQL API (profile=%s)...", cfg.PROFILE)
        yield
        log.info("GraphQL API shut down.")

    app = FastAPI(
        title="GraphQL API",
        description="GraphQL endpoint with optional GraphiQL browser",
        version="0.2.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg

    # ─── middleware ------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── exception handlers ---------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        log.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    # ─── routes ---------------------------------------------------------
    module.install(app)

    @app.get("/health", tags=["Meta"])
    async def health_check(graphql: GraphQLModule = Depends(get_graphql_module)):
        return {
            "status": "healthy",
            "graphql": graphql.config.graphql_path,
            "graphiql": graphql.config.activate_graphiql,
        }

    return app

