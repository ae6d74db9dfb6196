"""
GraphQL Module
──────────────────────────────────────────────────────────────────────────
Builds the GraphQL and GraphiQL handlers once and registers them on the app.

    module = GraphQLModule(settings.graphql_module_config(), schema)
    module.install(app)

    POST /graphql          -> Strawberry GraphQLRouter
    GET  /graphql/browser  -> GraphiQLHandler
"""

import logging
from typing import Optional

import strawberry
from fastapi import APIRouter, FastAPI, Request

from gql_fastapi.controller.GraphiQLController import GraphiQLHandler
from gql_fastapi.controller.GraphQLController import make_graphql_router
from gql_fastapi.core.exceptions import ModuleConfigurationError
from gql_fastapi.dto.GraphQLModuleConfig import GraphQLModuleConfig

log = logging.getLogger(__name__)


class GraphQLModule:

    def __init__(self, config: Optional[GraphQLModuleConfig], schema: Optional[strawberry.Schema]):
        if config is None:
            raise ModuleConfigurationError("GraphQLModule requires a GraphQLModuleConfig")
        if schema is None:
            raise ModuleConfigurationError("GraphQLModule requires a GraphQL schema")

        self.config = config
        # one instance each for the whole process
        self.graphql_handler = make_graphql_router(config, schema)
        self.graphiql_handler = GraphiQLHandler(config)
        self.router = self._make_router()

    def _make_router(self) -> APIRouter:
        router = APIRouter(tags=["GraphQL"])
        router.add_api_route(
            self.config.graphiql_path,
            self.graphiql_handler.handle,
            methods=["GET"],
            name="graphiql",
            include_in_schema=False,
        )
        return router

    def install(self, app: FastAPI) -> None:
        app.include_router(self.graphql_handler)
        app.include_router(self.router)
        app.state.graphql_module = self
        log.info(
            "GraphQL mounted at POST %s, GraphiQL at GET %s (%s)",
            self.config.graphql_path,
            self.config.graphiql_path,
            "active" if self.config.activate_graphiql else "disabled",
        )


def get_graphql_module(request: Request) -> GraphQLModule:
    """FastAPI dependency returning the installed module."""
    module = getattr(request.app.state, "graphql_module", None)
    if module is None:
        raise ModuleConfigurationError("GraphQLModule has not been installed on this app")
    return module
