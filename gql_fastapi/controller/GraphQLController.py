"""
GraphQL Controller
──────────────────────────────────────────────────────────────────────────
FastAPI integration for the GraphQL endpoint with Strawberry.
"""

from typing import Any, Dict

import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from gql_fastapi.dto.GraphQLModuleConfig import GraphQLModuleConfig


def _make_context_getter(config: GraphQLModuleConfig):
    def get_context(request: Request) -> Dict[str, Any]:
        """Get context for GraphQL resolvers."""
        return {
            "request": request,
            "config": config,
        }
    return get_context


def make_graphql_router(config: GraphQLModuleConfig, schema: strawberry.Schema) -> GraphQLRouter:
    # GraphiQL is served by GraphiQLHandler, so Strawberry's own IDE stays off
    return GraphQLRouter(
        schema,
        path=config.graphql_path,
        graphql_ide=None,
        allow_queries_via_get=False,
        context_getter=_make_context_getter(config),
    )
