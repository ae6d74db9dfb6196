"""
Demo GraphQL Schema
──────────────────────────────────────────────────────────────────────────
Small Strawberry schema used by the demo application and the tests.
Hosts pass their own schema to GraphQLModule.
"""

from datetime import datetime, timezone
from typing import Optional

import strawberry
from strawberry.types import Info


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self, name: Optional[str] = None) -> str:
        """
        Greet a caller.

        Example:
        ```graphql
        query {
          hello(name: "Ada")
        }
        ```
        """
        return f"Hello, {name or 'world'}!"

    @strawberry.field
    def server_time(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    @strawberry.field
    def graphiql_active(self, info: Info) -> bool:
        """Whether the browser endpoint is serving GraphiQL."""
        return info.context["config"].activate_graphiql

    @strawberry.field
    def fail(self) -> str:
        raise ValueError("resolver failed")


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    def echo(self, message: str) -> str:
        return message


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)
