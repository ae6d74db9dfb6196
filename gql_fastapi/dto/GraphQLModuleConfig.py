from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bundled with the package, see pyproject package-data
DEFAULT_GRAPHIQL_ASSET = Path(__file__).resolve().parent.parent / "static" / "index.html"


class GraphQLModuleConfig(BaseModel):
    """
    Read-only configuration shared by both GraphQL handlers.

    Built once at startup and passed by reference; assignment raises.
    The browser page always lives at ``<graphql_path>/browser``, which is
    where the bundled page expects to find its endpoint.
    """
    model_config = ConfigDict(frozen=True)

    activate_graphiql: bool = False
    graphql_path: str = "/graphql"
    graphiql_asset: Path = Field(default=DEFAULT_GRAPHIQL_ASSET)

    @field_validator("graphql_path")
    @classmethod
    def _normalise_path(cls, value: str) -> str:
        path = value.rstrip("/")
        if not path.startswith("/"):
            raise ValueError("graphql_path must start with '/'")
        return path

    @property
    def graphiql_path(self) -> str:
        return f"{self.graphql_path}/browser"
