from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from gql_fastapi.dto.GraphQLModuleConfig import GraphQLModuleConfig

# ─────────────────────────────────────────────────────────────
# Pick dotenv file based on PROFILE (dev / prod / staging …)
# ─────────────────────────────────────────────────────────────
PROFILE = os.getenv("PROFILE", "development")
DOTENV_FILE = f".env.{PROFILE}" if Path(f".env.{PROFILE}").exists() else ".env"
load_dotenv(DOTENV_FILE, override=False)


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────
class Settings(BaseSettings):
    """
    Canonical configuration object.

    Environment variables always override the .env file.
    """

    PROFILE: str = PROFILE

    # —--- GraphQL module ---—
    ACTIVATE_GRAPHIQL: bool = Field(False, description="Serve the GraphiQL browser page")
    GRAPHQL_PATH: str = Field("/graphql")
    GRAPHIQL_ASSET: Optional[Path] = Field(None, description="Override for the bundled index.html")

    # —--- Logging ---—
    LOG_LEVEL: str = Field("INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE: Optional[str] = Field(None)

    # —--- Misc ---—
    ALLOWED_ORIGINS: str = Field("*")

    class Config:
        env_file = DOTENV_FILE
        case_sensitive = False
        extra = "ignore"

    # —--- Convenience helpers ---—
    def graphql_module_config(self) -> GraphQLModuleConfig:
        """Build the immutable config handed to GraphQLModule."""
        values = {
            "activate_graphiql": self.ACTIVATE_GRAPHIQL,
            "graphql_path": self.GRAPHQL_PATH,
        }
        if self.GRAPHIQL_ASSET is not None:
            values["graphiql_asset"] = self.GRAPHIQL_ASSET
        return GraphQLModuleConfig(**values)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()] or ["*"]


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()
