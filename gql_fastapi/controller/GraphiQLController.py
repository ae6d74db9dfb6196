"""
GraphiQL Controller
──────────────────────────────────────────────────────────────────────────
Serves the bundled GraphiQL page when the browser endpoint is activated.

The handler is disabled by default; set ``activate_graphiql`` on the
module config (``ACTIVATE_GRAPHIQL=true`` in the environment) to enable it.
"""

import logging
from pathlib import Path

from fastapi import Request, Response
from fastapi.responses import FileResponse

from gql_fastapi.core.exceptions import GraphiQLAssetNotFoundError
from gql_fastapi.dto.GraphQLModuleConfig import GraphQLModuleConfig

log = logging.getLogger(__name__)


class GraphiQLHandler:

    def __init__(self, config: GraphQLModuleConfig):
        self.config = config
        # fail at startup rather than on the first browser hit
        self._resolve_asset()

    async def handle(self, request: Request) -> Response:
        if not self.config.activate_graphiql:
            return Response(status_code=404)

        return FileResponse(self._resolve_asset(), media_type="text/html")

    def _resolve_asset(self) -> Path:
        path = Path(self.config.graphiql_asset)
        if not path.is_file():
            log.error("GraphiQL asset missing: %s", path)
            raise GraphiQLAssetNotFoundError(path)
        return path
