"""
Tests for the GraphiQL browser endpoint.
"""

import pytest

from gql_fastapi.controller.GraphiQLController import GraphiQLHandler
from gql_fastapi.core.exceptions import GraphiQLAssetNotFoundError
from gql_fastapi.dto.GraphQLModuleConfig import DEFAULT_GRAPHIQL_ASSET, GraphQLModuleConfig


def test_bundled_asset_is_served_when_active(client):
    response = client.get("/graphql/browser")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.content
    assert response.content == DEFAULT_GRAPHIQL_ASSET.read_bytes()


def test_disabled_browser_returns_empty_404(make_client):
    client = make_client(ACTIVATE_GRAPHIQL=False)

    response = client.get("/graphql/browser")

    assert response.status_code == 404
    assert response.content == b""


def test_custom_asset_contents_are_returned(make_client, asset):
    client = make_client(ACTIVATE_GRAPHIQL=True, GRAPHIQL_ASSET=asset)

    response = client.get("/graphql/browser")

    assert response.status_code == 200
    assert response.content == asset.read_bytes()


def test_toggling_flag_changes_only_status_and_body(make_client, asset):
    enabled = make_client(ACTIVATE_GRAPHIQL=True, GRAPHIQL_ASSET=asset)
    disabled = make_client(ACTIVATE_GRAPHIQL=False, GRAPHIQL_ASSET=asset)

    on = enabled.get("/graphql/browser")
    off = disabled.get("/graphql/browser")

    assert (on.status_code, off.status_code) == (200, 404)
    assert on.content == asset.read_bytes()
    assert off.content == b""
    # the asset is untouched either way
    assert asset.exists()
    assert enabled.get("/graphql/browser").content == on.content


def test_missing_asset_fails_at_construction(tmp_path):
    config = GraphQLModuleConfig(activate_graphiql=True, graphiql_asset=tmp_path / "missing.html")

    with pytest.raises(GraphiQLAssetNotFoundError) as exc_info:
        GraphiQLHandler(config)

    assert exc_info.value.path == tmp_path / "missing.html"


def test_missing_asset_fails_even_when_disabled(tmp_path):
    config = GraphQLModuleConfig(activate_graphiql=False, graphiql_asset=tmp_path / "missing.html")

    with pytest.raises(GraphiQLAssetNotFoundError):
        GraphiQLHandler(config)


def test_asset_removed_after_startup_is_a_server_error(make_client, asset):
    client = make_client(ACTIVATE_GRAPHIQL=True, GRAPHIQL_ASSET=asset)
    asset.unlink()

    response = client.get("/graphql/browser")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_asset_removed_after_startup_is_ignored_when_disabled(make_client, asset):
    client = make_client(ACTIVATE_GRAPHIQL=False, GRAPHIQL_ASSET=asset)
    asset.unlink()

    response = client.get("/graphql/browser")

    assert response.status_code == 404
    assert response.content == b""
