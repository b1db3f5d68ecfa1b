"""MCP server tests: tools called directly and through the in-process client."""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

import backend.mcp_server as mcp_server
from blueprint_forge.banks import AssetBankCatalog, AssetLookupError

DESCRIPTION = (
    "Explorer une forêt hantée. Collecter les éclats de lune. "
    "Un boss spectral garde le sanctuaire."
)


class OfflineCatalog(AssetBankCatalog):
    def lookup(self, label, category, keywords=(), limit=3):
        raise AssetLookupError("offline")


@pytest.fixture(autouse=True)
def fresh_catalog():
    mcp_server.set_catalog(AssetBankCatalog())
    yield
    mcp_server.set_catalog(AssetBankCatalog())


# ---------------------------------------------------------------------------
# Direct calls
# ---------------------------------------------------------------------------

def test_lookup_asset_sources_direct():
    result = mcp_server.lookup_asset_sources("Renard", "Personnage", ["forêt"], 2)
    assert len(result["sources"]) == 2
    assert "bankId" in result["sources"][0]


def test_generate_blueprint_direct():
    data = mcp_server.generate_blueprint(title="Brume", description=DESCRIPTION, seed=3)
    assert data["summary"]["title"] == "Brume"
    assert "selectedAssetIds" in data


def test_generate_blueprint_uses_active_catalog():
    mcp_server.set_catalog(OfflineCatalog())
    data = mcp_server.generate_blueprint(title="Brume", description=DESCRIPTION)
    assert all(a["sources"] == [] for a in data["assets"])


def test_playtest_brief_direct():
    report = mcp_server.playtest_brief(title="Brume", description=DESCRIPTION, seed=11)
    assert report["state"] == "victory"
    assert report["collected"] == report["total"]


# ---------------------------------------------------------------------------
# Through the MCP client session
# ---------------------------------------------------------------------------

async def test_tools_are_listed():
    async with create_connected_server_and_client_session(mcp_server.mcp) as client:
        tools = await client.list_tools()
    names = {t.name for t in tools.tools}
    assert {"lookup_asset_sources", "generate_blueprint", "playtest_brief"} <= names


async def test_generate_blueprint_over_mcp():
    async with create_connected_server_and_client_session(mcp_server.mcp) as client:
        result = await client.call_tool(
            "generate_blueprint", {"title": "Brume", "description": DESCRIPTION}
        )
    data = json.loads(result.content[0].text)
    assert data["summary"]["title"] == "Brume"
    assert data["code"].startswith("<!DOCTYPE html>")


async def test_lookup_over_mcp():
    async with create_connected_server_and_client_session(mcp_server.mcp) as client:
        result = await client.call_tool(
            "lookup_asset_sources", {"label": "Coffre", "category": "Objet interactif"}
        )
    data = json.loads(result.content[0].text)
    assert len(data["sources"]) == 3
