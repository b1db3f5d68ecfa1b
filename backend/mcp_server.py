"""FastMCP server exposing blueprint derivation as MCP tools.

Tools:
  - lookup_asset_sources(label, category, keywords, limit)  — bank search links
  - generate_blueprint(title, theme, description, ...)      — full blueprint JSON
  - playtest_brief(title, theme, description, seed)         — scripted playthrough

The asset catalog is module state replaced via set_catalog() in tests.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from blueprint_forge.banks import AssetBankCatalog
from blueprint_forge.emitter import playtest
from blueprint_forge.models import GameBrief
from blueprint_forge.pipeline import generate_blueprint as run_pipeline
from blueprint_forge.pipeline import interpret

mcp = FastMCP("blueprint-forge")

_catalog: AssetBankCatalog = AssetBankCatalog()


def set_catalog(catalog: AssetBankCatalog) -> None:
    """Replace the active asset catalog (used in tests)."""
    global _catalog
    _catalog = catalog


@mcp.tool()
def lookup_asset_sources(
    label: str, category: str = "", keywords: list[str] | None = None, limit: int = 3
) -> dict:
    """Search links on the asset banks for one asset label."""
    sources = _catalog.lookup(label, category, keywords or [], limit)
    return {"sources": [s.model_dump(mode="json", by_alias=True) for s in sources]}


@mcp.tool()
def generate_blueprint(
    title: str = "",
    theme: str = "",
    description: str = "",
    references: list[str] | None = None,
    instruction: str | None = None,
    seed: int | None = None,
) -> dict:
    """Derive a complete game blueprint (summary, assets, playable code) from a brief."""
    brief = GameBrief(title=title, theme=theme, description=description, references=references or [])
    blueprint = run_pipeline(brief, instruction=instruction, lookup=_catalog, seed=seed)
    return blueprint.to_json_dict()


@mcp.tool()
def playtest_brief(
    title: str = "", theme: str = "", description: str = "", seed: int | None = None
) -> dict:
    """Collect every pickup of the brief's game in a scripted run and report the outcome."""
    world = interpret(GameBrief(title=title, theme=theme, description=description))
    return playtest(world, seed=seed).model_dump()


if __name__ == "__main__":
    mcp.run()
