"""Server bootstrap for the fact-check MCP service.

Creates the FastMCP instance, builds the configured FactCheckService,
registers the tools and starts the MCP server (stdio transport).
"""

from mcp.server.fastmcp import FastMCP

from app_logging import configure_logging
from config import LOG_LEVEL
from services.factory import build_service

from tools.fact_check import register as register_fact_check

mcp = FastMCP("factcheck-mcp")


def register_all() -> None:
    register_fact_check(mcp, service=build_service())


register_all()


def main() -> None:
    configure_logging(LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
