"""MCP tools for fact-checking text.

Registers 'fact_check', which runs a text through the FactCheckService and
returns the verdicts as plain dicts, and 'clear_fact_check_cache'.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from core.keys import resolve_identity
from services.fact_check_service import FactCheckService
from services.factory import build_service


def register(mcp: FastMCP, *, service: Optional[FactCheckService] = None) -> None:
    svc = service if service is not None else build_service()

    @mcp.tool(name="fact_check")
    async def fact_check(text: str, client_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Fact-check a text and return one verdict per checked statement.

        Params:
          - text: the text to check (required).
          - client_id: caller identity for rate limiting, e.g. a forwarded
            address. Defaults to "unknown".

        Returns:
          A list of {text, result, explanation, sources} objects, where result
          is one of correct, incorrect, unverifiable, debatable, not-applicable.

        Raises:
          ValidationError if text is empty; RateLimitedError when the caller
          exceeded its request budget; ExternalServiceError or
          MalformedResultError when the backend keeps failing.
        """
        results = await svc.check(text, resolve_identity(client_id))
        return [r.to_dict() for r in results]

    @mcp.tool(name="clear_fact_check_cache")
    async def clear_fact_check_cache() -> str:
        """Drop every cached fact-check result."""
        svc.clear_cache()
        return "Fact-check cache cleared"
