from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from core.errors import ExternalServiceError, MalformedResultError, ValidationError


class FactCheckClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        verify: bool = True,
        api_key: Optional[str] = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._timeout = timeout
        self._verify = verify
        self._api_key = api_key

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def check(self, text: str) -> Any:
        body = (text or "").strip()
        if not body:
            raise ValidationError("Text to fact-check is empty")

        url = f"{self._base_url}/fact-check"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, verify=self._verify) as c:
                r = await c.post(url, json={"text": body}, headers=self._headers())
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(f"Fact-check backend returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to call fact-check backend: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            raise MalformedResultError("Fact-check backend returned a non-JSON body") from e
