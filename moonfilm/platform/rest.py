"""
Client for the hosted REST table API, authenticated with the anonymous key.

Used by the maintenance diagnostics to check what an anonymous visitor may write.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from moonfilm.platform.errors import raise_for_status

logger = logging.getLogger(__name__)


class RestClient:
    def __init__(
        self,
        base_url: str,
        anon_key: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": anon_key,
                "Authorization": f"Bearer {anon_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def insert(self, table: str, rows: list[dict[str, Any]], returning: bool = False) -> list[dict]:
        prefer = "return=representation" if returning else "return=minimal"
        logger.info("Inserting %d row(s) into %s", len(rows), table)
        response = self._client.post(f"/{table}", json=rows, headers={"Prefer": prefer})
        raise_for_status(response)
        return response.json() if returning and response.content else []
