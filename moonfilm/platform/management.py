"""
Client for the platform management API: runs raw SQL against a project.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from moonfilm.platform.errors import raise_for_status

logger = logging.getLogger(__name__)


class ManagementClient:
    def __init__(
        self,
        project_ref: str,
        access_token: str,
        api_url: str = "https://api.supabase.com",
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.project_ref = project_ref
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def run_sql(self, sql: str) -> Any:
        response = self._client.post(
            f"/v1/projects/{self.project_ref}/database/query",
            json={"query": sql},
        )
        raise_for_status(response)
        return response.json()
