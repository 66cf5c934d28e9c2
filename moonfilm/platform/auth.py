"""
Client for the hosted authentication API (password sign-in, session lookup, sign-out).
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from moonfilm.platform.errors import raise_for_status
from moonfilm.schemas import AuthSession, AuthUser

logger = logging.getLogger(__name__)


def _user(data: dict) -> AuthUser:
    return AuthUser(id=str(data["id"]), email=data.get("email"), role=data.get("role"))


class AuthClient:
    def __init__(
        self,
        base_url: str,
        anon_key: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self._client = httpx.Client(
            base_url=f"{self.base_url}/auth/v1",
            headers={"apikey": anon_key},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        logger.info("Signing in %s", email)
        response = self._client.post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        raise_for_status(response)
        data = response.json()
        return AuthSession(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
            token_type=data.get("token_type", "bearer"),
            user=_user(data["user"]),
        )

    def get_user(self, access_token: str) -> AuthUser:
        response = self._client.get("/user", headers={"Authorization": f"Bearer {access_token}"})
        raise_for_status(response)
        return _user(response.json())

    def sign_out(self, access_token: str) -> None:
        response = self._client.post("/logout", headers={"Authorization": f"Bearer {access_token}"})
        raise_for_status(response)
        logger.info("Signed out")
