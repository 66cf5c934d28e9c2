"""
Request dependencies: live stores, draft storage and admin authentication.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from moonfilm.config import settings
from moonfilm.platform import AuthClient, PlatformError
from moonfilm.quote.drafts import DraftStorage
from moonfilm.schemas import AuthUser
from moonfilm.stores import ReceiptStore, ServiceStore, SettingsStore

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


def get_service_store(request: Request) -> ServiceStore:
    return request.app.state.services


def get_receipt_store(request: Request) -> ReceiptStore:
    return request.app.state.receipts


def get_settings_store(request: Request) -> SettingsStore:
    return request.app.state.settings


def get_drafts() -> DraftStorage:
    return DraftStorage(settings.DRAFTS_DIR)


def get_auth_client(request: Request) -> AuthClient:
    return request.app.state.auth


def get_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> str:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def require_admin(
    token: str = Depends(get_token),
    auth: AuthClient = Depends(get_auth_client),
) -> AuthUser:
    try:
        return auth.get_user(token)
    except PlatformError as e:
        logger.warning("Rejected admin token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )
