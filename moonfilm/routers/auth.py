"""
Admin sign-in endpoints backed by the hosted auth API.

POST /api/auth/login     — email + password → session
POST /api/auth/logout    — revoke the bearer token
GET  /api/auth/session   — user for the bearer token
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from moonfilm.deps import get_auth_client, get_token, require_admin
from moonfilm.platform import AuthClient, PlatformError
from moonfilm.schemas import AuthSession, AuthUser, LoginRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/auth/login", response_model=AuthSession)
def login(req: LoginRequest, auth: AuthClient = Depends(get_auth_client)):
    try:
        session = auth.sign_in_with_password(req.email, req.password)
    except PlatformError as e:
        logger.warning("Login failed for %s: %s", req.email, e)
        raise HTTPException(status_code=401, detail=e.message)
    logger.info("Admin signed in: %s", session.user.email)
    return session


@router.post("/auth/logout")
def logout(token: str = Depends(get_token), auth: AuthClient = Depends(get_auth_client)):
    try:
        auth.sign_out(token)
    except PlatformError as e:
        logger.warning("Logout failed: %s", e)
    return {"message": "Signed out"}


@router.get("/auth/session", response_model=AuthUser)
def current_session(user: AuthUser = Depends(require_admin)):
    return user
