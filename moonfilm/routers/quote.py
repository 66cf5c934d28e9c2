"""
Quote builder endpoints. The draft is identified by the ``draft_id`` cookie.

GET    /api/quote                       — current draft
PUT    /api/quote/details               — customer / event / notes
POST   /api/quote/items/{service_id}    — add one unit of a service
PATCH  /api/quote/items/{service_id}    — set quantity (≤ 0 removes)
DELETE /api/quote/items/{service_id}    — remove a line
POST   /api/quote/submit                — build receipt and hand off
"""
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from moonfilm.config import settings
from moonfilm.deps import get_drafts, get_receipt_store, get_service_store, get_settings_store
from moonfilm.quote import submit_quote
from moonfilm.quote.builder import EmptyCartError
from moonfilm.quote.cart import add_service, cart_total, remove_item, update_quantity
from moonfilm.quote.drafts import DraftStorage
from moonfilm.schemas import (
    DraftDetails,
    DraftResponse,
    HandOffResponse,
    QuantityUpdate,
    ReceiptDraft,
)
from moonfilm.stores import ReceiptStore, ServiceStore, SettingsStore

logger = logging.getLogger(__name__)
router = APIRouter()

DRAFT_COOKIE = "draft_id"


def draft_key(request: Request, response: Response) -> str:
    key = request.cookies.get(DRAFT_COOKIE)
    if not key:
        key = uuid.uuid4().hex
        logger.info("New draft %s", key)
    response.set_cookie(DRAFT_COOKIE, key, httponly=True, samesite="lax")
    return key


def _respond(draft: ReceiptDraft) -> DraftResponse:
    return DraftResponse(draft=draft, total=cart_total(draft.selected_items))


def _load(drafts: DraftStorage, key: str) -> ReceiptDraft:
    try:
        return drafts.load(key)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid draft id")


# ── GET /api/quote ───────────────────────────────────────────────────────
@router.get("/quote", response_model=DraftResponse)
def get_quote(key: str = Depends(draft_key), drafts: DraftStorage = Depends(get_drafts)):
    return _respond(_load(drafts, key))


# ── PUT /api/quote/details ───────────────────────────────────────────────
@router.put("/quote/details", response_model=DraftResponse)
def update_details(
    req: DraftDetails,
    key: str = Depends(draft_key),
    drafts: DraftStorage = Depends(get_drafts),
):
    draft = _load(drafts, key).model_copy(update=req.model_dump(exclude_none=True))
    drafts.save(key, draft)
    return _respond(draft)


# ── POST /api/quote/items/{service_id} ───────────────────────────────────
@router.post("/quote/items/{service_id}", response_model=DraftResponse)
def add_item(
    service_id: str,
    key: str = Depends(draft_key),
    drafts: DraftStorage = Depends(get_drafts),
    services: ServiceStore = Depends(get_service_store),
):
    service = services.get(service_id)
    if service is None or not service.is_active:
        raise HTTPException(status_code=404, detail="Service not found")
    draft = _load(drafts, key)
    draft.selected_items = add_service(draft.selected_items, service)
    drafts.save(key, draft)
    return _respond(draft)


# ── PATCH /api/quote/items/{service_id} ──────────────────────────────────
@router.patch("/quote/items/{service_id}", response_model=DraftResponse)
def set_quantity(
    service_id: str,
    req: QuantityUpdate,
    key: str = Depends(draft_key),
    drafts: DraftStorage = Depends(get_drafts),
):
    draft = _load(drafts, key)
    if not any(i.service_id == service_id for i in draft.selected_items):
        raise HTTPException(status_code=404, detail="Service not in quote")
    draft.selected_items = update_quantity(draft.selected_items, service_id, req.quantity)
    drafts.save(key, draft)
    return _respond(draft)


# ── DELETE /api/quote/items/{service_id} ─────────────────────────────────
@router.delete("/quote/items/{service_id}", response_model=DraftResponse)
def delete_item(
    service_id: str,
    key: str = Depends(draft_key),
    drafts: DraftStorage = Depends(get_drafts),
):
    draft = _load(drafts, key)
    draft.selected_items = remove_item(draft.selected_items, service_id)
    drafts.save(key, draft)
    return _respond(draft)


# ── POST /api/quote/submit ───────────────────────────────────────────────
@router.post("/quote/submit", response_model=HandOffResponse)
def submit(
    key: str = Depends(draft_key),
    drafts: DraftStorage = Depends(get_drafts),
    receipts: ReceiptStore = Depends(get_receipt_store),
    settings_store: SettingsStore = Depends(get_settings_store),
):
    _load(drafts, key)
    try:
        result = submit_quote(key, drafts, settings_store.current, receipts, settings.RECEIPT_PREFIX)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return HandOffResponse(
        receipt=result.receipt,
        whatsapp_url=result.whatsapp_url,
        persisted=result.persisted,
    )
