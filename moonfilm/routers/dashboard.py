"""
Admin dashboard, settings and theme endpoints.

GET   /api/admin/overview            — revenue and status summary
GET   /api/admin/settings            — business settings
PATCH /api/admin/settings/{panel}    — save one settings panel (business | payments | theme)
GET   /api/admin/themes              — available color themes
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from moonfilm.admin.overview import build_overview
from moonfilm.admin.panels import PanelError, SettingsPanel
from moonfilm.admin.themes import THEMES
from moonfilm.deps import get_receipt_store, get_service_store, get_settings_store
from moonfilm.schemas import BusinessSettings, Overview, PanelResponse, PanelUpdate, Theme
from moonfilm.stores import ReceiptStore, ServiceStore, SettingsStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/overview", response_model=Overview)
def overview(
    receipts: ReceiptStore = Depends(get_receipt_store),
    services: ServiceStore = Depends(get_service_store),
):
    return build_overview(receipts.items, services.items)


@router.get("/settings", response_model=BusinessSettings)
def get_settings(settings_store: SettingsStore = Depends(get_settings_store)):
    return settings_store.current


@router.patch("/settings/{panel}", response_model=PanelResponse)
def save_panel(
    panel: str,
    req: PanelUpdate,
    settings_store: SettingsStore = Depends(get_settings_store),
):
    try:
        editor = SettingsPanel(panel, settings_store)
    except PanelError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        for key, value in req.changes.items():
            editor.change(key, value)
    except PanelError as e:
        raise HTTPException(status_code=400, detail=str(e))

    saved = editor.save()
    logger.info("Settings panel %s saved=%s", panel, saved)
    return PanelResponse(panel=panel, settings=editor.local, saved=saved, dirty=editor.dirty)


@router.get("/themes", response_model=list[Theme])
def list_themes():
    return THEMES
