"""
Public catalog endpoint.

GET /api/catalog   — active services, categories and business profile
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from moonfilm.deps import get_service_store, get_settings_store
from moonfilm.quote.cart import filter_services
from moonfilm.quote.handoff import whatsapp_link
from moonfilm.schemas import CATEGORIES, CatalogResponse
from moonfilm.stores import ServiceStore, SettingsStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
def get_catalog(
    category: str = "all",
    services: ServiceStore = Depends(get_service_store),
    settings_store: SettingsStore = Depends(get_settings_store),
):
    try:
        visible = filter_services(services.items, category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    profile = settings_store.current
    handle = (profile.instagram or "").replace("@", "")
    return CatalogResponse(
        services=visible,
        categories=["all", *CATEGORIES],
        settings=profile,
        links={
            "instagram": f"https://instagram.com/{handle}" if handle else None,
            "whatsapp": whatsapp_link(profile.whatsapp_number),
        },
    )
