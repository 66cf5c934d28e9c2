from moonfilm.schemas.admin import Overview, PanelResponse, PanelUpdate, Theme
from moonfilm.schemas.auth import AuthSession, AuthUser, LoginRequest
from moonfilm.schemas.base import (
    CATEGORIES,
    BusinessSettings,
    CatalogResponse,
    DraftDetails,
    DraftResponse,
    HandOffResponse,
    QuantityUpdate,
    Receipt,
    ReceiptDraft,
    ReceiptItem,
    Service,
    ServiceCreate,
    StatusUpdate,
)

__all__ = [
    "CATEGORIES",
    "AuthSession",
    "AuthUser",
    "BusinessSettings",
    "CatalogResponse",
    "DraftDetails",
    "DraftResponse",
    "HandOffResponse",
    "LoginRequest",
    "Overview",
    "PanelResponse",
    "PanelUpdate",
    "QuantityUpdate",
    "Receipt",
    "ReceiptDraft",
    "ReceiptItem",
    "Service",
    "ServiceCreate",
    "StatusUpdate",
    "Theme",
]
