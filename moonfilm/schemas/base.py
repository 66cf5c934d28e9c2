"""
moonfilm — Canonical JSON schemas for services, receipts and settings.

API handlers, stores and the quote pipeline all exchange these Pydantic v2 models.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CATEGORIES: tuple[str, ...] = ("photography", "videography", "package", "addon")

Category = Literal["photography", "videography", "package", "addon"]
ReceiptStatus = Literal["pending", "partial", "paid"]
DiscountType = Literal["percentage", "fixed"]


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

class ServiceCreate(BaseModel):
    name: str
    category: Category = "photography"
    price: float = Field(..., ge=0)
    description: str = ""
    is_active: bool = True


class Service(ServiceCreate):
    """A sellable offering: shoot type, package or add-on."""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=_new_id)


# ---------------------------------------------------------------------------
# Receipts
# ---------------------------------------------------------------------------

class ReceiptItem(BaseModel):
    """A cart line. Name and price are snapshots taken when the service was added."""
    service_id: str
    service_name: str
    quantity: int = Field(default=1, ge=1)
    price: float = Field(..., ge=0)
    total: float = Field(..., ge=0)


class Receipt(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=_new_id)
    receipt_number: str
    customer_name: str = "Walk-in Customer"
    customer_phone: str = ""
    customer_email: str = ""
    event_date: str = ""
    event_type: str = ""
    items: list[ReceiptItem] = Field(default_factory=list)
    subtotal: float = 0.0
    discount: float = 0.0
    discount_type: DiscountType = "fixed"
    tax: float = 0.0
    total: float = 0.0
    notes: str = ""
    created_at: str = Field(default_factory=_now)
    status: ReceiptStatus = "pending"
    amount_paid: float = 0.0
    balance_due: float = 0.0
    advance_payment: float = 0.0


class StatusUpdate(BaseModel):
    status: ReceiptStatus


# ---------------------------------------------------------------------------
# Business settings
# ---------------------------------------------------------------------------

class BusinessSettings(BaseModel):
    """The business profile singleton. Defaults apply to any field missing from storage."""
    model_config = ConfigDict(from_attributes=True)

    business_name: str = "Moonfilmwork"
    tagline: str = "Capturing Moments, Creating Memories"
    phone: str = "+92 300 1234567"
    whatsapp_number: str = "+923001234567"
    email: str = "moonfilmwork@gmail.com"
    instagram: str = "@moonfilmwork"
    address: str = "Studio Address, City, Pakistan"
    currency: str = "Rs. "
    bank_details: str = "Bank Name: HBL\nAccount No: 1234567890\nIBAN: PK00HABB1234567890"
    terms_and_conditions: str = (
        "• 50% advance payment required for booking\n"
        "• Balance payment before delivery\n"
        "• Delivery within 15-30 working days\n"
        "• All photos/videos are digitally delivered"
    )
    tax_rate: float = Field(default=0.0, ge=0, le=100)
    upi_id: Optional[str] = None
    theme_preference: str = "default"
    dark_mode: bool = False


# ---------------------------------------------------------------------------
# Quote drafts
# ---------------------------------------------------------------------------

class ReceiptDraft(BaseModel):
    """An in-progress quote, kept in draft storage between requests."""
    customer_name: str = ""
    customer_phone: str = ""
    customer_email: str = ""
    event_date: str = ""
    event_type: str = "Wedding"
    selected_items: list[ReceiptItem] = Field(default_factory=list)
    notes: str = ""


# ---------------------------------------------------------------------------
# API request / response envelopes
# ---------------------------------------------------------------------------

class DraftDetails(BaseModel):
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    event_date: Optional[str] = None
    event_type: Optional[str] = None
    notes: Optional[str] = None


class QuantityUpdate(BaseModel):
    quantity: int


class DraftResponse(BaseModel):
    draft: ReceiptDraft
    total: float


class HandOffResponse(BaseModel):
    receipt: Receipt
    whatsapp_url: Optional[str] = None
    persisted: bool = False


class CatalogResponse(BaseModel):
    services: list[Service]
    categories: list[str]
    settings: BusinessSettings
    links: dict[str, Optional[str]] = Field(default_factory=dict)
