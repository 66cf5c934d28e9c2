"""
Receipt builder – turns a quote draft into a receipt record.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from moonfilm.quote.cart import cart_total
from moonfilm.schemas import Receipt, ReceiptDraft

DEFAULT_CUSTOMER = "Walk-in Customer"


class EmptyCartError(ValueError):
    pass


def receipt_number(receipt_count: int, prefix: str = "MFW") -> str:
    """Next human-readable number after ``receipt_count`` known receipts."""
    return f"{prefix}{receipt_count + 1:04d}"


def compute_tax(subtotal: float, tax_rate: float) -> float:
    return subtotal * (tax_rate / 100)


def build_receipt(
    draft: ReceiptDraft,
    tax_rate: float,
    receipt_count: int,
    prefix: str = "MFW",
) -> Receipt:
    if not draft.selected_items:
        raise EmptyCartError("Please add at least one service")

    subtotal = cart_total(draft.selected_items)
    # quotes carry no discount; the field exists for later editing
    discount = 0.0
    tax = compute_tax(subtotal, tax_rate)
    total = subtotal - discount + tax

    return Receipt(
        id=str(uuid.uuid4()),
        receipt_number=receipt_number(receipt_count, prefix),
        customer_name=draft.customer_name or DEFAULT_CUSTOMER,
        customer_phone=draft.customer_phone or "",
        customer_email=draft.customer_email,
        event_date=draft.event_date,
        event_type=draft.event_type,
        items=list(draft.selected_items),
        subtotal=subtotal,
        discount=discount,
        discount_type="fixed",
        tax=tax,
        total=total,
        notes=draft.notes,
        created_at=datetime.now(timezone.utc).isoformat(),
        status="pending",
        amount_paid=0.0,
        balance_due=total,
        advance_payment=0.0,
    )
