"""
Hand-off – sends a finished quote to the business over WhatsApp and
records it, without letting a failed save block the message.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from urllib.parse import quote

from sqlalchemy.exc import SQLAlchemyError

from moonfilm.schemas import BusinessSettings, Receipt
from moonfilm.stores import ReceiptStore

logger = logging.getLogger(__name__)

RULE = "━━━━━━━━━━━━━━━━"


@dataclass
class HandOff:
    receipt: Receipt
    whatsapp_url: Optional[str]
    persisted: bool


def format_amount(value: float) -> str:
    """``50000`` → ``50,000``; ``2.5`` → ``2.5``."""
    text = f"{value:,.2f}"
    return text[:-3] if text.endswith(".00") else text.rstrip("0")


def _event_date(value: str) -> str:
    if not value:
        return "TBD"
    try:
        return date.fromisoformat(value[:10]).strftime("%m/%d/%Y")
    except ValueError:
        return value


def digits_only(number: str) -> str:
    return re.sub(r"[^0-9]", "", number or "")


def whatsapp_link(number: str, message: Optional[str] = None) -> Optional[str]:
    digits = digits_only(number)
    if not digits:
        return None
    if message is None:
        return f"https://wa.me/{digits}"
    return f"https://wa.me/{digits}?text={quote(message, safe='')}"


def format_admin_message(
    receipt: Receipt,
    settings: BusinessSettings,
    received_at: Optional[datetime] = None,
) -> str:
    received_at = received_at or datetime.now()
    currency = settings.currency
    services_text = "\n".join(
        f"• {item.service_name} ({item.quantity}x) - {currency}{format_amount(item.total)}"
        for item in receipt.items
    )
    notes = f"\n📝 *Customer Notes:* {receipt.notes}\n" if receipt.notes else ""

    lines = [
        "🎬 *NEW QUOTE REQUEST*",
        RULE,
        f"📋 *Quote #{receipt.receipt_number}*",
        RULE,
        "",
        "👤 *Customer Details:*",
        f"• Name: {receipt.customer_name}",
        f"• Phone: {receipt.customer_phone}",
        f"• Email: {receipt.customer_email or 'Not provided'}",
        "",
        "📅 *Event Details:*",
        f"• Date: {_event_date(receipt.event_date)}",
        f"• Type: {receipt.event_type}",
        "",
        "📦 *Requested Services:*",
        services_text,
        "",
        RULE,
        f"💰 *QUOTED AMOUNT:* {currency}{format_amount(receipt.total)}",
        RULE,
        notes,
        f"⏰ *Received:* {received_at.strftime('%m/%d/%Y, %I:%M:%S %p')}",
        "",
        "_Please follow up with the customer to confirm booking._",
    ]
    return "\n".join(lines).strip()


def hand_off(receipt: Receipt, settings: BusinessSettings, receipts: ReceiptStore) -> HandOff:
    url = None
    if digits_only(settings.whatsapp_number):
        url = whatsapp_link(settings.whatsapp_number, format_admin_message(receipt, settings))
    else:
        logger.warning("No WhatsApp number configured; skipping message for %s", receipt.receipt_number)

    persisted = False
    try:
        receipts.add(receipt)
        persisted = True
    except SQLAlchemyError as e:
        logger.warning("Could not save receipt %s, but WhatsApp message sent: %s", receipt.receipt_number, e)

    return HandOff(receipt=receipt, whatsapp_url=url, persisted=persisted)
