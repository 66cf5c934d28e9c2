"""
Dashboard overview and service search.
"""
from __future__ import annotations

from moonfilm.schemas import CATEGORIES, Overview, Receipt, Service

RECENT_LIMIT = 5


def build_overview(receipts: list[Receipt], services: list[Service]) -> Overview:
    return Overview(
        total_revenue=sum((r.total for r in receipts), 0.0),
        total_pending=sum((r.balance_due for r in receipts), 0.0),
        receipt_count=len(receipts),
        paid_count=sum(1 for r in receipts if r.status == "paid"),
        partial_count=sum(1 for r in receipts if r.status == "partial"),
        pending_count=sum(1 for r in receipts if r.status == "pending"),
        service_count=len(services),
        active_service_count=sum(1 for s in services if s.is_active),
        recent_receipts=list(reversed(receipts))[:RECENT_LIMIT],
    )


def search_services(services: list[Service], term: str = "", category: str = "all") -> list[Service]:
    """Admin listing: matches name or description, inactive services included."""
    if category != "all" and category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")
    term = term.lower()
    return [
        s
        for s in services
        if (term in s.name.lower() or term in s.description.lower())
        and (category == "all" or s.category == category)
    ]
