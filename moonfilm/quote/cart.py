"""
Cart aggregation for quote drafts.

Functions return a new item list and never mutate the one passed in.
"""
from __future__ import annotations

from moonfilm.schemas import CATEGORIES, ReceiptItem, Service


def add_service(items: list[ReceiptItem], service: Service) -> list[ReceiptItem]:
    """Add one unit of ``service``; an existing line gets its quantity bumped."""
    existing = next((i for i in items if i.service_id == service.id), None)
    if existing is None:
        return items + [
            ReceiptItem(
                service_id=service.id,
                service_name=service.name,
                quantity=1,
                price=service.price,
                total=service.price,
            )
        ]
    return update_quantity(items, service.id, existing.quantity + 1)


def update_quantity(items: list[ReceiptItem], service_id: str, quantity: int) -> list[ReceiptItem]:
    if quantity <= 0:
        return remove_item(items, service_id)
    return [
        i.model_copy(update={"quantity": quantity, "total": quantity * i.price})
        if i.service_id == service_id
        else i
        for i in items
    ]


def remove_item(items: list[ReceiptItem], service_id: str) -> list[ReceiptItem]:
    return [i for i in items if i.service_id != service_id]


def cart_total(items: list[ReceiptItem]) -> float:
    return sum((i.total for i in items), 0.0)


def filter_services(services: list[Service], category: str = "all") -> list[Service]:
    """Active services, optionally restricted to one category."""
    if category != "all" and category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")
    active = [s for s in services if s.is_active]
    if category == "all":
        return active
    return [s for s in active if s.category == category]
