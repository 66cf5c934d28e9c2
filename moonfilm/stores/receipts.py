"""
Receipt store
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from moonfilm.models import ReceiptModel
from moonfilm.schemas import Receipt
from moonfilm.stores.base import RecordNotFound, TableStore

logger = logging.getLogger(__name__)

_FIELDS = (
    "receipt_number",
    "customer_name",
    "customer_phone",
    "customer_email",
    "event_date",
    "event_type",
    "subtotal",
    "discount",
    "discount_type",
    "tax",
    "total",
    "notes",
    "created_at",
    "status",
    "amount_paid",
    "balance_due",
    "advance_payment",
)


def _apply(row: ReceiptModel, receipt: Receipt) -> None:
    for name in _FIELDS:
        setattr(row, name, getattr(receipt, name))
    row.items = [item.model_dump() for item in receipt.items]


class ReceiptStore(TableStore):
    table = "receipts"

    def __init__(self, session_factory, feed):
        super().__init__(session_factory, feed)
        self.items: list[Receipt] = []

    def _load(self, db: Session) -> None:
        rows = db.query(ReceiptModel).order_by(ReceiptModel.created_at.asc()).all()
        self.items = [Receipt.model_validate(r) for r in rows]
        logger.info("Loaded %d receipts", len(self.items))

    @property
    def count(self) -> int:
        return len(self.items)

    def get(self, receipt_id: str) -> Receipt | None:
        return next((r for r in self.items if r.id == receipt_id), None)

    def add(self, receipt: Receipt) -> None:
        with self.write("insert", receipt.receipt_number) as db:
            row = ReceiptModel(id=receipt.id)
            _apply(row, receipt)
            db.add(row)

    def update(self, receipt: Receipt) -> None:
        # totals are stored as given; the construction-time invariant is not re-checked here
        with self.write("update", receipt.id) as db:
            row = db.get(ReceiptModel, receipt.id)
            if row is None:
                raise RecordNotFound(receipt.id)
            _apply(row, receipt)

    def delete(self, receipt_id: str) -> None:
        with self.write("delete", receipt_id) as db:
            row = db.get(ReceiptModel, receipt_id)
            if row is None:
                raise RecordNotFound(receipt_id)
            db.delete(row)
