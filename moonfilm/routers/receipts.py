"""
Admin receipt endpoints.

GET    /api/admin/receipts               — list, newest first
GET    /api/admin/receipts/{id}          — get one receipt
PUT    /api/admin/receipts/{id}          — replace a receipt
PATCH  /api/admin/receipts/{id}/status   — change payment status
DELETE /api/admin/receipts/{id}          — delete
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from moonfilm.deps import get_receipt_store
from moonfilm.schemas import Receipt, StatusUpdate
from moonfilm.stores import ReceiptStore, RecordNotFound

logger = logging.getLogger(__name__)
router = APIRouter()


def _require(receipts: ReceiptStore, receipt_id: str) -> Receipt:
    receipt = receipts.get(receipt_id)
    if receipt is None:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return receipt


# ── GET /api/admin/receipts ──────────────────────────────────────────────
@router.get("/receipts", response_model=list[Receipt])
def list_receipts(receipts: ReceiptStore = Depends(get_receipt_store)):
    logger.info("Returning %d receipts", receipts.count)
    return list(reversed(receipts.items))


# ── GET /api/admin/receipts/{receipt_id} ─────────────────────────────────
@router.get("/receipts/{receipt_id}", response_model=Receipt)
def get_receipt(receipt_id: str, receipts: ReceiptStore = Depends(get_receipt_store)):
    return _require(receipts, receipt_id)


# ── PUT /api/admin/receipts/{receipt_id} ─────────────────────────────────
@router.put("/receipts/{receipt_id}", response_model=Receipt)
def replace_receipt(
    receipt_id: str,
    req: Receipt,
    receipts: ReceiptStore = Depends(get_receipt_store),
):
    _require(receipts, receipt_id)
    receipt = req.model_copy(update={"id": receipt_id})
    try:
        receipts.update(receipt)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Receipt not found")
    return receipt


# ── PATCH /api/admin/receipts/{receipt_id}/status ────────────────────────
@router.patch("/receipts/{receipt_id}/status", response_model=Receipt)
def update_status(
    receipt_id: str,
    req: StatusUpdate,
    receipts: ReceiptStore = Depends(get_receipt_store),
):
    receipt = _require(receipts, receipt_id).model_copy(update={"status": req.status})
    try:
        receipts.update(receipt)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Receipt not found")
    logger.info("Receipt %s marked %s", receipt.receipt_number, req.status)
    return receipt


# ── DELETE /api/admin/receipts/{receipt_id} ──────────────────────────────
@router.delete("/receipts/{receipt_id}")
def delete_receipt(receipt_id: str, receipts: ReceiptStore = Depends(get_receipt_store)):
    try:
        receipts.delete(receipt_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Receipt not found")
    logger.info("Deleted receipt %s", receipt_id)
    return {"message": "Receipt deleted successfully", "receipt_id": receipt_id}
