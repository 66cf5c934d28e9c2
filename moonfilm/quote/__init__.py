"""
Quote pipeline.

Orchestrates: draft → receipt → hand-off → clear draft.
"""
import logging

from moonfilm.quote.builder import build_receipt
from moonfilm.quote.drafts import DraftStorage
from moonfilm.quote.handoff import HandOff, hand_off
from moonfilm.schemas import BusinessSettings
from moonfilm.stores import ReceiptStore

logger = logging.getLogger(__name__)


def submit_quote(
    key: str,
    drafts: DraftStorage,
    settings: BusinessSettings,
    receipts: ReceiptStore,
    prefix: str = "MFW",
) -> HandOff:
    """Build a receipt from the stored draft, hand it off and clear the draft.

    Raises ``EmptyCartError`` when the draft has no items; the draft is kept.
    """
    draft = drafts.load(key)
    logger.info("Submitting draft %s with %d items", key, len(draft.selected_items))

    receipt = build_receipt(draft, settings.tax_rate, receipts.count, prefix)
    logger.info("Receipt built: %s total=%s", receipt.receipt_number, receipt.total)

    result = hand_off(receipt, settings, receipts)
    drafts.clear(key)
    return result
