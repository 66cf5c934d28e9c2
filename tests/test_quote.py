"""
Unit tests for the quote pipeline — cart, builder, drafts, hand-off, submit.
"""
from datetime import datetime
from urllib.parse import unquote

import pytest
from sqlalchemy.exc import OperationalError

from moonfilm.database import engine
from moonfilm.models import ReceiptModel
from moonfilm.quote import submit_quote
from moonfilm.quote.builder import EmptyCartError, build_receipt, compute_tax, receipt_number
from moonfilm.quote.cart import add_service, cart_total, filter_services, remove_item, update_quantity
from moonfilm.quote.handoff import format_admin_message, format_amount, hand_off, whatsapp_link
from moonfilm.schemas import BusinessSettings, ReceiptDraft, Service
from moonfilm.stores import ReceiptStore

WEDDING = Service(id="s1", name="Wedding Photography", category="photography", price=100)
DRONE = Service(id="s2", name="Drone Coverage", category="videography", price=50)
HIDDEN = Service(id="s3", name="Old Package", category="package", price=80, is_active=False)


def _draft(**kw):
    items = add_service(add_service(add_service([], WEDDING), WEDDING), DRONE)
    return ReceiptDraft(selected_items=items, **kw)


class StubReceipts:
    def __init__(self, error=None):
        self.error = error
        self.added = []
        self.count = 0

    def add(self, receipt):
        if self.error:
            raise self.error
        self.added.append(receipt)


# =====================================================================
# Cart
# =====================================================================
class TestCart:
    def test_add_new_line(self):
        items = add_service([], WEDDING)
        assert len(items) == 1
        assert items[0].quantity == 1
        assert items[0].total == 100

    def test_add_twice_bumps_quantity(self):
        items = add_service(add_service([], WEDDING), WEDDING)
        assert len(items) == 1
        assert items[0].quantity == 2
        assert items[0].total == 200

    def test_add_does_not_mutate_input(self):
        items = add_service([], WEDDING)
        add_service(items, WEDDING)
        assert items[0].quantity == 1

    def test_update_quantity(self):
        items = update_quantity(add_service([], DRONE), "s2", 4)
        assert items[0].quantity == 4
        assert items[0].total == 200

    def test_update_to_zero_removes_line(self):
        items = update_quantity(add_service([], DRONE), "s2", 0)
        assert items == []

    def test_remove_item(self):
        items = add_service(add_service([], WEDDING), DRONE)
        assert [i.service_id for i in remove_item(items, "s1")] == ["s2"]

    def test_cart_total(self):
        assert cart_total(_draft().selected_items) == 250
        assert cart_total([]) == 0

    def test_line_keeps_price_snapshot(self):
        items = add_service([], WEDDING)
        repriced = WEDDING.model_copy(update={"price": 999})
        items = add_service(items, repriced)
        assert items[0].price == 100
        assert items[0].total == 200

    def test_filter_active_only(self):
        assert [s.id for s in filter_services([WEDDING, DRONE, HIDDEN])] == ["s1", "s2"]

    def test_filter_by_category(self):
        assert [s.id for s in filter_services([WEDDING, DRONE, HIDDEN], "videography")] == ["s2"]
        assert filter_services([WEDDING, DRONE, HIDDEN], "package") == []

    def test_filter_unknown_category(self):
        with pytest.raises(ValueError):
            filter_services([WEDDING], "catering")


# =====================================================================
# Builder
# =====================================================================
class TestBuilder:
    def test_receipt_number(self):
        assert receipt_number(0) == "MFW0001"
        assert receipt_number(41) == "MFW0042"
        assert receipt_number(9999, prefix="QT") == "QT10000"

    def test_compute_tax(self):
        assert compute_tax(200, 0) == 0
        assert compute_tax(200, 5) == pytest.approx(10)

    def test_build_totals(self):
        receipt = build_receipt(_draft(), tax_rate=10, receipt_count=7)
        assert receipt.subtotal == 250
        assert receipt.tax == pytest.approx(25)
        assert receipt.total == pytest.approx(275)
        assert receipt.receipt_number == "MFW0008"

    def test_build_defaults(self):
        receipt = build_receipt(_draft(), tax_rate=0, receipt_count=0)
        assert receipt.customer_name == "Walk-in Customer"
        assert receipt.event_type == "Wedding"
        assert receipt.status == "pending"
        assert receipt.discount == 0
        assert receipt.discount_type == "fixed"
        assert receipt.amount_paid == 0
        assert receipt.balance_due == receipt.total

    def test_build_keeps_customer_fields(self):
        draft = _draft(customer_name="Ayesha", customer_phone="0300 1112223", notes="Evening")
        receipt = build_receipt(draft, tax_rate=0, receipt_count=0)
        assert receipt.customer_name == "Ayesha"
        assert receipt.customer_phone == "0300 1112223"
        assert receipt.notes == "Evening"
        assert len(receipt.items) == 2

    def test_ids_are_unique(self):
        a = build_receipt(_draft(), 0, 0)
        b = build_receipt(_draft(), 0, 0)
        assert a.id != b.id

    def test_empty_cart(self):
        with pytest.raises(EmptyCartError):
            build_receipt(ReceiptDraft(), tax_rate=0, receipt_count=0)


# =====================================================================
# Drafts
# =====================================================================
class TestDrafts:
    def test_missing_draft_is_empty(self, drafts):
        draft = drafts.load("abc")
        assert draft.selected_items == []
        assert draft.event_type == "Wedding"

    def test_save_and_load(self, drafts):
        drafts.save("abc", _draft(customer_name="Bilal"))
        loaded = drafts.load("abc")
        assert loaded.customer_name == "Bilal"
        assert cart_total(loaded.selected_items) == 250

    def test_corrupt_draft_is_discarded(self, drafts):
        drafts.directory.mkdir(parents=True, exist_ok=True)
        (drafts.directory / "abc.json").write_text("{not json", encoding="utf-8")
        assert drafts.load("abc") == ReceiptDraft()

    def test_clear(self, drafts):
        drafts.save("abc", _draft())
        drafts.clear("abc")
        assert drafts.load("abc").selected_items == []
        drafts.clear("abc")

    @pytest.mark.parametrize("key", ["", "../etc/passwd", "a.b", "x" * 65])
    def test_rejects_unsafe_keys(self, drafts, key):
        with pytest.raises(ValueError):
            drafts.load(key)


# =====================================================================
# Hand-off
# =====================================================================
class TestHandOff:
    def test_format_amount(self):
        assert format_amount(50000) == "50,000"
        assert format_amount(2.5) == "2.5"
        assert format_amount(0) == "0"

    def test_whatsapp_link(self):
        assert whatsapp_link("+92 300-1234567") == "https://wa.me/923001234567"
        assert whatsapp_link("+92 300", "a b") == "https://wa.me/92300?text=a%20b"
        assert whatsapp_link("") is None

    def test_admin_message(self):
        receipt = build_receipt(
            _draft(customer_name="Ayesha", customer_phone="0300", event_date="2024-06-15", notes="Outdoor"),
            tax_rate=0,
            receipt_count=0,
        )
        msg = format_admin_message(receipt, BusinessSettings(), received_at=datetime(2024, 6, 1, 14, 5, 0))
        assert "*NEW QUOTE REQUEST*" in msg
        assert "Quote #MFW0001" in msg
        assert "• Name: Ayesha" in msg
        assert "• Email: Not provided" in msg
        assert "• Date: 06/15/2024" in msg
        assert "• Wedding Photography (2x) - Rs. 200" in msg
        assert "• Drone Coverage (1x) - Rs. 50" in msg
        assert "*QUOTED AMOUNT:* Rs. 250" in msg
        assert "*Customer Notes:* Outdoor" in msg
        assert "06/01/2024, 02:05:00 PM" in msg

    def test_admin_message_without_date(self):
        receipt = build_receipt(_draft(), tax_rate=0, receipt_count=0)
        msg = format_admin_message(receipt, BusinessSettings())
        assert "• Date: TBD" in msg
        assert "Customer Notes" not in msg

    def test_hand_off_persists(self):
        receipts = StubReceipts()
        receipt = build_receipt(_draft(), 0, 0)
        result = hand_off(receipt, BusinessSettings(), receipts)
        assert result.persisted is True
        assert receipts.added == [receipt]
        assert result.whatsapp_url.startswith("https://wa.me/923001234567?text=")
        assert "Quote #MFW0001" in unquote(result.whatsapp_url)

    def test_save_failure_still_hands_off(self):
        receipts = StubReceipts(error=OperationalError("INSERT", {}, Exception("db down")))
        result = hand_off(build_receipt(_draft(), 0, 0), BusinessSettings(), receipts)
        assert result.persisted is False
        assert result.whatsapp_url is not None

    def test_save_failure_on_real_store(self, session_factory, feed):
        store = ReceiptStore(session_factory, feed)
        store.open()
        ReceiptModel.__table__.drop(bind=engine)
        try:
            result = hand_off(build_receipt(_draft(), 0, 0), BusinessSettings(), store)
        finally:
            store.close()
        assert result.persisted is False
        assert result.whatsapp_url.startswith("https://wa.me/923001234567?text=")
        assert store.count == 0

    def test_no_whatsapp_number(self):
        receipts = StubReceipts()
        result = hand_off(build_receipt(_draft(), 0, 0), BusinessSettings(whatsapp_number=""), receipts)
        assert result.whatsapp_url is None
        assert result.persisted is True


# =====================================================================
# Full submit
# =====================================================================
class TestSubmitQuote:
    def test_submit_clears_draft(self, drafts):
        drafts.save("k1", _draft())
        receipts = StubReceipts()
        result = submit_quote("k1", drafts, BusinessSettings(tax_rate=10), receipts)
        assert result.receipt.total == pytest.approx(275)
        assert result.receipt.receipt_number == "MFW0001"
        assert drafts.load("k1").selected_items == []

    def test_empty_submit_keeps_draft(self, drafts):
        drafts.save("k1", ReceiptDraft(customer_name="Sana"))
        with pytest.raises(EmptyCartError):
            submit_quote("k1", drafts, BusinessSettings(), StubReceipts())
        assert drafts.load("k1").customer_name == "Sana"

    def test_numbers_follow_store_count(self, drafts, session_factory, feed):
        store = ReceiptStore(session_factory, feed)
        store.open()
        try:
            for key in ("k1", "k2"):
                drafts.save(key, _draft())
            first = submit_quote(key="k1", drafts=drafts, settings=BusinessSettings(), receipts=store)
            second = submit_quote(key="k2", drafts=drafts, settings=BusinessSettings(), receipts=store)
        finally:
            store.close()
        assert first.receipt.receipt_number == "MFW0001"
        assert second.receipt.receipt_number == "MFW0002"
        assert store.count == 2
