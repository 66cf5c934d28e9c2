"""
SQLAlchemy model for receipt persistence.

Column names follow the hosted table, which uses camelCase identifiers.
"""
from sqlalchemy import Column, Float, JSON, String, Text

from moonfilm.database import Base


class ReceiptModel(Base):
    __tablename__ = "receipts"

    id = Column(String, primary_key=True)
    receipt_number = Column("receiptNumber", String, nullable=False)
    customer_name = Column("customerName", String, nullable=False, default="Walk-in Customer")
    customer_phone = Column("customerPhone", String, nullable=False, default="")
    customer_email = Column("customerEmail", String, nullable=False, default="")
    event_date = Column("eventDate", String, nullable=False, default="")
    event_type = Column("eventType", String, nullable=False, default="")
    items = Column(JSON, nullable=False, default=list)
    subtotal = Column(Float, nullable=False, default=0.0)
    discount = Column(Float, nullable=False, default=0.0)
    discount_type = Column("discountType", String, nullable=False, default="fixed")
    tax = Column(Float, nullable=False, default=0.0)
    total = Column(Float, nullable=False, default=0.0)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")  # pending | partial | paid
    amount_paid = Column("amountPaid", Float, nullable=False, default=0.0)
    balance_due = Column("balanceDue", Float, nullable=False, default=0.0)
    advance_payment = Column("advancePayment", Float, nullable=False, default=0.0)
