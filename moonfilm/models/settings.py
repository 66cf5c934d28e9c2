"""
SQLAlchemy model for the business settings singleton.
"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Float, String, Text

from moonfilm.database import Base

SETTINGS_ID = "default_settings"


class SettingsModel(Base):
    """Single row keyed by ``SETTINGS_ID``. Nullable columns fall back to defaults on read."""
    __tablename__ = "settings"

    id = Column(String, primary_key=True, default=SETTINGS_ID)
    business_name = Column("businessName", String)
    tagline = Column(String)
    phone = Column(String)
    whatsapp_number = Column("whatsappNumber", String)
    email = Column(String)
    instagram = Column(String)
    address = Column(Text)
    currency = Column(String)
    bank_details = Column("bankDetails", Text)
    terms_and_conditions = Column("termsAndConditions", Text)
    tax_rate = Column("taxRate", Float)
    upi_id = Column("upiId", String)
    theme_preference = Column("themePreference", String, default="default")
    dark_mode = Column("darkMode", Boolean, default=False)
    created_at = Column(String, default=lambda: datetime.now(timezone.utc).isoformat())
