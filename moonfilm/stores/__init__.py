"""
Live data stores for services, receipts and business settings.
"""
from moonfilm.stores.base import RecordNotFound
from moonfilm.stores.receipts import ReceiptStore
from moonfilm.stores.services import ServiceStore
from moonfilm.stores.settings import SettingsStore

__all__ = ["ReceiptStore", "RecordNotFound", "ServiceStore", "SettingsStore"]
