from moonfilm.models.receipt import ReceiptModel
from moonfilm.models.service import ServiceModel
from moonfilm.models.settings import SETTINGS_ID, SettingsModel

__all__ = ["ReceiptModel", "ServiceModel", "SettingsModel", "SETTINGS_ID"]
