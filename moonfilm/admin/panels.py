"""
Settings panels.

Each admin settings tab edits a local copy of the business settings,
tracks whether anything changed, and writes the whole object back on save.
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from moonfilm.admin.themes import get_theme
from moonfilm.schemas import BusinessSettings
from moonfilm.stores import SettingsStore

logger = logging.getLogger(__name__)

PANEL_FIELDS: dict[str, tuple[str, ...]] = {
    "business": (
        "business_name",
        "tagline",
        "currency",
        "instagram",
        "phone",
        "whatsapp_number",
        "email",
        "address",
    ),
    "payments": ("bank_details", "tax_rate", "terms_and_conditions", "upi_id"),
    "theme": ("theme_preference", "dark_mode"),
}


class PanelError(ValueError):
    pass


class SettingsPanel:
    def __init__(self, name: str, store: SettingsStore):
        if name not in PANEL_FIELDS:
            raise PanelError(f"Unknown settings panel: {name}")
        self.name = name
        self.store = store
        self.local = store.current.model_copy()
        self.dirty = False

    @property
    def fields(self) -> tuple[str, ...]:
        return PANEL_FIELDS[self.name]

    def change(self, key: str, value: Any) -> None:
        if key not in self.fields:
            raise PanelError(f"Field {key!r} is not editable in the {self.name} panel")
        if getattr(self.local, key) == value:
            return
        if key == "theme_preference" and get_theme(value) is None:
            raise PanelError(f"Unknown theme: {value}")
        data = self.local.model_dump()
        data[key] = value
        try:
            self.local = BusinessSettings.model_validate(data)
        except ValidationError as e:
            raise PanelError(str(e)) from e
        self.dirty = True

    def save(self) -> bool:
        """Push the local copy through the store. Returns False when there was nothing to save."""
        if not self.dirty:
            return False
        try:
            self.store.update(self.local)
        except SQLAlchemyError:
            logger.error("Failed to save %s settings", self.name)
            raise
        self.dirty = False
        return True
