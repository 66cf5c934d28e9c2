"""
Business settings store (single row)
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from moonfilm.models import SETTINGS_ID, SettingsModel
from moonfilm.schemas import BusinessSettings
from moonfilm.stores.base import TableStore

logger = logging.getLogger(__name__)

_FIELDS = tuple(BusinessSettings.model_fields)


def _merge(row: SettingsModel) -> BusinessSettings:
    """Stored values over defaults; NULL columns keep the default."""
    stored = {name: getattr(row, name) for name in _FIELDS}
    return BusinessSettings(**{k: v for k, v in stored.items() if v is not None})


class SettingsStore(TableStore):
    table = "settings"

    def __init__(self, session_factory, feed):
        super().__init__(session_factory, feed)
        self.current = BusinessSettings()

    def _load(self, db: Session) -> None:
        row = db.get(SettingsModel, SETTINGS_ID)
        if row is None:
            logger.info("No settings row found, inserting defaults")
            db.add(SettingsModel(id=SETTINGS_ID, **self.current.model_dump()))
            db.commit()
            return
        self.current = _merge(row)

    def update(self, new_settings: BusinessSettings) -> None:
        with self.write("update", SETTINGS_ID) as db:
            row = db.get(SettingsModel, SETTINGS_ID)
            if row is None:
                row = SettingsModel(id=SETTINGS_ID)
                db.add(row)
            for name, value in new_settings.model_dump().items():
                setattr(row, name, value)
        self.current = new_settings.model_copy()
