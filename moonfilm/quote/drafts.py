"""
Draft storage – one JSON document per draft key, so an unfinished quote
survives a reload.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import ValidationError

from moonfilm.schemas import ReceiptDraft

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class DraftStorage:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid draft key: {key!r}")
        return self.directory / f"{key}.json"

    def load(self, key: str) -> ReceiptDraft:
        path = self._path(key)
        if not path.exists():
            return ReceiptDraft()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return ReceiptDraft.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error("Error loading saved draft %s: %s", key, e)
            return ReceiptDraft()

    def save(self, key: str, draft: ReceiptDraft) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(json.dumps(draft.model_dump()), encoding="utf-8")

    def clear(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
