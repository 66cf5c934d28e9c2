"""
Live table stores.

A store owns the current contents of one table, refreshed in full whenever
the change feed reports a change on that table.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moonfilm.realtime import ChangeEvent, ChangeFeed, Subscription

logger = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    pass


class TableStore:
    table: str = ""

    def __init__(self, session_factory, feed: ChangeFeed):
        self.session_factory = session_factory
        self.feed = feed
        self.loading = True
        self._subscription: Optional[Subscription] = None

    # ── lifecycle ────────────────────────────────────────────────────────
    def open(self) -> None:
        """Initial fetch, then follow changes on the table."""
        self.fetch()
        if self._subscription is None:
            self._subscription = self.feed.subscribe(self.table, self._on_change)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_change(self, change: ChangeEvent) -> None:
        logger.info("%s changed (%s), re-fetching", change.table, change.event_type)
        self.fetch()

    # ── helpers ──────────────────────────────────────────────────────────
    def fetch(self) -> None:
        try:
            with self.session() as db:
                self._load(db)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error("Error fetching %s: %s", self.table, e)
        finally:
            self.loading = False

    def _load(self, db: Session) -> None:
        raise NotImplementedError

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def write(self, action: str, key: str) -> Iterator[Session]:
        """Session for one mutation: commits on success, logs and re-raises database errors."""
        logger.info("%s %s: %s", action, self.table, key)
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error on %s %s %s: %s", action, self.table, key, e)
            raise
        finally:
            db.close()
        logger.info("%s %s succeeded: %s", action, self.table, key)
