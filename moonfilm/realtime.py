"""
Table change notifications.

Sessions record which tables they touched while flushing; once the
transaction commits, one event per (table, change type) is published to
every subscriber of that table. Rolled-back work publishes nothing.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import event
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_PENDING_KEY = "moonfilm_pending_changes"


@dataclass(frozen=True)
class ChangeEvent:
    table: str
    event_type: str  # INSERT | UPDATE | DELETE


Listener = Callable[[ChangeEvent], None]


class Subscription:
    """Handle returned by :meth:`ChangeFeed.subscribe`."""

    def __init__(self, feed: "ChangeFeed", table: str, listener: Listener):
        self.feed = feed
        self.table = table
        self.listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.feed._remove(self)
            self.active = False


class ChangeFeed:
    def __init__(self):
        self._subscriptions: dict[str, list[Subscription]] = {}

    def subscribe(self, table: str, listener: Listener) -> Subscription:
        sub = Subscription(self, table, listener)
        self._subscriptions.setdefault(table, []).append(sub)
        logger.info("Subscribed to %s changes", table)
        return sub

    def _remove(self, sub: Subscription) -> None:
        subs = self._subscriptions.get(sub.table, [])
        if sub in subs:
            subs.remove(sub)
        logger.info("Unsubscribed from %s changes", sub.table)

    def subscriber_count(self, table: str) -> int:
        return len(self._subscriptions.get(table, []))

    def publish(self, change: ChangeEvent) -> None:
        for sub in list(self._subscriptions.get(change.table, [])):
            try:
                sub.listener(change)
            except Exception:
                # a failing listener must not break the committing session
                logger.exception("Change listener failed for %s", change.table)


feed = ChangeFeed()


# ---------------------------------------------------------------------------
# Session wiring
# ---------------------------------------------------------------------------

def _record(session: Session, flush_context) -> None:
    pending = session.info.setdefault(_PENDING_KEY, [])
    for kind, objects in (
        ("INSERT", session.new),
        ("UPDATE", session.dirty),
        ("DELETE", session.deleted),
    ):
        for obj in objects:
            table = getattr(obj, "__tablename__", None)
            if table is None:
                continue
            change = ChangeEvent(table=table, event_type=kind)
            if change not in pending:
                pending.append(change)


def _publish(session: Session) -> None:
    pending = session.info.pop(_PENDING_KEY, [])
    for change in pending:
        logger.debug("Publishing %s on %s", change.event_type, change.table)
        feed.publish(change)


def _discard(session: Session) -> None:
    session.info.pop(_PENDING_KEY, None)


def watch_sessions(session_factory) -> None:
    """Attach change recording to every session created by ``session_factory``."""
    if not event.contains(session_factory, "after_flush", _record):
        event.listen(session_factory, "after_flush", _record)
        event.listen(session_factory, "after_commit", _publish)
        event.listen(session_factory, "after_soft_rollback", _discard_on_rollback)


def _discard_on_rollback(session: Session, previous_transaction) -> None:
    _discard(session)
