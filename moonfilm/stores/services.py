"""
Service catalog store
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from moonfilm.models import ServiceModel
from moonfilm.schemas import Service
from moonfilm.stores.base import RecordNotFound, TableStore

logger = logging.getLogger(__name__)


def _apply(row: ServiceModel, service: Service) -> None:
    row.name = service.name
    row.category = service.category
    row.price = service.price
    row.description = service.description
    row.is_active = service.is_active


class ServiceStore(TableStore):
    table = "services"

    def __init__(self, session_factory, feed, initial: list[Service] | None = None):
        super().__init__(session_factory, feed)
        self.items: list[Service] = list(initial or [])

    def _load(self, db: Session) -> None:
        rows = db.query(ServiceModel).order_by(ServiceModel.created_at.asc()).all()
        # even an empty result replaces the initial catalog
        self.items = [Service.model_validate(r) for r in rows]
        logger.info("Loaded %d services", len(self.items))

    def get(self, service_id: str) -> Service | None:
        return next((s for s in self.items if s.id == service_id), None)

    def active(self) -> list[Service]:
        return [s for s in self.items if s.is_active]

    def add(self, service: Service) -> None:
        with self.write("insert", service.id) as db:
            row = ServiceModel(id=service.id)
            _apply(row, service)
            db.add(row)

    def update(self, service: Service) -> None:
        with self.write("update", service.id) as db:
            row = db.get(ServiceModel, service.id)
            if row is None:
                raise RecordNotFound(service.id)
            _apply(row, service)

    def delete(self, service_id: str) -> None:
        with self.write("delete", service_id) as db:
            row = db.get(ServiceModel, service_id)
            if row is None:
                raise RecordNotFound(service_id)
            db.delete(row)
