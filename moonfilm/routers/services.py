"""
Admin service catalog endpoints.

GET    /api/admin/services              — list (search + category filter)
POST   /api/admin/services              — add
PUT    /api/admin/services/{id}         — edit
POST   /api/admin/services/{id}/toggle  — flip the active flag
DELETE /api/admin/services/{id}         — delete
"""
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from moonfilm.admin.overview import search_services
from moonfilm.deps import get_service_store
from moonfilm.schemas import Service, ServiceCreate
from moonfilm.stores import RecordNotFound, ServiceStore

logger = logging.getLogger(__name__)
router = APIRouter()


def _require(services: ServiceStore, service_id: str) -> Service:
    service = services.get(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.get("/services", response_model=list[Service])
def list_services(
    search: str = "",
    category: str = "all",
    services: ServiceStore = Depends(get_service_store),
):
    try:
        return search_services(services.items, search, category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/services", response_model=Service, status_code=201)
def create_service(req: ServiceCreate, services: ServiceStore = Depends(get_service_store)):
    if not req.name.strip() or req.price <= 0:
        raise HTTPException(status_code=400, detail="Service needs a name and a price above zero")
    service = Service(id=str(uuid.uuid4()), **req.model_dump())
    services.add(service)
    return service


@router.put("/services/{service_id}", response_model=Service)
def update_service(
    service_id: str,
    req: ServiceCreate,
    services: ServiceStore = Depends(get_service_store),
):
    _require(services, service_id)
    service = Service(id=service_id, **req.model_dump())
    try:
        services.update(service)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.post("/services/{service_id}/toggle", response_model=Service)
def toggle_service(service_id: str, services: ServiceStore = Depends(get_service_store)):
    service = _require(services, service_id)
    toggled = service.model_copy(update={"is_active": not service.is_active})
    try:
        services.update(toggled)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Service not found")
    logger.info("Service %s active=%s", service_id, toggled.is_active)
    return toggled


@router.delete("/services/{service_id}")
def delete_service(service_id: str, services: ServiceStore = Depends(get_service_store)):
    try:
        services.delete(service_id)
    except RecordNotFound:
        raise HTTPException(status_code=404, detail="Service not found")
    return {"message": "Service deleted successfully", "service_id": service_id}
