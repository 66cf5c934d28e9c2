"""
Admin dashboard schemas
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from moonfilm.schemas.base import BusinessSettings, Receipt


class Overview(BaseModel):
    """Dashboard summary"""
    total_revenue: float = 0.0
    total_pending: float = 0.0
    receipt_count: int = 0
    paid_count: int = 0
    partial_count: int = 0
    pending_count: int = 0
    service_count: int = 0
    active_service_count: int = 0
    recent_receipts: list[Receipt] = Field(default_factory=list)


class Theme(BaseModel):
    """Color theme preset"""
    id: str
    name: str
    primary: str
    accent: str


class PanelUpdate(BaseModel):
    """Field changes for one settings panel"""
    changes: dict[str, Any] = Field(default_factory=dict)


class PanelResponse(BaseModel):
    panel: str
    settings: BusinessSettings
    saved: bool
    dirty: bool
