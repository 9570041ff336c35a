"""
VetVax API — Pydantic Models

Моделі відповідей, яких немає серед доменних схем.
"""

from typing import Optional
from pydantic import BaseModel, Field

from vet_vax.schemas import CacheStats


class HealthResponse(BaseModel):
    """Стан сервера"""
    status: str = Field(..., description="ok | degraded")
    version: str
    service_loaded: bool
    records_source: Optional[str] = None
    cache_ready: bool = False
    store_connected: bool = False
    cache_stats: Optional[CacheStats] = None
    error: Optional[str] = None


class MessageResponse(BaseModel):
    """Просте текстове підтвердження"""
    message: str


class ErrorResponse(BaseModel):
    """Тіло відповіді обробників помилок"""
    error: str
    detail: Optional[str] = None
