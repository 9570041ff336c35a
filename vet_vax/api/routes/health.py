"""
VetVax — Health Routes

Health check та інформація про систему.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from vet_vax import __version__
from vet_vax.service import VaccinationCacheService

from ..dependencies import get_optional_service, get_service_manager, ServiceManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: ServiceManager = Depends(get_service_manager),
    service: Optional[VaccinationCacheService] = Depends(get_optional_service)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера (degraded, якщо сервісу немає або сховище недоступне)
    - Джерело сирих записів та доступність сховища
    - Стан і статистику кешу
    """
    if service is None:
        return HealthResponse(
            status="degraded",
            version=__version__,
            service_loaded=False,
            records_source=manager.records_source,
            error=manager.error,
        )

    store_connected = await service.store.test_connection()

    return HealthResponse(
        status="ok" if store_connected else "degraded",
        version=__version__,
        service_loaded=True,
        records_source=manager.records_source,
        cache_ready=service.is_processed,
        store_connected=store_connected,
        cache_stats=service.get_cache_stats(),
        error=manager.error,
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "VetVax API",
        "version": __version__,
        "description": "Екстракція та історія вакцинацій тварин",
        "docs": "/docs",
        "health": "/health",
    }
