"""
VetVax — Admin Routes

Адміністративні endpoints:
- Повна обробка корпусу
- Очистка та статистика кешу
- Статистика, експорт та імпорт вивчених патернів
"""

from fastapi import APIRouter, Depends

from vet_vax.schemas import (
    CacheStats,
    ExtractionStats,
    LearnedPatternsData,
    ProcessingResult,
)
from vet_vax.service import VaccinationCacheService

from ..dependencies import get_service
from ..models import MessageResponse

router = APIRouter(tags=["Admin"])


@router.post("/processing/run", response_model=ProcessingResult)
async def run_processing(
    service: VaccinationCacheService = Depends(get_service)
) -> ProcessingResult:
    """
    Обробити всі записи та перебудувати кеш.

    Помилка сховища -> 502.
    """
    return await service.process_all_records()


@router.post("/cache/clear", response_model=MessageResponse)
async def clear_cache(
    service: VaccinationCacheService = Depends(get_service)
) -> MessageResponse:
    """Очистити кеш; наступний запит виконає повну обробку"""
    service.clear_cache()
    return MessageResponse(message="Vaccination cache cleared")


@router.get("/cache/stats", response_model=CacheStats)
async def cache_stats(
    service: VaccinationCacheService = Depends(get_service)
) -> CacheStats:
    return service.get_cache_stats()


@router.get("/patterns/stats", response_model=ExtractionStats)
async def pattern_stats(
    service: VaccinationCacheService = Depends(get_service)
) -> ExtractionStats:
    """Кількість вивчених назв і фраз та топ вакцин"""
    return service.get_extraction_stats()


@router.get("/patterns/export", response_model=LearnedPatternsData)
async def export_patterns(
    service: VaccinationCacheService = Depends(get_service)
) -> LearnedPatternsData:
    return service.export_learned_patterns()


@router.post("/patterns/import", response_model=MessageResponse)
async def import_patterns(
    data: LearnedPatternsData,
    service: VaccinationCacheService = Depends(get_service)
) -> MessageResponse:
    """Замінити вивчені патерни повністю (без повторного навчання)"""
    service.import_learned_patterns(data)
    return MessageResponse(
        message=(
            f"Imported {len(data.vaccine_name_frequency)} vaccine names "
            f"and {len(data.context_patterns)} context patterns"
        )
    )
