"""
VetVax — Animals Routes

Endpoints для запитів по тваринах:
- Список тварин з останньою вакцинацією
- Історія вакцинацій однієї тварини
"""

from typing import List
from fastapi import APIRouter, Depends, Path

from vet_vax.schemas import AnimalVaccinationHistory, AnimalVaccinationSummary
from vet_vax.service import VaccinationCacheService

from ..dependencies import get_service

router = APIRouter(prefix="/animals", tags=["Animals"])


@router.get("", response_model=List[AnimalVaccinationSummary])
async def list_animals(
    service: VaccinationCacheService = Depends(get_service)
) -> List[AnimalVaccinationSummary]:
    """
    Всі тварини корпусу з останньою вакцинацією.

    Тварини без подій теж присутні (поля latest* = null, total = 0).
    """
    return await service.get_animals_with_latest_vaccination()


@router.get("/{animal_id}/vaccinations", response_model=AnimalVaccinationHistory)
async def get_vaccination_history(
    animal_id: int = Path(..., gt=0, description="ID тварини"),
    service: VaccinationCacheService = Depends(get_service)
) -> AnimalVaccinationHistory:
    """
    Історія вакцинацій тварини.

    Нові першими; при однаковій даті вища впевненість першою.
    """
    return await service.get_animal_vaccination_history(animal_id)
