"""
VetVax — Схеми даних вакцинацій

Pydantic моделі для:
- VaccinationEvent: нормалізована подія вакцинації з оцінкою впевненості
- AnimalVaccinationSummary / AnimalVaccinationHistory: агреговані відповіді
- ProcessingResult, CacheStats: адміністративні відповіді
- ExtractionStats, LearnedPatternsData: стан вивчених патернів

Серіалізація в JSON використовує camelCase (vaccineName, animalId, ...).
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Базова модель з camelCase аліасами"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VaccinationEvent(CamelModel):
    """
    Подія вакцинації.

    Створюється лише VaccinationExtractor і після створення не змінюється.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    animal_id: int
    vaccine_name: str = Field(..., min_length=1, description="Нормалізована назва")
    vaccination_date: datetime
    source_visit_id: int
    confidence: float = Field(..., ge=0.0, le=1.0)
    extracted_text: str = Field(..., min_length=1, description="Текст-обґрунтування")


class AnimalVaccinationSummary(CamelModel):
    """Рядок списку тварин з останньою вакцинацією"""
    animal_id: int
    latest_vaccination_date: Optional[datetime] = None
    latest_vaccine_name: Optional[str] = None
    total_vaccinations: int = 0


class AnimalVaccinationHistory(CamelModel):
    """Історія вакцинацій тварини (нові першими)"""
    animal_id: int
    vaccinations: List[VaccinationEvent] = Field(default_factory=list)


class ProcessingResult(CamelModel):
    """Підсумок повної обробки корпусу"""
    total_records: int
    total_vaccinations: int
    processed_animals: int
    processing_time: float = Field(..., description="Тривалість, мс")


class CacheStats(CamelModel):
    """Статистика кешу"""
    total_animals: int
    total_vaccinations: int
    cache_size: int
    last_processed: Optional[datetime] = None


class VaccineFrequency(CamelModel):
    name: str
    frequency: int


class ExtractionStats(CamelModel):
    """Статистика вивчених патернів"""
    vaccine_names: int
    context_patterns: int
    top_vaccines: List[VaccineFrequency] = Field(default_factory=list)


class LearnedPatternsData(CamelModel):
    """Експорт/імпорт вивчених патернів"""
    vaccine_name_frequency: Dict[str, int] = Field(default_factory=dict)
    context_patterns: Dict[str, int] = Field(default_factory=dict)
