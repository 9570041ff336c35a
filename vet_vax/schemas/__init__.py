"""
VetVax — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- records.py: RawVisitRecord
- vaccination.py: VaccinationEvent, AnimalVaccinationSummary,
  AnimalVaccinationHistory, ProcessingResult, CacheStats,
  ExtractionStats, LearnedPatternsData

Приклад використання:
    from vet_vax.schemas import RawVisitRecord, VaccinationEvent

    record = RawVisitRecord(
        user_id=1, visit_id=101, animal_id=201,
        visit_date="2024-01-15", report="Vakcinace Nobivac Trio"
    )

    # Серіалізація в JSON (camelCase)
    json_data = event.model_dump_json(by_alias=True)
"""

from .records import RawVisitRecord

from .vaccination import (
    VaccinationEvent,
    AnimalVaccinationSummary,
    AnimalVaccinationHistory,
    ProcessingResult,
    CacheStats,
    VaccineFrequency,
    ExtractionStats,
    LearnedPatternsData,
)


__all__ = [
    'RawVisitRecord',
    'VaccinationEvent',
    'AnimalVaccinationSummary',
    'AnimalVaccinationHistory',
    'ProcessingResult',
    'CacheStats',
    'VaccineFrequency',
    'ExtractionStats',
    'LearnedPatternsData',
]
