"""
VetVax — Extraction модуль

Компоненти:
- extractor: VaccinationExtractor (три стратегії екстракції)
- batch_processor: BatchProcessor (пакетна обробка + безперервне навчання)

Приклад використання:
    from vet_vax.extraction import VaccinationExtractor, BatchProcessor

    extractor = VaccinationExtractor()
    events = BatchProcessor(extractor).extract_vaccinations_batch(records)
"""

from .extractor import (
    VaccinationExtractor,
    ExtractorState,
    parse_visit_date,
    clean_billing_item,
    is_vaccine_billing_item,
)
from .batch_processor import BatchProcessor, BatchStats


__all__ = [
    'VaccinationExtractor',
    'ExtractorState',
    'parse_visit_date',
    'clean_billing_item',
    'is_vaccine_billing_item',
    'BatchProcessor',
    'BatchStats',
]
