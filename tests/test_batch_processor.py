"""
Тести для модуля extraction.batch_processor

Запуск: pytest tests/test_batch_processor.py -v
"""

import logging


def test_batch_reference_corpus(sample_records):
    """Рахунок (101), вільний текст з назвою (103) та заперечення (104)"""
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    events = BatchProcessor(VaccinationExtractor()).extract_vaccinations_batch(sample_records)

    visit_101 = [e for e in events if e.source_visit_id == 101]
    visit_103 = [e for e in events if e.source_visit_id == 103]
    visit_104 = [e for e in events if e.source_visit_id == 104]

    assert any(e.confidence == 0.95 for e in visit_101)
    assert any("rabies" in e.vaccine_name.lower() for e in visit_103)
    assert not visit_104 or all(e.confidence < 0.5 for e in visit_104)

    print(f"✓ Batch: {len(events)} events")


def test_batch_event_invariants(sample_records):
    """Кожна подія: 0 < confidence <= 1, непорожній текст, унікальний id"""
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    events = BatchProcessor(VaccinationExtractor()).extract_vaccinations_batch(sample_records)

    assert events
    assert all(0 < e.confidence <= 1 for e in events)
    assert all(e.extracted_text for e in events)
    assert len({e.id for e in events}) == len(events)


def test_batch_record_failure_isolated(sample_records, caplog):
    """Некоректна дата (106) дає 0 подій і не зупиняє пакет"""
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    caplog.set_level(logging.ERROR, logger="vet_vax")
    processor = BatchProcessor(VaccinationExtractor())

    events = processor.extract_vaccinations_batch(sample_records)

    assert not [e for e in events if e.source_visit_id == 106]
    assert processor.last_run.failed_records == 1
    assert processor.last_run.processed_records == len(sample_records) - 1
    assert processor.last_run.total_events == len(events)
    assert any("106" in message for message in caplog.messages)


def test_batch_lazy_initialization(sample_records):
    """Неініціалізований екстрактор навчається на самому пакеті"""
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    extractor = VaccinationExtractor()
    BatchProcessor(extractor).extract_vaccinations_batch(sample_records)

    assert extractor.is_ready
    assert extractor.context.vaccine_name_frequency["rabies"] >= 1


def test_batch_chunk_size_does_not_change_result(sample_records):
    """Розмір частини впливає лише на логування"""
    from vet_vax.config import ProcessingConfig
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    default = BatchProcessor(VaccinationExtractor()).extract_vaccinations_batch(sample_records)
    small = BatchProcessor(
        VaccinationExtractor(), ProcessingConfig(chunk_size=2)
    ).extract_vaccinations_batch(sample_records)

    def summary(events):
        return [(e.source_visit_id, e.vaccine_name, e.confidence) for e in events]

    assert summary(small) == summary(default)


def test_continuous_learning(sample_records):
    """Результати пакету доповнюють вивчені патерни"""
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    extractor = VaccinationExtractor()
    extractor.initialize(sample_records)
    assert "nobivac trio" not in extractor.context.vaccine_name_frequency

    patterns_before = len(extractor.context.context_patterns)
    BatchProcessor(extractor).extract_vaccinations_batch(sample_records)

    assert extractor.context.vaccine_name_frequency["nobivac trio"] == 1
    assert extractor.context.context_patterns["vakcinační přípravky z"] >= 1
    assert len(extractor.context.context_patterns) > patterns_before


def test_empty_batch():
    from vet_vax.extraction import BatchProcessor, VaccinationExtractor

    extractor = VaccinationExtractor()
    processor = BatchProcessor(extractor)

    assert processor.extract_vaccinations_batch([]) == []
    assert extractor.is_ready
    assert processor.last_run.total_records == 0
