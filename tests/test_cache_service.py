"""
Тести для модуля service.cache_service

Запуск: pytest tests/test_cache_service.py -v

Асинхронні операції запускаються через asyncio.run.
"""

import asyncio
from datetime import datetime

import pytest

from vet_vax.store import InMemoryRecordStore, RecordStoreError


class CountingStore(InMemoryRecordStore):
    """Сховище з лічильником запитів та керованою помилкою"""

    def __init__(self, rows):
        super().__init__(rows)
        self.fetch_count = 0
        self.fail = False

    async def fetch_all_raw_records(self):
        self.fetch_count += 1
        if self.fail:
            raise RecordStoreError("connection refused")
        return await super().fetch_all_raw_records()


def _service(rows):
    from vet_vax.service import VaccinationCacheService

    store = CountingStore(rows)
    return VaccinationCacheService(store), store


def test_process_all_records(sample_rows):
    """Підсумок повної обробки"""
    service, _ = _service(sample_rows)

    result = asyncio.run(service.process_all_records())

    assert result.total_records == 7
    assert result.total_vaccinations == 6
    assert result.processed_animals == 4
    assert result.processing_time >= 0

    stats = service.get_cache_stats()
    assert stats.total_animals == 4
    assert stats.total_vaccinations == 6
    assert stats.cache_size == 4
    assert isinstance(stats.last_processed, datetime)

    print(f"✓ Processed: {result.model_dump(by_alias=True)}")


def test_animals_with_latest_vaccination(sample_rows):
    """Рядок на кожну тварину корпусу, за зростанням id"""
    service, _ = _service(sample_rows)

    summaries = asyncio.run(service.get_animals_with_latest_vaccination())

    assert [s.animal_id for s in summaries] == [201, 202, 203, 204, 205, 206]

    by_id = {s.animal_id: s for s in summaries}

    assert by_id[201].total_vaccinations == 2
    assert by_id[201].latest_vaccine_name == "Biocan Novel DHPPI/L4R"
    assert by_id[201].latest_vaccination_date == datetime(2024, 6, 10)

    assert by_id[202].total_vaccinations == 2
    assert by_id[203].latest_vaccine_name == "Rabies"

    # 204: подія з низькою впевненістю відфільтрована; 205, 206: подій немає
    for animal_id in (204, 205, 206):
        assert by_id[animal_id].total_vaccinations == 0
        assert by_id[animal_id].latest_vaccination_date is None
        assert by_id[animal_id].latest_vaccine_name is None


def test_animal_history_order(sample_rows):
    """Нові першими, при рівній даті вища впевненість першою"""
    rows = sample_rows + [{
        "user_id": 1,
        "visit_id": 108,
        "pet_id": 201,
        "visit_date": "2024-06-10",
        "raw_record": {"report": "Očkování proti vzteklině."},
    }]
    service, _ = _service(rows)

    history = asyncio.run(service.get_animal_vaccination_history(201))

    assert history.animal_id == 201
    keys = [(e.vaccination_date, e.confidence) for e in history.vaccinations]
    assert keys == sorted(keys, reverse=True)
    assert history.vaccinations[-1].source_visit_id == 101


def test_history_unknown_animal(sample_rows):
    service, _ = _service(sample_rows)

    history = asyncio.run(service.get_animal_vaccination_history(999))

    assert history.vaccinations == []


def test_animal_added_after_processing(sample_rows):
    """Тварина, додана у сховище після обробки, є у списку без подій"""
    service, store = _service(sample_rows)
    asyncio.run(service.process_all_records())

    store.add_rows([{
        "user_id": 1,
        "visit_id": 901,
        "pet_id": 999,
        "visit_date": "2024-07-01",
        "raw_record": {"report": "Kontrola."},
    }])

    summaries = asyncio.run(service.get_animals_with_latest_vaccination())

    assert [s.animal_id for s in summaries] == [201, 202, 203, 204, 205, 206, 999]
    added = summaries[-1]
    assert added.latest_vaccination_date is None
    assert added.latest_vaccine_name is None
    assert added.total_vaccinations == 0

    # кеш не перебудовувався
    assert service.get_cache_stats().total_vaccinations == 6


def test_lazy_processing_and_clear_cache(sample_rows):
    """Перший запит та запит після clear_cache запускають повну обробку"""
    service, store = _service(sample_rows)
    assert service.get_vaccinations_for_animal(201) == []

    # обробка + читання списку тварин
    asyncio.run(service.get_animals_with_latest_vaccination())
    assert store.fetch_count == 2

    asyncio.run(service.get_animal_vaccination_history(201))
    assert store.fetch_count == 2
    assert len(service.get_vaccinations_for_animal(201)) == 2

    service.clear_cache()
    assert service.get_cache_stats().total_vaccinations == 0
    assert service.get_cache_stats().last_processed is None

    asyncio.run(service.get_animal_vaccination_history(201))
    assert store.fetch_count == 3

    print("✓ clear_cache re-triggers processing")


def test_store_failure_keeps_previous_snapshot(sample_rows):
    """Помилка сховища пробрасується, попередній кеш лишається"""
    service, store = _service(sample_rows)
    asyncio.run(service.process_all_records())
    before = service.get_cache_stats()

    store.fail = True
    with pytest.raises(RecordStoreError):
        asyncio.run(service.process_all_records())

    assert service.get_cache_stats() == before
    assert len(service.get_vaccinations_for_animal(201)) == 2


def test_concurrent_processing_serialized(sample_rows):
    """Паралельні запити при порожньому кеші виконують одну обробку"""
    service, store = _service(sample_rows)

    async def run_queries():
        return await asyncio.gather(
            service.get_animals_with_latest_vaccination(),
            service.get_animal_vaccination_history(201),
            service.get_animals_with_latest_vaccination(),
        )

    first, history, second = asyncio.run(run_queries())

    # одна обробка + список тварин для кожного з двох підсумків
    assert store.fetch_count == 3
    assert first == second
    assert len(history.vaccinations) == 2


def test_patterns_round_trip_through_service(sample_rows):
    """Експорт з одного сервісу та імпорт в інший"""
    from vet_vax.service import VaccinationCacheService

    service, _ = _service(sample_rows)
    asyncio.run(service.process_all_records())
    exported = service.export_learned_patterns()

    fresh = VaccinationCacheService(InMemoryRecordStore())
    fresh.import_learned_patterns(exported)

    assert fresh.extractor.is_ready
    assert fresh.get_extraction_stats().vaccine_names == service.get_extraction_stats().vaccine_names
