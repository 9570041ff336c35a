"""
VetVax — Vaccination Cache Service

Кеш подій вакцинації по тваринах та агреговані запити над ним.

Кеш будується повністю за один прохід обробки і публікується однією
заміною посилання на новий знімок. Читачі завжди бачать або старий,
або новий знімок цілком. Паралельні перебудови серіалізуються
asyncio.Lock.

Приклад:
    service = VaccinationCacheService(JsonRecordStore("data/records.json"))

    result = await service.process_all_records()
    print(result.total_vaccinations)

    animals = await service.get_animals_with_latest_vaccination()
    history = await service.get_animal_vaccination_history(201)
"""

import asyncio
import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Union

from vet_vax.config import VetVaxConfig, get_default_config
from vet_vax.extraction import BatchProcessor, VaccinationExtractor
from vet_vax.schemas import (
    AnimalVaccinationHistory,
    AnimalVaccinationSummary,
    CacheStats,
    ExtractionStats,
    LearnedPatternsData,
    ProcessingResult,
    VaccinationEvent,
)
from vet_vax.store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheSnapshot:
    """Незмінний знімок результатів одного проходу обробки"""
    events_by_animal: Dict[int, Tuple[VaccinationEvent, ...]] = field(default_factory=dict)
    last_processed: Optional[datetime] = None

    @property
    def total_vaccinations(self) -> int:
        return sum(len(events) for events in self.events_by_animal.values())


class VaccinationCacheService:
    """
    Сервіс обробки та запитів.

    Args:
        store: Джерело сирих записів
        extractor: Екстрактор (за замовчуванням новий, з config.extraction)
        config: Головна конфігурація
    """

    def __init__(
        self,
        store: RecordStore,
        extractor: Optional[VaccinationExtractor] = None,
        config: Optional[VetVaxConfig] = None
    ):
        self.config = config or get_default_config()
        self.store = store
        self.extractor = extractor or VaccinationExtractor(config=self.config.extraction)
        self.batch_processor = BatchProcessor(self.extractor, self.config.processing)

        self._snapshot: Optional[CacheSnapshot] = None
        self._rebuild_lock = asyncio.Lock()

    @property
    def is_processed(self) -> bool:
        return self._snapshot is not None

    # =========================================================================
    # PROCESSING
    # =========================================================================

    async def process_all_records(self) -> ProcessingResult:
        """
        Повна обробка корпусу.

        Помилка читання сховища пробрасується, попередній знімок лишається.
        """
        async with self._rebuild_lock:
            return await self._rebuild()

    async def _rebuild(self) -> ProcessingResult:
        start_time = time.perf_counter()

        logger.info("🔄 Starting vaccination data processing...")

        records = await self.store.fetch_all_raw_records()
        logger.info(f"📊 Retrieved {len(records)} raw records")

        events = self.batch_processor.extract_vaccinations_batch(records)

        grouped: Dict[int, List[VaccinationEvent]] = defaultdict(list)
        for event in events:
            grouped[event.animal_id].append(event)

        snapshot = CacheSnapshot(
            events_by_animal={animal_id: tuple(items) for animal_id, items in grouped.items()},
            last_processed=datetime.now(),
        )
        self._snapshot = snapshot

        processing_time = (time.perf_counter() - start_time) * 1000

        logger.info(f"✅ Processing complete in {processing_time:.0f}ms")
        logger.info(
            f"📈 Found {len(events)} vaccinations for {len(snapshot.events_by_animal)} animals"
        )

        return ProcessingResult(
            total_records=len(records),
            total_vaccinations=len(events),
            processed_animals=len(snapshot.events_by_animal),
            processing_time=processing_time,
        )

    async def _ensure_processed(self) -> CacheSnapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        async with self._rebuild_lock:
            if self._snapshot is None:
                logger.info("🚀 Cache is empty, processing all records...")
                await self._rebuild()
            return self._snapshot

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def get_animals_with_latest_vaccination(self) -> List[AnimalVaccinationSummary]:
        """
        Рядок на кожну тварину сховища (за зростанням id).

        Список тварин читається зі сховища при кожному виклику, тож тварини,
        додані після обробки, повертаються без подій.
        Враховуються лише події з впевненістю >= min_summary_confidence.
        """
        snapshot = await self._ensure_processed()
        animal_ids = await self.store.get_unique_animal_ids()
        min_confidence = self.config.cache.min_summary_confidence

        summaries = []
        for animal_id in animal_ids:
            qualifying = [
                event for event in snapshot.events_by_animal.get(animal_id, ())
                if event.confidence >= min_confidence
            ]
            latest = max(qualifying, key=lambda e: e.vaccination_date) if qualifying else None

            summaries.append(AnimalVaccinationSummary(
                animal_id=animal_id,
                latest_vaccination_date=latest.vaccination_date if latest else None,
                latest_vaccine_name=latest.vaccine_name if latest else None,
                total_vaccinations=len(qualifying),
            ))

        return summaries

    async def get_animal_vaccination_history(self, animal_id: int) -> AnimalVaccinationHistory:
        """Всі події тварини: нові першими, при рівних датах вища впевненість першою"""
        snapshot = await self._ensure_processed()
        events = snapshot.events_by_animal.get(animal_id, ())

        return AnimalVaccinationHistory(
            animal_id=animal_id,
            vaccinations=sorted(
                events,
                key=lambda e: (e.vaccination_date, e.confidence),
                reverse=True
            ),
        )

    def get_vaccinations_for_animal(self, animal_id: int) -> List[VaccinationEvent]:
        """Події тварини з поточного знімка без сортування та без обробки"""
        if self._snapshot is None:
            return []
        return list(self._snapshot.events_by_animal.get(animal_id, ()))

    # =========================================================================
    # ADMIN
    # =========================================================================

    def clear_cache(self) -> None:
        """Скинути знімок; наступний запит виконає повну обробку"""
        self._snapshot = None
        logger.info("🗑️ Vaccination cache cleared")

    def get_cache_stats(self) -> CacheStats:
        snapshot = self._snapshot or CacheSnapshot()
        return CacheStats(
            total_animals=len(snapshot.events_by_animal),
            total_vaccinations=snapshot.total_vaccinations,
            cache_size=len(snapshot.events_by_animal),
            last_processed=snapshot.last_processed,
        )

    def get_extraction_stats(self) -> ExtractionStats:
        return self.extractor.get_extraction_stats(self.config.cache.top_vaccines_limit)

    def export_learned_patterns(self) -> LearnedPatternsData:
        return self.extractor.export_learned_patterns()

    def import_learned_patterns(self, data: Union[LearnedPatternsData, dict]) -> None:
        self.extractor.import_learned_patterns(data)
