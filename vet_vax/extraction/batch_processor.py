"""
VetVax — Batch Processor

Пакетна екстракція з ізоляцією помилок на рівні запису та
безперервним навчанням на власних результатах.

Приклад:
    processor = BatchProcessor(VaccinationExtractor())
    events = processor.extract_vaccinations_batch(records)

    print(processor.last_run.failed_records)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from vet_vax.config import ProcessingConfig
from vet_vax.schemas import RawVisitRecord, VaccinationEvent

from .extractor import VaccinationExtractor

logger = logging.getLogger(__name__)


@dataclass
class BatchStats:
    """Лічильники одного пакетного проходу"""
    total_records: int = 0
    processed_records: int = 0
    failed_records: int = 0
    vaccination_records: int = 0
    total_events: int = 0


class BatchProcessor:
    """
    Обробка корпусу частинами.

    Частини (chunk_size) лише обмежують обсяг логів та пам'яті,
    записи всередині обробляються послідовно.
    """

    def __init__(
        self,
        extractor: VaccinationExtractor,
        config: Optional[ProcessingConfig] = None
    ):
        self.extractor = extractor
        self.config = config or ProcessingConfig()
        self.last_run = BatchStats()

    def extract_vaccinations_batch(
        self,
        records: Sequence[RawVisitRecord]
    ) -> List[VaccinationEvent]:
        """
        Витягнути події з усіх записів.

        Помилка одного запису логується з visit_id і дає 0 подій.
        Після проходу вивчені патерни доповнюються результатами.
        """
        if not self.extractor.is_ready:
            self.extractor.initialize(records)

        logger.info(f"🔄 Processing {len(records)} records for vaccination extraction...")

        chunk_size = max(1, self.config.chunk_size)
        chunks = [records[i:i + chunk_size] for i in range(0, len(records), chunk_size)]
        show_progress_log = len(records) > self.config.progress_log_threshold

        stats = BatchStats(total_records=len(records))
        events: List[VaccinationEvent] = []

        iterator = tqdm(
            chunks,
            desc="Extracting",
            unit="chunk",
            disable=not self.config.show_progress
        )

        for chunk_index, chunk in enumerate(iterator):
            for record in chunk:
                try:
                    record_events = self.extractor.extract_vaccinations(record)
                except Exception as e:
                    stats.failed_records += 1
                    logger.error(f"❌ Error processing record {record.visit_id}: {e}")
                    continue

                stats.processed_records += 1
                if record_events:
                    stats.vaccination_records += 1
                    events.extend(record_events)

            if show_progress_log and chunk_index % self.config.progress_log_every_chunks == 0:
                logger.info(
                    f"📊 Progress: {stats.processed_records}/{len(records)} records processed"
                )

        stats.total_events = len(events)
        self.last_run = stats

        logger.info(
            f"✅ Extraction complete: found {len(events)} vaccinations "
            f"in {stats.vaccination_records} records ({stats.failed_records} failed)"
        )

        self.update_learning_from_extractions(events)

        return events

    def update_learning_from_extractions(self, events: Sequence[VaccinationEvent]) -> None:
        """Безперервне навчання: назви та 3-словні фрази обґрунтувань"""
        context = self.extractor.context
        extraction_config = self.extractor.config

        for event in events:
            context.record_vaccine_name(event.vaccine_name)
            context.record_context_windows(
                event.extracted_text.lower(),
                min_length=extraction_config.pattern_min_length,
                max_length=extraction_config.pattern_max_length,
            )
