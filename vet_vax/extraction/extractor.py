"""
VetVax — Vaccination Extractor

Головний компонент екстракції. Для кожного запису візиту застосовує
три стратегії у фіксованому порядку:

1. Рядки рахунку (billItems): впевненість 0.95
2. Старі розділи anamnéza/terapie: впевненість 0.8
3. Вільний текст (лише якщо 1-2 нічого не дали)

Стани: UNINITIALIZED -> LEARNING -> READY

Приклад:
    extractor = VaccinationExtractor()
    extractor.initialize(records)

    events = extractor.extract_vaccinations(records[0])
    for event in events:
        print(event.vaccine_name, event.confidence)
"""

import itertools
import logging
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from vet_vax.config import ExtractionConfig
from vet_vax.learning import ExtractionContext, PatternLearner
from vet_vax.nlp.normalizer import extract_relevant_text, normalize_vaccine_name
from vet_vax.nlp.vocabulary import (
    ANAMNESIS_SECTION_KEYS,
    ANAMNESIS_VACCINATION_KEYWORDS,
    BILLING_CLEANUP_RULES,
    BILLING_EXCLUDED_TOKENS,
    BILLING_MIN_NAME_LENGTH,
    BILLING_NAME_REWRITES,
    BILLING_VACCINE_TOKENS,
    BILLING_VISIT_KEYWORD,
    THERAPY_SECTION_KEYS,
    THERAPY_VACCINE_KEYWORDS,
    UNSPECIFIED_VACCINE_NAME,
    VACCINATION_PATTERN_SEEDS,
)
from vet_vax.schemas import (
    ExtractionStats,
    LearnedPatternsData,
    RawVisitRecord,
    VaccinationEvent,
    VaccineFrequency,
)

logger = logging.getLogger(__name__)


REPORT_TITLE_PATTERN = re.compile(r'název:\s*([^\n]*)', re.IGNORECASE)
DEFAULT_REPORT_TITLE = "Vakcinace"


class ExtractorState(str, Enum):
    """Стан екстрактора"""
    UNINITIALIZED = "uninitialized"
    LEARNING = "learning"
    READY = "ready"


# =============================================================================
# HELPERS
# =============================================================================

def parse_visit_date(value: str) -> datetime:
    """
    Розібрати дату візиту (ISO 8601).

    Дати з часовим поясом переводяться в UTC без tzinfo.

    Raises:
        ValueError: Якщо рядок не є датою
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def is_vaccine_billing_item(item: str) -> bool:
    """Рядок рахунку схожий на вакцинний препарат і не є матеріалом/обстеженням"""
    lower_item = item.lower()
    return (
        any(token in lower_item for token in BILLING_VACCINE_TOKENS)
        and not any(token in lower_item for token in BILLING_EXCLUDED_TOKENS)
    )


def clean_billing_item(item: str) -> str:
    """
    Очистити назву препарату з рядка рахунку.

    Приклад:
        clean_billing_item("Nobivac Trio inj 1 dávka")                 # "Nobivac Trio"
        clean_billing_item("Biocan Novel dhppi/l4r 1 ml (0012345)")   # "Biocan Novel DHPPI/L4R"
    """
    name = item
    for pattern, replacement in BILLING_CLEANUP_RULES:
        name = pattern.sub(replacement, name)
    name = name.strip()

    for pattern, replacement in BILLING_NAME_REWRITES:
        name = pattern.sub(replacement, name)

    return name


def _find_section(sections: Dict[str, str], keys: Sequence[str]) -> Optional[str]:
    for key, value in sections.items():
        if key.lower() in keys and value:
            return value
    return None


# =============================================================================
# EXTRACTOR
# =============================================================================

class VaccinationExtractor:
    """
    Екстрактор подій вакцинації.

    Володіє одним ExtractionContext, який накопичується між викликами
    і передається нормалізатору та PatternLearner за посиланням.
    """

    def __init__(
        self,
        context: Optional[ExtractionContext] = None,
        config: Optional[ExtractionConfig] = None
    ):
        self.config = config or ExtractionConfig()
        self.context = context if context is not None else ExtractionContext()
        self.learner = PatternLearner(self.config)
        self.state = ExtractorState.UNINITIALIZED

        # Монотонний лічильник для унікальних id подій
        self._sequence = itertools.count(1)

    @property
    def is_ready(self) -> bool:
        return self.state is ExtractorState.READY

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self, corpus: Optional[Sequence[RawVisitRecord]] = None) -> None:
        """
        Ініціалізувати екстрактор (ідемпотентно).

        Якщо передано корпус, один раз навчається на ньому.
        При помилці навчання стан повертається в UNINITIALIZED.
        """
        if self.is_ready:
            return

        logger.info("🔍 Initializing vaccination extractor...")

        if corpus:
            self.state = ExtractorState.LEARNING
            try:
                self.learner.learn_from_data(corpus, self.context)
            except Exception:
                self.state = ExtractorState.UNINITIALIZED
                raise

        self.state = ExtractorState.READY
        logger.info(
            f"✅ Extractor initialized with {len(self.context.vaccine_name_frequency)} "
            f"vaccine names and {len(self.context.context_patterns)} context patterns"
        )

    def reset(self) -> None:
        """Очистити вивчені патерни та повернутися в UNINITIALIZED"""
        self.context.clear()
        self.state = ExtractorState.UNINITIALIZED

    # =========================================================================
    # EXTRACTION
    # =========================================================================

    def extract_vaccinations(self, record: RawVisitRecord) -> List[VaccinationEvent]:
        """
        Витягнути події вакцинації з одного запису.

        Raises:
            ValueError: Якщо дата візиту не розбирається
        """
        visit_date = parse_visit_date(record.visit_date)

        events = self._extract_from_billing_items(record, visit_date)
        events.extend(self._extract_from_sections(record, visit_date))

        if not events:
            events = self._extract_from_text(record, visit_date)

        return events

    def _extract_from_billing_items(
        self,
        record: RawVisitRecord,
        visit_date: datetime
    ) -> List[VaccinationEvent]:
        """Стратегія 1: рядки рахунку"""
        items = record.billing_items
        if not items:
            return []

        report_lower = record.report.lower()
        is_vaccination_visit = (
            BILLING_VISIT_KEYWORD in report_lower
            or any(BILLING_VISIT_KEYWORD in item.lower() for item in items)
        )
        if not is_vaccination_visit:
            return []

        vaccine_items = [item for item in items if is_vaccine_billing_item(item)]
        if not vaccine_items:
            return []

        provenance = self._billing_provenance(record)
        events = []

        for index, item in enumerate(vaccine_items):
            name = clean_billing_item(item)
            if len(name) < BILLING_MIN_NAME_LENGTH:
                continue

            events.append(self._make_event(
                record,
                visit_date,
                vaccine_name=self._normalize(name),
                confidence=self.config.billing_confidence,
                extracted_text=provenance,
                method="bill",
                index=index,
            ))

        return events

    @staticmethod
    def _billing_provenance(record: RawVisitRecord) -> str:
        match = REPORT_TITLE_PATTERN.search(record.report)
        title = (match.group(1).strip() if match else "") or DEFAULT_REPORT_TITLE
        items = "\n".join(record.billing_items)

        return (
            f"Název: {title}\n\n"
            f"Vakcinační přípravky z faktury:\n{items}\n\n"
            f"Celý text zprávy:\n{record.report}"
        )

    def _extract_from_sections(
        self,
        record: RawVisitRecord,
        visit_date: datetime
    ) -> List[VaccinationEvent]:
        """Стратегія 2: старі розділи anamnéza + terapie"""
        sections = record.sections or {}
        anamnesis = _find_section(sections, ANAMNESIS_SECTION_KEYS)
        therapy = _find_section(sections, THERAPY_SECTION_KEYS)

        if not anamnesis or not therapy:
            return []

        anamnesis_lower = anamnesis.lower()
        if not any(keyword in anamnesis_lower for keyword in ANAMNESIS_VACCINATION_KEYWORDS):
            return []

        therapy_lower = therapy.lower()
        found = [keyword for keyword in THERAPY_VACCINE_KEYWORDS if keyword in therapy_lower]

        provenance = f"Anamnéza: {anamnesis}\nTerapie: {therapy}"

        return [
            self._make_event(
                record,
                visit_date,
                vaccine_name=self._normalize(keyword),
                confidence=self.config.legacy_section_confidence,
                extracted_text=provenance,
                method="terapie",
                index=index,
            )
            for index, keyword in enumerate(found)
        ]

    def _extract_from_text(
        self,
        record: RawVisitRecord,
        visit_date: datetime
    ) -> List[VaccinationEvent]:
        """Стратегія 3: вільний текст (fallback)"""
        report = record.report
        lower_text = report.lower()

        detection = self.learner.detect_vaccination_context(lower_text, self.context)
        if not detection.is_vaccination:
            return []

        candidates = self.learner.extract_vaccine_names_advanced(lower_text, self.context)

        if not candidates:
            return [self._make_event(
                record,
                visit_date,
                vaccine_name=UNSPECIFIED_VACCINE_NAME,
                confidence=detection.confidence * self.config.unspecified_confidence_factor,
                extracted_text=self._relevant_text(report),
                method="text",
                index=0,
            )]

        return [
            self._make_event(
                record,
                visit_date,
                vaccine_name=self._normalize(candidate.name),
                confidence=min(detection.confidence + candidate.confidence, 1.0),
                extracted_text=candidate.context or self._relevant_text(report),
                method="text",
                index=index,
            )
            for index, candidate in enumerate(candidates)
        ]

    def _normalize(self, name: str) -> str:
        return normalize_vaccine_name(
            name,
            self.context,
            high_frequency_threshold=self.config.high_frequency_threshold,
            similarity_threshold=self.config.normalization_similarity,
        )

    def _relevant_text(self, report: str) -> str:
        return extract_relevant_text(
            report, VACCINATION_PATTERN_SEEDS, limit=self.config.relevant_text_limit
        )

    def _make_event(
        self,
        record: RawVisitRecord,
        visit_date: datetime,
        vaccine_name: str,
        confidence: float,
        extracted_text: str,
        method: str,
        index: int
    ) -> VaccinationEvent:
        event_id = (
            f"{record.animal_id}-{record.visit_id}-{method}-{index}-{next(self._sequence)}"
        )
        return VaccinationEvent(
            id=event_id,
            animal_id=record.animal_id,
            vaccine_name=vaccine_name,
            vaccination_date=visit_date,
            source_visit_id=record.visit_id,
            confidence=confidence,
            extracted_text=extracted_text,
        )

    # =========================================================================
    # LEARNED PATTERNS
    # =========================================================================

    def get_extraction_stats(self, top_limit: int = 10) -> ExtractionStats:
        """Статистика вивчених патернів"""
        return ExtractionStats(
            vaccine_names=len(self.context.vaccine_name_frequency),
            context_patterns=len(self.context.context_patterns),
            top_vaccines=[
                VaccineFrequency(name=name, frequency=frequency)
                for name, frequency in self.context.top_vaccines(top_limit)
            ],
        )

    def export_learned_patterns(self) -> LearnedPatternsData:
        """Знімок обох таблиць частот"""
        return LearnedPatternsData(**self.context.to_dict())

    def import_learned_patterns(self, data: Union[LearnedPatternsData, dict]) -> None:
        """
        Замінити вивчені патерни повністю.

        Екстрактор переходить у READY без навчання на сирих даних.
        """
        if not isinstance(data, LearnedPatternsData):
            data = LearnedPatternsData.model_validate(data)

        self.context.replace(data.vaccine_name_frequency, data.context_patterns)
        self.state = ExtractorState.READY

        logger.info(
            f"📥 Imported {len(data.vaccine_name_frequency)} vaccine names "
            f"and {len(data.context_patterns)} context patterns"
        )
