"""
VetVax — Pattern Learner

Навчання патернів вакцинації з корпусу та їх використання для
вільного тексту.

Функціональність:
- Навчання частот назв вакцин (бренд + токен, типи, токен з великої літери)
- Навчання контекстних 3-словних фраз навколо seed-термінів
- Детекція вакцинаційного контексту з фільтром заперечень
- Витягування кандидатів-вакцин з дедуплікацією за схожістю

Приклад:
    learner = PatternLearner()
    context = ExtractionContext()

    learner.learn_from_data(records, context)

    detection = learner.detect_vaccination_context("očkování proti vzteklině", context)
    print(detection.is_vaccination, detection.confidence)   # True 0.55

    candidates = learner.extract_vaccine_names_advanced("vakcinace rabies", context)
    print(candidates[0].name)                               # 'rabies'
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from vet_vax.config import ExtractionConfig
from vet_vax.nlp.fuzzy_matcher import (
    calculate_similarity,
    extract_context_around_match,
    fuzzy_match,
)
from vet_vax.nlp.text_preprocessor import LEARNING_SENTENCE_PATTERN, split_sentences
from vet_vax.nlp.vocabulary import (
    COMPOUND_VACCINE_PATTERNS,
    FUZZY_VACCINATION_TERMS,
    NEGATION_TERMS,
    PHARMA_COMPANIES,
    VACCINATION_PATTERN_SEEDS,
    VACCINE_TYPE_PATTERNS,
)
from vet_vax.schemas import RawVisitRecord

from .context import ExtractionContext

logger = logging.getLogger(__name__)


@dataclass
class DetectionResult:
    """Результат детекції вакцинаційного контексту"""
    is_vaccination: bool
    confidence: float
    indicators: int = 0


@dataclass
class FoundVaccine:
    """Кандидат-вакцина з одного тексту (не зберігається)"""
    name: str
    confidence: float
    context: Optional[str] = None


class PatternLearner:
    """
    Навчання та застосування вивчених патернів.

    Сам learner не має стану: всі частоти живуть в ExtractionContext,
    який передається в кожен виклик.
    """

    # Бренд + наступний токен ("nobivac trio", "biocan-novel")
    BRAND_TOKEN_PATTERNS = [
        re.compile(rf'\b{re.escape(company)}[\s\-]?([\w+/]+)', re.IGNORECASE)
        for company in PHARMA_COMPANIES
    ]

    # Токен одразу після seed-терміну ("Vakcinace Biocan ...")
    SEED_FOLLOWER_PATTERNS = [
        re.compile(rf'{re.escape(seed)}\w*\s+(\S+)', re.IGNORECASE)
        for seed in VACCINATION_PATTERN_SEEDS
    ]
    CAPITALIZED_TOKEN = re.compile(r'[^\W\d_][\w+\-/]+')

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()

    # =========================================================================
    # LEARNING
    # =========================================================================

    def learn_from_data(
        self,
        records: Sequence[RawVisitRecord],
        context: ExtractionContext
    ) -> int:
        """
        Навчитися з корпусу записів.

        Args:
            records: Валідовані записи візитів
            context: Контекст, який буде доповнено

        Returns:
            Кількість потенційно вакцинаційних звітів
        """
        logger.info(f"📚 Learning from {len(records)} records...")

        reports = [
            record.report for record in records
            if self._contains_seed(record.report.lower())
        ]

        logger.info(f"📊 Found {len(reports)} potential vaccination records")

        for report in reports:
            self._learn_vaccine_names(report, context)
            self._learn_context_patterns(report.lower(), context)

        logger.info(f"🧠 Learned {len(context.vaccine_name_frequency)} unique vaccine patterns")

        return len(reports)

    def _learn_vaccine_names(self, report: str, context: ExtractionContext) -> None:
        text = report.lower()

        # 1. Бренд + токен
        for pattern in self.BRAND_TOKEN_PATTERNS:
            for match in pattern.finditer(text):
                context.record_vaccine_name(match.group(0))

        # 2. Типи вакцин
        for pattern in VACCINE_TYPE_PATTERNS:
            for match in pattern.finditer(text):
                context.record_vaccine_name(match.group(0))

        # 3. Токен з великої літери після seed-терміну (оригінальний регістр)
        for pattern in self.SEED_FOLLOWER_PATTERNS:
            for match in pattern.finditer(report):
                token = self.CAPITALIZED_TOKEN.match(match.group(1))
                if token and token.group(0)[0].isupper():
                    context.record_vaccine_name(token.group(0))

    def _learn_context_patterns(self, text: str, context: ExtractionContext) -> None:
        for sentence in split_sentences(text, LEARNING_SENTENCE_PATTERN):
            if self._contains_seed(sentence):
                context.record_context_windows(
                    sentence,
                    min_length=self.config.pattern_min_length,
                    max_length=self.config.pattern_max_length,
                )

    @staticmethod
    def _contains_seed(text: str) -> bool:
        return any(seed in text for seed in VACCINATION_PATTERN_SEEDS)

    # =========================================================================
    # DETECTION
    # =========================================================================

    def detect_vaccination_context(
        self,
        text: str,
        context: ExtractionContext
    ) -> DetectionResult:
        """
        Чи описує текст вакцинацію.

        Індикатори:
        - seed-термін без заперечення у вікні ±20 символів: +0.3
        - вивчена фраза з частотою >= 3: +0.2
        - нечіткий збіг ключового терміну (0.8): +0.25
        """
        cfg = self.config
        text = text.lower()
        confidence = 0.0
        indicators = 0

        for seed in VACCINATION_PATTERN_SEEDS:
            index = text.find(seed)
            if index == -1:
                continue

            before = text[max(0, index - cfg.negation_window):index]
            after = text[index:index + len(seed) + cfg.negation_window]

            negated = any(neg in before or neg in after for neg in NEGATION_TERMS)
            if not negated:
                indicators += 1
                confidence += cfg.seed_indicator_weight

        for pattern, frequency in context.context_patterns.items():
            if frequency >= cfg.min_context_frequency and pattern in text:
                indicators += 1
                confidence += cfg.context_indicator_weight

        for term in FUZZY_VACCINATION_TERMS:
            if fuzzy_match(text, term, cfg.fuzzy_match_threshold):
                indicators += 1
                confidence += cfg.fuzzy_indicator_weight

        return DetectionResult(
            is_vaccination=indicators > 0,
            confidence=min(confidence, cfg.confidence_cap),
            indicators=indicators,
        )

    # =========================================================================
    # CANDIDATES
    # =========================================================================

    def extract_vaccine_names_advanced(
        self,
        text: str,
        context: ExtractionContext
    ) -> List[FoundVaccine]:
        """
        Кандидати-вакцини з тексту, відсортовані за впевненістю.

        Джерела:
        1. Вивчені назви з частотою >= 2 (точний підрядок або нечітко)
        2. Регулярні вирази складених назв з фіксованою впевненістю
        """
        cfg = self.config
        text = text.lower()
        found: List[FoundVaccine] = []

        for name, frequency in context.vaccine_name_frequency.items():
            if frequency < cfg.min_pattern_frequency:
                continue

            exact = name in text
            if not exact and not fuzzy_match(text, name, cfg.fuzzy_vaccine_threshold):
                continue

            base = 0.9 if exact else 0.7
            found.append(FoundVaccine(
                name=name,
                confidence=min(base * (frequency / 10), cfg.confidence_cap),
                context=extract_context_around_match(text, name, cfg.context_window),
            ))

        for pattern, confidence in COMPOUND_VACCINE_PATTERNS:
            for match in pattern.finditer(text):
                name = match.group(0).lower().strip()
                if any(v.name == name for v in found):
                    continue
                found.append(FoundVaccine(
                    name=name,
                    confidence=confidence,
                    context=extract_context_around_match(text, match.group(0), cfg.context_window),
                ))

        unique = self._remove_duplicates(found)
        unique.sort(key=lambda v: v.confidence, reverse=True)
        return unique

    def _remove_duplicates(self, vaccines: List[FoundVaccine]) -> List[FoundVaccine]:
        """Схожі назви (> similarity_threshold) зливаються, лишається вища впевненість"""
        unique: List[FoundVaccine] = []

        for vaccine in vaccines:
            existing_index = next(
                (
                    i for i, existing in enumerate(unique)
                    if calculate_similarity(existing.name, vaccine.name) > self.config.similarity_threshold
                ),
                None
            )

            if existing_index is None:
                unique.append(vaccine)
            elif vaccine.confidence > unique[existing_index].confidence:
                unique[existing_index] = vaccine

        return unique
