"""
VetVax — Extraction Context

Спільний змінний стан вивчених патернів:
- vaccine_name_frequency: назва (lowercase) -> кількість
- context_patterns: 3-словна фраза -> кількість

Стан лише накопичується. Повна заміна можлива тільки через clear() або
replace() (імпорт). Власник: один VaccinationExtractor, який передає
контекст за посиланням у нормалізатор та PatternLearner.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from vet_vax.nlp.text_preprocessor import word_windows


@dataclass
class ExtractionContext:
    """Вивчені частоти назв вакцин та контекстних фраз"""
    vaccine_name_frequency: Counter = field(default_factory=Counter)
    context_patterns: Counter = field(default_factory=Counter)

    def record_vaccine_name(self, name: str, count: int = 1) -> None:
        self.vaccine_name_frequency[name.lower().strip()] += count

    def record_context_windows(
        self,
        text: str,
        min_length: int = 10,
        max_length: int = 50
    ) -> int:
        """
        Додати всі 3-словні фрази тексту.

        Returns:
            Кількість врахованих фраз
        """
        added = 0
        for phrase in word_windows(text, size=3, min_length=min_length, max_length=max_length):
            self.context_patterns[phrase] += 1
            added += 1
        return added

    def top_vaccines(self, limit: int = 10) -> List[Tuple[str, int]]:
        return self.vaccine_name_frequency.most_common(limit)

    def clear(self) -> None:
        self.vaccine_name_frequency.clear()
        self.context_patterns.clear()

    def replace(
        self,
        vaccine_name_frequency: Dict[str, int],
        context_patterns: Dict[str, int]
    ) -> None:
        """Повністю замінити обидві таблиці (імпорт)"""
        self.vaccine_name_frequency = Counter(
            {name: int(count) for name, count in vaccine_name_frequency.items()}
        )
        self.context_patterns = Counter(
            {pattern: int(count) for pattern, count in context_patterns.items()}
        )

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            'vaccine_name_frequency': dict(self.vaccine_name_frequency),
            'context_patterns': dict(self.context_patterns),
        }
