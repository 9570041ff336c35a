"""
VetVax — Normalizer

Приведення назв вакцин до канонічної форми.

Порядок:
1. Точний збіг у таблиці нормалізації
2. Бренд + тип ("nobivac dhppi" -> "Nobivac DHPPI")
3. Вивчений патерн з високою частотою (нечітко)
4. Велика перша літера
"""

from typing import TYPE_CHECKING, Iterable

from .fuzzy_matcher import calculate_similarity
from .text_preprocessor import split_sentences
from .vocabulary import BRAND_PATTERNS, VACCINE_NORMALIZATION_MAP

if TYPE_CHECKING:
    from vet_vax.learning.context import ExtractionContext


def capitalize_first(value: str) -> str:
    """Велика перша літера, решта без змін"""
    return value[:1].upper() + value[1:]


def normalize_vaccine_name(
    name: str,
    context: "ExtractionContext",
    high_frequency_threshold: int = 5,
    similarity_threshold: float = 0.9
) -> str:
    """
    Нормалізувати назву вакцини.

    Args:
        name: Сира назва (з рахунку, терапії чи тексту)
        context: Вивчені патерни (лише читання)
        high_frequency_threshold: Мінімальна частота вивченої назви
        similarity_threshold: Мінімальна схожість з вивченою назвою (строго більше)

    Returns:
        Канонічна назва

    Приклад:
        normalize_vaccine_name("nobivac trio", context)   # "Nobivac Trio"
        normalize_vaccine_name("biocan l4", context)      # "Biocan Leptospira L4"
    """
    lower_name = name.lower().strip()

    # 1. Точний збіг
    canonical = VACCINE_NORMALIZATION_MAP.get(lower_name)
    if canonical:
        return canonical

    # 2. Бренд + тип
    for brand, display in BRAND_PATTERNS:
        if brand in lower_name:
            types_part = lower_name.replace(brand, "", 1).strip()
            normalized_type = (
                VACCINE_NORMALIZATION_MAP.get(types_part) or capitalize_first(types_part)
            )
            return f"{display} {normalized_type}".strip()

    # 3. Вивчені патерни з високою частотою
    for pattern, frequency in context.vaccine_name_frequency.items():
        if (
            frequency >= high_frequency_threshold
            and calculate_similarity(pattern, lower_name) > similarity_threshold
        ):
            return capitalize_first(pattern)

    # 4. Fallback
    return capitalize_first(name)


def extract_relevant_text(text: str, terms: Iterable[str], limit: int = 100) -> str:
    """
    Найрелевантніший фрагмент тексту для обґрунтування події.

    Перше речення з будь-яким терміном; інакше перші limit символів
    (з "..." якщо текст обрізано).
    """
    terms = list(terms)

    for sentence in split_sentences(text):
        sentence_lower = sentence.lower()
        if any(term in sentence_lower for term in terms):
            return sentence.strip()

    return text[:limit] + ("..." if len(text) > limit else "")
