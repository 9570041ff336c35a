"""
VetVax — NLP модуль

Обробка тексту ветеринарних записів.

Компоненти:
- fuzzy_matcher: Редакційна відстань та нечітке співставлення
- text_preprocessor: Речення, токени, 3-словні фрази
- normalizer: Канонічні назви вакцин
- vocabulary: Словники брендів, типів та правил очистки

Приклад використання:
    from vet_vax.nlp import calculate_similarity, fuzzy_match

    calculate_similarity("nobivac", "nobivak")          # 0.857...
    fuzzy_match("pes dostal vakcnaci", "vakcinaci", 0.8)  # True
"""

from .fuzzy_matcher import (
    levenshtein_distance,
    calculate_similarity,
    fuzzy_match,
    extract_context_around_match,
)

from .text_preprocessor import (
    split_sentences,
    tokenize,
    word_windows,
)

from .normalizer import (
    normalize_vaccine_name,
    capitalize_first,
    extract_relevant_text,
)


__all__ = [
    # Matcher
    'levenshtein_distance',
    'calculate_similarity',
    'fuzzy_match',
    'extract_context_around_match',

    # Preprocessor
    'split_sentences',
    'tokenize',
    'word_windows',

    # Normalizer
    'normalize_vaccine_name',
    'capitalize_first',
    'extract_relevant_text',
]
