"""
VetVax — Fuzzy Matcher

Нечітке співставлення рядків для назв вакцин з опечатками.

Методи:
- Levenshtein distance (редакційна відстань)
- Нормалізована схожість (0-1)
- Token-based match (схожість хоча б одного слова з ціллю)
- Контекстне вікно навколо знайденого збігу
"""

from typing import List


def levenshtein_distance(s1: str, s2: str) -> int:
    """Редакційна відстань (вставка, видалення, заміна)"""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    previous: List[int] = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            current.append(min(
                previous[j] + 1,         # видалення
                current[j - 1] + 1,      # вставка
                previous[j - 1] + cost,  # заміна
            ))
        previous = current

    return previous[-1]


def calculate_similarity(s1: str, s2: str) -> float:
    """
    Нормалізована схожість двох рядків.

    (max_len - distance) / max_len; два порожні рядки -> 1.0,
    лише один порожній -> 0.0.
    """
    len1, len2 = len(s1), len(s2)

    if len1 == 0:
        return 1.0 if len2 == 0 else 0.0
    if len2 == 0:
        return 0.0

    max_len = max(len1, len2)
    return (max_len - levenshtein_distance(s1, s2)) / max_len


def fuzzy_match(text: str, target: str, threshold: float) -> bool:
    """
    Чи є в тексті слово, схоже на target не менше ніж на threshold.

    Приклад:
        fuzzy_match("pes dostal vakcnaci", "vakcinaci", 0.8)  # True
    """
    for word in text.split():
        if calculate_similarity(word, target) >= threshold:
            return True
    return False


def extract_context_around_match(text: str, match: str, window: int = 30) -> str:
    """
    Фрагмент тексту навколо першого входження match (без урахування регістру).

    Returns:
        До window символів перед і після збігу; "" якщо збігу немає
    """
    index = text.lower().find(match.lower())
    if index == -1:
        return ""

    start = max(0, index - window)
    end = min(len(text), index + len(match) + window)
    return text[start:end].strip()
