"""
Тести для модуля nlp.fuzzy_matcher

Запуск: pytest tests/test_fuzzy_matcher.py -v
Або демо: python tests/test_fuzzy_matcher.py
"""

import pytest


def test_levenshtein_distance():
    """Тест редакційної відстані"""
    from vet_vax.nlp import levenshtein_distance

    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("nobivac", "nobivac") == 0
    assert levenshtein_distance("nobivac", "nobivak") == 1

    print("✓ Levenshtein distance OK")


@pytest.mark.parametrize("value", ["", "a", "nobivac", "očkování", "DHPPI/L4R"])
def test_similarity_identity(value):
    """similarity(s, s) = 1 для будь-якого s"""
    from vet_vax.nlp import calculate_similarity

    assert calculate_similarity(value, value) == 1.0


def test_similarity_empty_strings():
    """Порожні рядки"""
    from vet_vax.nlp import calculate_similarity

    assert calculate_similarity("", "") == 1.0
    assert calculate_similarity("x", "") == 0.0
    assert calculate_similarity("", "x") == 0.0

    print("✓ Empty string similarity OK")


def test_similarity_value():
    """Нормалізація за довшим рядком"""
    from vet_vax.nlp import calculate_similarity

    assert calculate_similarity("nobivac", "nobivak") == pytest.approx(6 / 7)
    assert calculate_similarity("abc", "xyz") == 0.0


def test_fuzzy_match_exact_threshold():
    """Поріг 1.0: лише точний збіг цілого токена"""
    from vet_vax.nlp import fuzzy_match

    assert fuzzy_match("pes dostal vakcinaci dnes", "vakcinaci", 1.0)
    assert not fuzzy_match("pes dostal vakcinaci dnes", "vakcinace", 1.0)
    # підрядок токена не є точним збігом
    assert not fuzzy_match("revakcinaci", "vakcinaci", 1.0)

    print("✓ Exact fuzzy match OK")


def test_fuzzy_match_typos():
    """Опечатки проходять при нижчому порозі"""
    from vet_vax.nlp import fuzzy_match

    assert fuzzy_match("pes dostal vakcnaci", "vakcinaci", 0.8)
    assert not fuzzy_match("kulhání levé nohy", "vakcinace", 0.8)
    assert not fuzzy_match("", "vakcinace", 0.5)


def test_extract_context_around_match():
    """Контекстне вікно навколо збігу"""
    from vet_vax.nlp import extract_context_around_match

    text = "Pes byl v pořádku, aplikována Nobivac Trio, bez reakce."

    snippet = extract_context_around_match(text, "nobivac trio", window=10)
    assert "Nobivac Trio" in snippet
    assert snippet == snippet.strip()
    assert len(snippet) <= len("nobivac trio") + 20

    assert extract_context_around_match(text, "rabies") == ""

    print(f"✓ Context: '{snippet}'")


def demo():
    print("=" * 60)
    print("VetVax — Тест fuzzy matcher")
    print("=" * 60)

    test_levenshtein_distance()
    test_similarity_empty_strings()
    test_fuzzy_match_exact_threshold()
    test_extract_context_around_match()

    print("=" * 60)
    print("✅ Успішно!")


if __name__ == "__main__":
    demo()
