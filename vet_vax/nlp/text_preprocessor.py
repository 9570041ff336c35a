"""
VetVax — Text Preprocessor

Розбиття тексту звітів на речення, токени та 3-словні фрази.
Однакові правила використовуються і для початкового навчання,
і для безперервного навчання після пакетної обробки.
"""

import re
from typing import Iterator, List


# Речення для пошуку релевантного фрагменту
SENTENCE_PATTERN = re.compile(r'[.!?]')

# Речення для навчання контекстних фраз (також ;)
LEARNING_SENTENCE_PATTERN = re.compile(r'[.!?;]')


def split_sentences(text: str, pattern: re.Pattern = SENTENCE_PATTERN) -> List[str]:
    """Розбиття на речення (порожні фрагменти зберігаються)"""
    return pattern.split(text)


def tokenize(text: str) -> List[str]:
    """Токенізація за пробільними символами"""
    return text.split()


def word_windows(
    text: str,
    size: int = 3,
    min_length: int = 10,
    max_length: int = 50
) -> Iterator[str]:
    """
    Ковзне вікно з size слів.

    Повертає лише фрази, довжина яких строго між min_length та max_length.

    Приклад:
        list(word_windows("pes dostal vakcinaci dnes"))
        # ['pes dostal vakcinaci', 'dostal vakcinaci dnes']
    """
    words = tokenize(text.strip())
    for i in range(len(words) - size + 1):
        phrase = " ".join(words[i:i + size])
        if min_length < len(phrase) < max_length:
            yield phrase
