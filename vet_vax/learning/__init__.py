"""
VetVax — Learning модуль

Вивчені патерни та їх застосування.

Компоненти:
- context: ExtractionContext (частоти назв та контекстних фраз)
- pattern_learner: PatternLearner (навчання, детекція, кандидати)

Приклад використання:
    from vet_vax.learning import ExtractionContext, PatternLearner

    context = ExtractionContext()
    learner = PatternLearner()
    learner.learn_from_data(records, context)
"""

from .context import ExtractionContext
from .pattern_learner import (
    PatternLearner,
    DetectionResult,
    FoundVaccine,
)


__all__ = [
    'ExtractionContext',
    'PatternLearner',
    'DetectionResult',
    'FoundVaccine',
]
