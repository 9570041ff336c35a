"""
VetVax — Екстракція вакцинацій з ветеринарних записів

Архітектура: вивчені патерни + три стратегії екстракції + кеш по тваринах

Модулі:
- config: Конфігурація системи
- nlp: Нечітке співставлення, нормалізація назв, словники
- learning: Вивчені патерни (ExtractionContext, PatternLearner)
- extraction: VaccinationExtractor та BatchProcessor
- service: Кеш та агреговані запити
- store: Джерела сирих записів
- schemas: Pydantic моделі
- api: Backend API
"""

__version__ = "1.0.0"

from .config import VetVaxConfig, get_default_config
