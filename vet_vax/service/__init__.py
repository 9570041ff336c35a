"""
VetVax — Service модуль

- cache_service: VaccinationCacheService (обробка корпусу, кеш, агрегація)
"""

from .cache_service import VaccinationCacheService, CacheSnapshot


__all__ = [
    'VaccinationCacheService',
    'CacheSnapshot',
]
