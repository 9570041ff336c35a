"""
VetVax — Налаштування системи

Всі параметри екстракції, пакетної обробки та кешу зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.extraction.fuzzy_match_threshold
- Серіалізації в YAML
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# EXTRACTION CONFIGURATION
# =============================================================================

@dataclass
class ExtractionConfig:
    """Пороги навчання та нечіткого співставлення"""

    # Частоти вивчених патернів
    min_pattern_frequency: int = 2        # назва вакцини бере участь у пошуку
    min_context_frequency: int = 3        # контекстна фраза рахується як індикатор
    high_frequency_threshold: int = 5     # назва використовується для нормалізації

    # Нечітке співставлення
    fuzzy_match_threshold: float = 0.8    # ключові терміни вакцинації
    fuzzy_vaccine_threshold: float = 0.85 # вивчені назви вакцин
    similarity_threshold: float = 0.8     # дедуплікація кандидатів
    normalization_similarity: float = 0.9

    # Вікна
    context_window: int = 30              # символів навколо знайденої назви
    negation_window: int = 20             # символів навколо seed-терміну
    pattern_min_length: int = 10          # довжина 3-словної фрази (строго більше)
    pattern_max_length: int = 50          # (строго менше)
    relevant_text_limit: int = 100

    # Впевненість
    confidence_cap: float = 0.95
    billing_confidence: float = 0.95
    legacy_section_confidence: float = 0.8
    unspecified_confidence_factor: float = 0.5

    # Внески індикаторів у впевненість детекції
    seed_indicator_weight: float = 0.3
    context_indicator_weight: float = 0.2
    fuzzy_indicator_weight: float = 0.25


# =============================================================================
# PROCESSING CONFIGURATION
# =============================================================================

@dataclass
class ProcessingConfig:
    """Параметри пакетної обробки"""
    chunk_size: int = 100
    progress_log_threshold: int = 500     # логувати прогрес лише для великих корпусів
    progress_log_every_chunks: int = 5
    show_progress: bool = False           # tqdm progress bar


# =============================================================================
# CACHE CONFIGURATION
# =============================================================================

@dataclass
class CacheConfig:
    """Параметри кешу та агрегації"""
    min_summary_confidence: float = 0.7
    top_vaccines_limit: int = 10


# =============================================================================
# STORE CONFIGURATION
# =============================================================================

@dataclass
class StoreConfig:
    """Джерело сирих записів візитів"""
    records_path: Optional[str] = None


# =============================================================================
# MAIN CONFIG
# =============================================================================

@dataclass
class VetVaxConfig:
    """
    Головна конфігурація VetVax

    Приклад використання:
        config = VetVaxConfig()
        print(config.processing.chunk_size)               # 100
        print(config.extraction.fuzzy_match_threshold)    # 0.8
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "VetVax"

    # Компоненти
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    # Логування
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "VetVaxConfig":
        """Створити конфігурацію зі словника (напр. з YAML)"""
        data = dict(data or {})

        return cls(
            version=data.get("version", "1.0.0"),
            project_name=data.get("project_name", "VetVax"),
            extraction=ExtractionConfig(**(data.get("extraction") or {})),
            processing=ProcessingConfig(**(data.get("processing") or {})),
            cache=CacheConfig(**(data.get("cache") or {})),
            store=StoreConfig(**(data.get("store") or {})),
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
        )


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> VetVaxConfig:
    """Отримати конфігурацію за замовчуванням"""
    return VetVaxConfig()
