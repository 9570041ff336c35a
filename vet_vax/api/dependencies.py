"""
VetVax — API Dependencies

Dependency Injection для FastAPI.
Створення сервісу кешу один раз на процес.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Optional

from vet_vax.config import VetVaxConfig, get_default_config, load_config
from vet_vax.service import VaccinationCacheService
from vet_vax.store import InMemoryRecordStore, JsonRecordStore

from .config import config

logger = logging.getLogger(__name__)


class ServiceManager:
    """
    Менеджер сервісу: створює VaccinationCacheService один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.service: Optional[VaccinationCacheService] = None
        self.settings: VetVaxConfig = get_default_config()
        self.records_source: Optional[str] = None
        self.error: Optional[str] = None

    def load(self) -> bool:
        """Створити сервіс зі сховищем та конфігурацією"""
        if self.is_loaded:
            return True

        try:
            logger.info("📦 Creating vaccination service...")

            # 1. Конфігурація
            if config.config_path:
                self.settings = load_config(config.config_path)
                logger.info(f"   ✅ Config: {config.config_path}")

            # 2. Сховище
            records_path = config.records_path or self.settings.store.records_path
            if records_path:
                store = JsonRecordStore(records_path)
                self.records_source = str(records_path)
                logger.info(f"   ✅ Records: {records_path}")
            else:
                store = InMemoryRecordStore()
                self.records_source = None
                logger.warning("   ⚠️ No records path configured, using empty in-memory store")

            self.service = VaccinationCacheService(store, config=self.settings)

            # 3. Вивчені патерни
            if config.patterns_path and Path(config.patterns_path).exists():
                with open(config.patterns_path, 'r', encoding='utf-8') as f:
                    self.service.import_learned_patterns(json.load(f))
                logger.info(f"   ✅ Patterns: {config.patterns_path}")

            self.is_loaded = True
            self.error = None
            return True

        except Exception as e:
            self.error = str(e)
            logger.exception(f"❌ Failed to create vaccination service: {e}")
            return False

    def get_service(self) -> Optional[VaccinationCacheService]:
        if not self.is_loaded:
            self.load()
        return self.service


# Глобальний менеджер
service_manager = ServiceManager()


# Dependency functions для FastAPI
def get_service_manager() -> ServiceManager:
    """Dependency: менеджер сервісу"""
    return service_manager


def get_service() -> VaccinationCacheService:
    """Dependency: сервіс кешу вакцинацій"""
    service = service_manager.get_service()
    if service is None:
        raise RuntimeError(f"Vaccination service unavailable: {service_manager.error}")
    return service


def get_optional_service() -> Optional[VaccinationCacheService]:
    """Dependency: сервіс або None, якщо його не вдалося створити"""
    return service_manager.get_service()
