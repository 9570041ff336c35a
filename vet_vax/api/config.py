"""
VetVax — API Configuration

Налаштування FastAPI сервера та шляхи до даних.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Дані
    records_path: Optional[str] = None       # JSON файл із сирими записами
    config_path: Optional[str] = None        # YAML конфігурація VetVax
    patterns_path: Optional[str] = None      # експорт вивчених патернів для імпорту при старті

    # API
    api_prefix: str = "/api"
    api_title: str = "VetVax API"
    api_description: str = "Екстракція та історія вакцинацій тварин"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            log_level=os.getenv("VETVAX_LOG_LEVEL", "INFO"),
            records_path=os.getenv("VETVAX_RECORDS_PATH"),
            config_path=os.getenv("VETVAX_CONFIG_PATH"),
            patterns_path=os.getenv("VETVAX_PATTERNS_PATH"),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
