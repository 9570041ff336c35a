"""
VetVax — REST API модуль

FastAPI REST API для історії вакцинацій.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic моделі відповідей
- dependencies.py: Сервіс та його стан
- config.py: Налаштування сервера

Запуск:
    VETVAX_RECORDS_PATH=data/records.json uvicorn vet_vax.api.app:app --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)

Endpoints:
    GET  /health                                 - Health check

    GET  /api/animals                            - Тварини з останньою вакцинацією
    GET  /api/animals/{id}/vaccinations          - Історія вакцинацій тварини

    POST /api/processing/run                     - Повна обробка корпусу
    POST /api/cache/clear                        - Очистити кеш
    GET  /api/cache/stats                        - Статистика кешу

    GET  /api/patterns/stats                     - Статистика вивчених патернів
    GET  /api/patterns/export                    - Експорт патернів
    POST /api/patterns/import                    - Імпорт патернів
"""

from .app import app
from .dependencies import service_manager, get_service


__all__ = [
    "app",
    "service_manager",
    "get_service",
]
