"""
Тести для модуля api

Запуск: pytest tests/test_api.py -v

Сервіс підміняється через app.dependency_overrides, сховище в пам'яті.
"""

import pytest
from fastapi.testclient import TestClient

from vet_vax.store import InMemoryRecordStore, RecordStoreError


class FailingStore(InMemoryRecordStore):
    async def fetch_all_raw_records(self):
        raise RecordStoreError("connection refused")


def _client(store):
    from vet_vax.api.app import app
    from vet_vax.api.dependencies import get_optional_service, get_service
    from vet_vax.service import VaccinationCacheService

    service = VaccinationCacheService(store)
    app.dependency_overrides[get_service] = lambda: service
    app.dependency_overrides[get_optional_service] = lambda: service
    return TestClient(app), service


@pytest.fixture
def client(sample_rows):
    from vet_vax.api.app import app

    test_client, _ = _client(InMemoryRecordStore(sample_rows))
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    from vet_vax.api.app import app

    test_client, _ = _client(FailingStore())
    yield test_client
    app.dependency_overrides.clear()


def test_root_and_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "VetVax API"

    response = client.get("/health")
    assert response.status_code == 200
    health = response.json()
    assert health["status"] == "ok"
    assert health["store_connected"] is True
    assert health["cache_ready"] is False
    assert health["cache_stats"]["totalVaccinations"] == 0

    client.post("/api/processing/run")
    health = client.get("/health").json()
    assert health["cache_ready"] is True
    assert health["cache_stats"]["totalAnimals"] == 4

    print(f"✓ Health: {response.json()}")


def test_list_animals(client):
    """Список тварин у camelCase, за зростанням id"""
    response = client.get("/api/animals")

    assert response.status_code == 200
    data = response.json()
    assert [row["animalId"] for row in data] == [201, 202, 203, 204, 205, 206]
    assert data[0]["latestVaccineName"] == "Biocan Novel DHPPI/L4R"
    assert data[0]["totalVaccinations"] == 2
    assert data[3]["latestVaccinationDate"] is None


def test_animal_history(client):
    response = client.get("/api/animals/201/vaccinations")

    assert response.status_code == 200
    data = response.json()
    assert data["animalId"] == 201
    assert [v["sourceVisitId"] for v in data["vaccinations"]] == [105, 101]
    assert all(0 < v["confidence"] <= 1 for v in data["vaccinations"])


@pytest.mark.parametrize("animal_id", ["0", "-5", "abc"])
def test_animal_history_invalid_id(client, animal_id):
    """Невалідний id відхиляється до виклику сервісу"""
    response = client.get(f"/api/animals/{animal_id}/vaccinations")
    assert response.status_code == 422


def test_processing_and_cache_admin(client):
    response = client.post("/api/processing/run")
    assert response.status_code == 200
    result = response.json()
    assert result["totalRecords"] == 7
    assert result["totalVaccinations"] == 6
    assert result["processedAnimals"] == 4
    assert "processingTime" in result

    stats = client.get("/api/cache/stats").json()
    assert stats["totalAnimals"] == 4
    assert stats["lastProcessed"] is not None

    response = client.post("/api/cache/clear")
    assert response.status_code == 200

    stats = client.get("/api/cache/stats").json()
    assert stats["totalVaccinations"] == 0
    assert stats["lastProcessed"] is None


def test_patterns_export_import(client):
    """Експорт -> імпорт зберігає кількість вивчених назв"""
    client.post("/api/processing/run")

    exported = client.get("/api/patterns/export").json()
    before = client.get("/api/patterns/stats").json()
    assert before["vaccineNames"] == len(exported["vaccineNameFrequency"])
    assert len(before["topVaccines"]) <= 10

    response = client.post("/api/patterns/import", json={
        "vaccineNameFrequency": {"rabies": 3},
        "contextPatterns": {},
    })
    assert response.status_code == 200
    assert client.get("/api/patterns/stats").json()["vaccineNames"] == 1

    client.post("/api/patterns/import", json=exported)
    assert client.get("/api/patterns/stats").json()["vaccineNames"] == before["vaccineNames"]


def test_store_failure_is_bad_gateway(failing_client):
    """Помилка сховища -> 502 з описом"""
    response = failing_client.post("/api/processing/run")

    assert response.status_code == 502
    assert response.json() == {
        "error": "Record store unavailable",
        "detail": "connection refused",
    }

    response = failing_client.get("/api/animals")
    assert response.status_code == 502


def test_health_reports_unreachable_store(failing_client):
    """Недоступне сховище -> degraded"""
    health = failing_client.get("/health").json()

    assert health["status"] == "degraded"
    assert health["service_loaded"] is True
    assert health["store_connected"] is False


def test_logging_configured_before_service_load(monkeypatch):
    """Обробники логера підключені до створення сервісу"""
    import logging
    from vet_vax.api.app import app
    from vet_vax.api.dependencies import service_manager
    from vet_vax.logging_config import LOGGER_NAME

    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()

    handlers_at_load = []

    def fake_load():
        handlers_at_load.append(len(logger.handlers))
        return True

    monkeypatch.setattr(service_manager, "load", fake_load)
    try:
        with TestClient(app):
            pass
    finally:
        for handler in logger.handlers:
            if handler not in saved:
                handler.close()
        logger.handlers[:] = saved
        logger.setLevel(logging.NOTSET)

    assert handlers_at_load and handlers_at_load[0] >= 1
