"""
VetVax — Record Store

Інтерфейс сховища сирих записів візитів та валідація рядків на вході.

Невалідні рядки відкидаються з попередженням (з visit_id), решта
повертається як RawVisitRecord. Помилка читання самого сховища
піднімається як RecordStoreError.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from vet_vax.schemas import RawVisitRecord

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Сховище недоступне або повернуло некоректні дані"""


def validate_rows(rows: Iterable[Any]) -> List[RawVisitRecord]:
    """
    Провалідувати сирі рядки сховища.

    Returns:
        Лише валідні записи у вихідному порядку
    """
    records = []

    for row in rows:
        try:
            records.append(RawVisitRecord.model_validate(row))
        except ValidationError as e:
            visit_id = row.get("visit_id") if isinstance(row, Mapping) else None
            logger.warning(
                f"⚠️ Invalid record format for visit_id {visit_id}: "
                f"{e.error_count()} validation error(s)"
            )

    return records


class RecordStore(ABC):
    """
    Джерело сирих записів.

    Всі методи асинхронні: читання сховища є єдиною точкою очікування.
    """

    @abstractmethod
    async def fetch_all_raw_records(self) -> List[RawVisitRecord]:
        """Всі валідні записи"""

    async def fetch_raw_records_by_animal_ids(self, animal_ids: Iterable[int]) -> List[RawVisitRecord]:
        """Записи для набору тварин"""
        wanted = set(animal_ids)
        records = await self.fetch_all_raw_records()
        return [record for record in records if record.animal_id in wanted]

    async def fetch_raw_records_by_animal_id(self, animal_id: int) -> List[RawVisitRecord]:
        """Записи однієї тварини, впорядковані за датою візиту"""
        records = await self.fetch_raw_records_by_animal_ids([animal_id])
        return sorted(records, key=lambda record: record.visit_date)

    async def get_unique_animal_ids(self) -> List[int]:
        """Унікальні id тварин за зростанням"""
        records = await self.fetch_all_raw_records()
        return sorted({record.animal_id for record in records})

    async def test_connection(self) -> bool:
        """Чи доступне сховище"""
        try:
            await self.fetch_all_raw_records()
        except RecordStoreError as e:
            logger.error(f"❌ Record store connection failed: {e}")
            return False
        return True
