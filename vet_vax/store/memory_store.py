"""
VetVax — In-memory Record Store

Сховище над списком рядків у пам'яті (тести, демо, імпорт з інших джерел).
"""

from typing import Any, Iterable, List

from vet_vax.schemas import RawVisitRecord

from .base import RecordStore, validate_rows


class InMemoryRecordStore(RecordStore):
    """
    Приклад:
        store = InMemoryRecordStore([
            {"user_id": 1, "visit_id": 101, "pet_id": 201,
             "visit_date": "2024-01-15", "raw_record": {"report": "Vakcinace"}},
        ])
        records = await store.fetch_all_raw_records()
    """

    def __init__(self, rows: Iterable[Any] = ()):
        self.rows = list(rows)

    def add_rows(self, rows: Iterable[Any]) -> None:
        self.rows.extend(rows)

    async def fetch_all_raw_records(self) -> List[RawVisitRecord]:
        return validate_rows(self.rows)
