"""
VetVax — JSON Record Store

Сирі записи з JSON файлу: масив рядків або {"records": [...]}.
Файл читається при кожному запиті в окремому потоці (asyncio.to_thread),
тож цикл подій не блокується, а зміни підхоплюються наступною обробкою.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Union

from vet_vax.schemas import RawVisitRecord

from .base import RecordStore, RecordStoreError, validate_rows

logger = logging.getLogger(__name__)


class JsonRecordStore(RecordStore):
    """Сховище над JSON файлом"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load_rows(self) -> List[Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreError(f"Cannot read records from {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("records")

        if not isinstance(data, list):
            raise RecordStoreError(
                f"Records file {self.path} must contain a list or an object with 'records'"
            )

        return data

    async def fetch_all_raw_records(self) -> List[RawVisitRecord]:
        rows = await asyncio.to_thread(self._load_rows)
        records = validate_rows(rows)
        logger.info(f"📂 Loaded {len(records)}/{len(rows)} valid records from {self.path}")
        return records
