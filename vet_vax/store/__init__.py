"""
VetVax — Store модуль

Джерела сирих записів візитів.

Компоненти:
- base: RecordStore (інтерфейс), validate_rows, RecordStoreError
- json_store: JsonRecordStore (JSON файл)
- memory_store: InMemoryRecordStore (список у пам'яті)
"""

from .base import RecordStore, RecordStoreError, validate_rows
from .json_store import JsonRecordStore
from .memory_store import InMemoryRecordStore


__all__ = [
    'RecordStore',
    'RecordStoreError',
    'validate_rows',
    'JsonRecordStore',
    'InMemoryRecordStore',
]
