"""
VetVax — Схема сирого запису візиту

RawVisitRecord приймає обидві форми рядка зі сховища:
- вкладену: {user_id, visit_id, pet_id, visit_date, raw_record: {report, sections, billItems}}
- плоску:   {user_id, visit_id, animal_id, visit_date, report, sections, billing_items}

Запис незмінний після валідації.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class RawVisitRecord(BaseModel):
    """
    Сирий запис ветеринарного візиту.

    Приклад:
        record = RawVisitRecord.model_validate({
            "user_id": 1,
            "visit_id": 101,
            "pet_id": 201,
            "visit_date": "2024-01-15",
            "raw_record": {
                "report": "Název: Vakcinace",
                "billItems": ["Nobivac Trio inj 1 dávka"]
            }
        })
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: int
    visit_id: int
    animal_id: int = Field(..., alias="pet_id", description="ID тварини")
    visit_date: str = Field(..., description="Дата візиту (ISO рядок)")
    report: str = Field(..., description="Вільний текст звіту (може бути порожнім)")
    sections: Optional[Dict[str, str]] = Field(
        default=None,
        description="Іменовані розділи старого формату (anamneza, terapie, ...)"
    )
    billing_items: List[str] = Field(
        default_factory=list,
        alias="billItems",
        description="Рядки рахунку у вихідному порядку"
    )

    @model_validator(mode="before")
    @classmethod
    def flatten_raw_record(cls, data: Any) -> Any:
        """Розгорнути вкладений raw_record у плоскі поля"""
        if not isinstance(data, dict) or "raw_record" not in data:
            return data

        body = data["raw_record"]
        if not isinstance(body, dict):
            raise ValueError("raw_record must be an object")

        flat = {k: v for k, v in data.items() if k != "raw_record"}
        flat.update(body)
        return flat
