"""
Спільні дані для тестів VetVax

Невеликий корпус, що покриває всі три стратегії екстракції:
- 101, 105: рядки рахунку
- 102: старі розділи anamneza/terapie
- 103, 104: вільний текст (з назвою / з запереченням)
- 106: некоректна дата візиту (помилка рівня запису)
- 107: звичайна кульгавість без вакцинації
"""

import pytest


SAMPLE_ROWS = [
    {
        "user_id": 1,
        "visit_id": 101,
        "pet_id": 201,
        "visit_date": "2024-01-15",
        "raw_record": {
            "report": "Název: Vakcinace\nPes dostal vakcinaci podle protokolu.",
            "billItems": ["Nobivac Trio inj 1 dávka", "Klinické vyšetření"],
        },
    },
    {
        "user_id": 1,
        "visit_id": 102,
        "pet_id": 202,
        "visit_date": "2005-03-10",
        "raw_record": {
            "report": "Pravidelná návštěva.",
            "sections": {
                "anamneza": "Pes přišel na očkování, bez potíží.",
                "terapie": "Aplikován Biocan DHPPI s.c.",
            },
        },
    },
    {
        "user_id": 2,
        "visit_id": 103,
        "pet_id": 203,
        "visit_date": "2024-02-20",
        "raw_record": {
            "report": "Kontrolní vyšetření, očkování proti vzteklině (rabies).",
        },
    },
    {
        "user_id": 2,
        "visit_id": 104,
        "pet_id": 204,
        "visit_date": "2024-03-01",
        "raw_record": {
            "report": "Běžná kontrola, žádné vakcinace dnes.",
        },
    },
    {
        "user_id": 1,
        "visit_id": 105,
        "pet_id": 201,
        "visit_date": "2024-06-10",
        "raw_record": {
            "report": "Název: Vakcinace\nPřeočkování.",
            "billItems": ["Biocan Novel DHPPI/L4R 1 ml (123456)", "Spotřební materiál"],
        },
    },
    {
        "user_id": 3,
        "visit_id": 106,
        "pet_id": 205,
        "visit_date": "not-a-date",
        "raw_record": {
            "report": "Vakcinace Nobivac.",
        },
    },
    {
        "user_id": 3,
        "visit_id": 107,
        "pet_id": 206,
        "visit_date": "2024-04-04",
        "raw_record": {
            "report": "Kulhání levé přední končetiny.",
        },
    },
]


@pytest.fixture
def sample_rows():
    return [dict(row) for row in SAMPLE_ROWS]


@pytest.fixture
def sample_records(sample_rows):
    from vet_vax.store import validate_rows
    return validate_rows(sample_rows)
