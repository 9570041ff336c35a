#!/usr/bin/env python3
"""
VetVax — Офлайн обробка записів

Один повний прохід обробки над JSON файлом записів з друком статистики
та (опційно) експортом вивчених патернів.

Запуск:
    python scripts/process_records.py --records data/records.json
    python scripts/process_records.py --records data/records.json --export-patterns patterns.json
    python scripts/process_records.py --records data/new.json --import-patterns patterns.json
"""

import sys
import json
import asyncio
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vet_vax.config import get_default_config, load_config
from vet_vax.logging_config import setup_logging
from vet_vax.service import VaccinationCacheService
from vet_vax.store import JsonRecordStore


async def run(args) -> int:
    config = load_config(args.config) if args.config else get_default_config()
    if args.progress:
        config.processing.show_progress = True

    setup_logging(args.log_level or config.log_level, config.log_file)

    service = VaccinationCacheService(JsonRecordStore(args.records), config=config)

    # Імпорт до обробки: екстрактор стає READY і не навчається на корпусі
    if args.import_patterns:
        with open(args.import_patterns, 'r', encoding='utf-8') as f:
            service.import_learned_patterns(json.load(f))
        print(f"📥 Patterns imported from {args.import_patterns}")

    result = await service.process_all_records()

    print("\n" + "=" * 60)
    print("📊 РЕЗУЛЬТАТИ ОБРОБКИ")
    print("=" * 60)
    print(f"   Записів:       {result.total_records}")
    print(f"   Вакцинацій:    {result.total_vaccinations}")
    print(f"   Тварин:        {result.processed_animals}")
    print(f"   Час:           {result.processing_time:.0f} ms")

    stats = service.get_extraction_stats()
    print(f"\n🧠 Вивчено назв: {stats.vaccine_names}, фраз: {stats.context_patterns}")
    for item in stats.top_vaccines:
        print(f"   {item.name:<35} {item.frequency}")

    if args.show_animals:
        print("\n🐾 Тварини:")
        for summary in await service.get_animals_with_latest_vaccination():
            latest = (
                f"{summary.latest_vaccine_name} ({summary.latest_vaccination_date:%Y-%m-%d})"
                if summary.latest_vaccination_date else "—"
            )
            print(f"   {summary.animal_id:>8}  {summary.total_vaccinations:>3}  {latest}")

    if args.export_patterns:
        output = Path(args.export_patterns)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(
                service.export_learned_patterns().model_dump(by_alias=True),
                f,
                ensure_ascii=False,
                indent=2
            )
        print(f"\n💾 Patterns exported to {output}")

    print("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(description='VetVax — offline processing')
    parser.add_argument('--records', required=True, help='JSON файл із сирими записами')
    parser.add_argument('--config', help='YAML конфігурація')
    parser.add_argument('--export-patterns', help='Куди зберегти вивчені патерни (JSON)')
    parser.add_argument('--import-patterns', help='Вивчені патерни для імпорту (JSON)')
    parser.add_argument('--show-animals', action='store_true', help='Вивести таблицю тварин')
    parser.add_argument('--progress', action='store_true', help='tqdm progress bar')
    parser.add_argument('--log-level', help='Рівень логування (INFO, DEBUG, ...)')

    args = parser.parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
