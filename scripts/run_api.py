#!/usr/bin/env python3
"""
VetVax — Запуск API сервера

Запуск:
    python scripts/run_api.py --records data/records.json
    python scripts/run_api.py --records data/records.json --port 8080
    python scripts/run_api.py --config configs/vetvax.yaml --patterns patterns.json
"""

import sys
import os
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn


def main():
    parser = argparse.ArgumentParser(description='VetVax API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--records', help='JSON файл із сирими записами візитів')
    parser.add_argument('--config', help='YAML конфігурація VetVax')
    parser.add_argument('--patterns', help='JSON експорт вивчених патернів для імпорту')
    parser.add_argument('--log-level', default='INFO', help='Рівень логування VetVax (default: INFO)')

    args = parser.parse_args()

    # Налаштування передаються в app через environment
    if args.records:
        os.environ["VETVAX_RECORDS_PATH"] = args.records
    if args.config:
        os.environ["VETVAX_CONFIG_PATH"] = args.config
    if args.patterns:
        os.environ["VETVAX_PATTERNS_PATH"] = args.patterns
    os.environ["VETVAX_LOG_LEVEL"] = args.log_level

    print("=" * 60)
    print("💉 VetVax — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Records: {args.records or '(none)'}")
    print("=" * 60)

    # Запускаємо сервер (один процес: кеш живе в пам'яті)
    uvicorn.run(
        "vet_vax.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
