"""
VetVax — Налаштування логування

Всі модулі отримують логер через logging.getLogger(__name__) у просторі
імен "vet_vax". setup_logging() підключає консольний (і за потреби файловий)
обробник лише один раз; повторний виклик змінює рівень і може
додати файловий обробник.

Приклад:
    from vet_vax.logging_config import setup_logging
    setup_logging("DEBUG", log_file="logs/vet_vax.log")
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "vet_vax"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Налаштувати логер пакету.

    Args:
        level: Рівень логування ("INFO", "DEBUG" або logging.*)
        log_file: Шлях до файлу логів (опційно)

    Returns:
        Кореневий логер пакету
    """
    logger = logging.getLogger(LOGGER_NAME)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Повторний виклик не дублює обробники
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        path = Path(os.path.abspath(log_file))
        attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path)
            for handler in logger.handlers
        )
        if not attached:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
