"""
Настройка логирования для детектора изменений
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Настраивает корневой logger: один handler, текстовый или JSON формат"""
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Получаем корневой logger
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Очищаем существующие handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)

    if json_format:
        # JSON формат для production, поле change из extra попадает в вывод
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            timestamp=True,
            json_ensure_ascii=False,
        )
    else:
        # Читаемый формат для development
        formatter = logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Получить logger для модуля"""
    return logging.getLogger(name)
