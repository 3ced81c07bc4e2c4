"""
Pytest fixtures для тестирования детектора
"""
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Generator

import pytest

from file_detector.domain import DetectorConfig
from file_detector.logging_config import setup_logging

# Фиксированные моменты времени для mtime, чтобы не зависеть от разрешения часов ФС
T1 = 1_700_000_000.0
T2 = 1_700_000_060.0
T3 = 1_700_000_120.0


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Root logger через setup_logging() детектора, в выводе pytest только ERROR"""
    setup_logging(level="ERROR", stream=sys.stderr)
    yield


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Возвращает handlers корневого logger'а после setup_logging() в тесте"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def monitored_dir(tmp_path: Path) -> Path:
    """Пустая отслеживаемая папка"""
    folder = tmp_path / "monitored-folder"
    folder.mkdir()
    return folder


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    """Путь к state-файлу (файл не создан)"""
    return tmp_path / "state" / "file-state.json"


@pytest.fixture
def config(monitored_dir: Path, state_file: Path) -> DetectorConfig:
    return DetectorConfig(monitored_folder=str(monitored_dir), state_file=str(state_file))


@pytest.fixture
def make_file(monitored_dir: Path) -> Callable[..., Path]:
    """Создаёт файл заданного размера с явным mtime"""
    def _make(name: str, size: int = 10, mtime: float = T1) -> Path:
        file_path = monitored_dir / name
        file_path.write_bytes(b"x" * size)
        os.utime(file_path, (mtime, mtime))
        return file_path

    return _make
