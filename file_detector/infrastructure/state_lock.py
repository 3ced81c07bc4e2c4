"""
State Lock - защита state-файла от параллельных сканов
Лок-файл с PID рядом со state-файлом, создаётся атомарно через O_EXCL
"""
import os
from typing import Optional

from file_detector.domain import ScanInProgress

import logging
logger = logging.getLogger(__name__)


class StateLock:
    """Эксклюзивная блокировка state-файла на время одного цикла чтение-сравнение-запись"""

    def __init__(self, lock_file: str):
        """
        Args:
            lock_file: Путь к лок-файлу (обычно <state_file>.lock)
        """
        self.lock_file = lock_file
        self._acquired = False

    @property
    def acquired(self) -> bool:
        return self._acquired

    def acquire(self) -> None:
        """
        Создаёт лок-файл с нашим PID.

        Raises:
            ScanInProgress: лок удерживает другой живой процесс
        """
        lock_dir = os.path.dirname(self.lock_file)
        try:
            if lock_dir:
                os.makedirs(lock_dir, exist_ok=True)
            if self._try_create():
                return
        except OSError as e:
            # Папка состояния недоступна для записи: сканируем без лока
            logger.warning(f"⚠️ Cannot create lock file {self.lock_file}, running unlocked: {e}")
            return

        old_pid = self._read_pid()
        if old_pid is not None and self._is_alive(old_pid):
            raise ScanInProgress(self.lock_file, old_pid)

        # Процесс мёртв или лок-файл битый
        logger.warning(f"Removing stale lock file {self.lock_file} (PID: {old_pid})")
        try:
            os.remove(self.lock_file)
        except FileNotFoundError:
            pass

        if not self._try_create():
            # Кто-то успел захватить лок между удалением и созданием
            raise ScanInProgress(self.lock_file, self._read_pid())

    def release(self) -> None:
        """Удаляет лок-файл"""
        if not self._acquired:
            return

        try:
            os.remove(self.lock_file)
            logger.debug(f"Released state lock {self.lock_file}")
        except FileNotFoundError:
            logger.warning(f"Lock file {self.lock_file} vanished before release")
        finally:
            self._acquired = False

    def _try_create(self) -> bool:
        try:
            fd = os.open(self.lock_file, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
        except FileExistsError:
            return False

        with os.fdopen(fd, "w") as f:
            f.write(str(os.getpid()))
        self._acquired = True
        logger.debug(f"Acquired state lock (PID: {os.getpid()}, file: {self.lock_file})")
        return True

    def _read_pid(self) -> Optional[int]:
        try:
            with open(self.lock_file, "r") as f:
                return int(f.read().strip())
        except (ValueError, OSError):
            return None

    @staticmethod
    def _is_alive(pid: int) -> bool:
        if pid == os.getpid():
            return True
        try:
            os.kill(pid, 0)  # Не убивает, просто проверяет существование
        except ProcessLookupError:
            return False
        except PermissionError:
            # Процесс есть, но принадлежит другому пользователю
            return True
        return True

    def __enter__(self):
        """Context manager support"""
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager support"""
        self.release()
