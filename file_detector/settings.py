"""
Настройки детектора изменений

Значения берутся из переменных окружения (или .env), у всех есть
значения по умолчанию под docker-монтирование из docker-compose.yml.
Ядро (ChangeDetector) настроек не читает: CLI передаёт ему DetectorConfig.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

from file_detector.domain import DetectorConfig
from file_detector.logging_config import DEFAULT_LOG_FORMAT


class FileDetectorSettings(BaseSettings):
    """Настройки для контейнера детектора"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # === FILE MONITORING ===
    MONITORED_FOLDER: str = "/app/monitored-folder"  # Папка мониторинга (внутри контейнера)
    STATE_FILE: str = "/app/scripts/file-state.json"  # Снимок с прошлого прогона
    LOCK_STATE: bool = True  # Лок-файл рядом со STATE_FILE на время скана

    # === LOGGING ===
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT
    ENVIRONMENT: str = "development"  # production → JSON логи

    @property
    def json_logs(self) -> bool:
        return self.ENVIRONMENT == "production"

    def to_detector_config(self) -> DetectorConfig:
        return DetectorConfig(
            monitored_folder=self.MONITORED_FOLDER,
            state_file=self.STATE_FILE,
            use_lock=self.LOCK_STATE,
        )


settings = FileDetectorSettings()
