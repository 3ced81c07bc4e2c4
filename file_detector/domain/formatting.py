"""Человекочитаемые размеры и временные метки для снимков и отчётов."""

from datetime import datetime, timezone
from typing import Optional

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
SIZE_BASE = 1024


def format_bytes(size: int) -> str:
    """
    Форматирует размер в байтах: 0 → '0 Bytes', 1536 → '1.5 KB', 1048576 → '1 MB'.

    Значение округляется до 2 знаков, хвостовые нули отбрасываются.
    """
    if size == 0:
        return "0 Bytes"

    value = float(size)
    unit = 0
    while value >= SIZE_BASE and unit < len(SIZE_UNITS) - 1:
        value /= SIZE_BASE
        unit += 1

    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {SIZE_UNITS[unit]}"


def format_size_delta(delta: int) -> str:
    """Изменение размера со знаком: +10 Bytes, -1.5 KB, 0 Bytes."""
    if delta > 0:
        return f"+{format_bytes(delta)}"
    if delta < 0:
        return f"-{format_bytes(abs(delta))}"
    return format_bytes(0)


def format_timestamp(epoch_seconds: Optional[float]) -> Optional[str]:
    """Unix-время → ISO-8601 UTC с миллисекундами и суффиксом Z."""
    if epoch_seconds is None:
        return None
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
