"""
Use-case'ы детектора изменений.

=== НАЗНАЧЕНИЕ ===
- ChangeDetector - полный цикл: загрузить состояние, снять снимок,
  сравнить, отчитаться, сохранить новое состояние
- diff_snapshots - чистое сравнение двух снимков
- ChangeReporter - вывод изменений в лог

=== ИСПОЛЬЗОВАНИЕ ===

    from file_detector.application import ChangeDetector
    from file_detector.domain import DetectorConfig

    detect = ChangeDetector(DetectorConfig(
        monitored_folder="/app/monitored-folder",
        state_file="/app/scripts/file-state.json",
    ))
    changes = detect()
    print(changes.as_dict())  # {'created': [...], 'modified': [...], 'deleted': [...]}
"""

from .detector import ChangeDetector, detect_changes, diff_snapshots
from .reporting import ChangeReporter, build_change_record, change_set_to_records

__all__ = [
    "ChangeDetector",
    "detect_changes",
    "diff_snapshots",
    "ChangeReporter",
    "build_change_record",
    "change_set_to_records",
]
