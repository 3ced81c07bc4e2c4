"""
Тесты для File Detector.

=== НАЗНАЧЕНИЕ ===
Pytest-набор тестов для проверки компонентов:
- test_formatting.py - размеры и временные метки
- test_models.py - FileRecord, ChangeEntry, ChangeSet
- test_scanner.py - снимок папки
- test_state_store.py - state-файл
- test_state_lock.py - лок state-файла
- test_detector.py - цикл детектирования и сценарии
- test_reporting.py - записи об изменениях
- test_settings.py, test_main.py - настройки и CLI

=== ЗАПУСК ===

    # Все тесты
    pytest

    # Конкретный файл
    pytest tests/test_detector.py -v

=== КОНФИГУРАЦИЯ ===
См. pyproject.toml ([tool.pytest.ini_options]) и conftest.py для fixtures.
"""
