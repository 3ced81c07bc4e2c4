#!/usr/bin/env python3
"""
File Detector - разовый скан отслеживаемой папки

Запускается внешним планировщиком (cron, n8n и т.п.), сам по себе не зацикливается.

Коды выхода:
    0 - скан завершён (с изменениями или без)
    1 - отслеживаемая папка недоступна
    3 - state-файл заблокирован параллельным сканом
    4 - непредвиденная ошибка
"""
import argparse
import json
import os
import platform
import sys
import time
from dataclasses import replace
from typing import List, Optional

from file_detector.application import ChangeDetector, change_set_to_records
from file_detector.domain import DirectoryUnavailable, ScanInProgress
from file_detector.logging_config import get_logger, setup_logging
from file_detector.settings import settings

logger = get_logger("file-detector")

EXIT_OK = 0
EXIT_DIRECTORY_UNAVAILABLE = 1
EXIT_SCAN_IN_PROGRESS = 3
EXIT_INTERNAL_ERROR = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="file-detector",
        description="Detect created, modified and deleted files since the previous scan",
    )
    parser.add_argument("--folder", help=f"Monitored folder (default: {settings.MONITORED_FOLDER})")
    parser.add_argument("--state-file", help=f"State file (default: {settings.STATE_FILE})")
    parser.add_argument("--log-level", help=f"Log level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--no-lock", action="store_true", help="Do not lock the state file during the scan")
    parser.add_argument("--json", action="store_true", help="Print change records as JSON to stdout")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Один цикл детектирования, возвращает код выхода"""
    args = parse_args(argv)

    config = settings.to_detector_config()
    config = replace(
        config,
        monitored_folder=args.folder or config.monitored_folder,
        state_file=args.state_file or config.state_file,
        use_lock=config.use_lock and not args.no_lock,
    )
    log_level = args.log_level or settings.LOG_LEVEL

    # В режиме --json stdout занят результатом, логи уходят в stderr
    setup_logging(
        level=log_level,
        log_format=settings.LOG_FORMAT,
        json_format=settings.json_logs,
        stream=sys.stderr if args.json else sys.stdout,
    )

    start_time = time.monotonic()
    logger.info("🚀 File Detector Started")
    logger.debug(
        f"Environment: python={platform.python_version()} platform={sys.platform} "
        f"cwd={os.getcwd()} folder={config.monitored_folder} "
        f"state_file={config.state_file} lock={config.use_lock} log_level={log_level}"
    )

    try:
        changes = ChangeDetector(config)()
        if args.json:
            print(json.dumps(change_set_to_records(changes), ensure_ascii=False, indent=2))
    except DirectoryUnavailable as e:
        logger.error(f"❌ {e}")
        return EXIT_DIRECTORY_UNAVAILABLE
    except ScanInProgress as e:
        logger.error(f"❌ {e}")
        return EXIT_SCAN_IN_PROGRESS
    except Exception as e:
        logger.error(f"❌ Scan failed: {e}", exc_info=True)
        return EXIT_INTERNAL_ERROR

    duration_ms = (time.monotonic() - start_time) * 1000
    logger.info(f"🏁 File Detector Completed in {duration_ms:.0f}ms")
    return EXIT_OK


def run() -> None:
    """Точка входа console script"""
    sys.exit(main())


if __name__ == "__main__":
    run()
