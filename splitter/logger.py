import os
import sys
from pathlib import Path
from loguru import logger

APP_NAME = "TernarySplitter"


def get_log_dir() -> Path:
    """Определяет правильную папку для логов в зависимости от ОС"""
    if sys.platform == "win32":
        # %LOCALAPPDATA%/TernarySplitter/logs
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            base_dir = Path(local_app_data)
        else:
            base_dir = Path.home() / "AppData" / "Local"

        return base_dir / APP_NAME / "logs"

    return Path.home() / f".{APP_NAME.lower()}" / "logs"


def setup_logger(log_dir: Path | None = None) -> Path:
    """
    Настраивает loguru: файл с ротацией + цветная консоль.

    Returns:
        Папка, в которую пишутся логи
    """
    if log_dir is None:
        log_dir = get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Нет прав на запись в домашнюю папку
        log_dir = Path.cwd() / "logs"

    logger.remove()

    # Файл
    try:
        logger.add(
            log_dir / "app_{time:YYYY-MM-DD}.log",
            rotation="1 MB",
            retention=3,
            compression="zip",
            level="INFO",
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"
        )
    except OSError as e:
        if sys.stderr:
            print(f"Failed to setup file logger: {e}", file=sys.stderr)

    # Консоль
    if sys.stderr:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{line}</cyan> - <level>{message}</level>"
        )

    return log_dir
