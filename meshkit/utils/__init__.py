# meshkit/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger   – готовый объект logging.Logger (с level INFO)
    * Config   – настройки допусков алгоритмов
    * Profiler – замер времени этапов конвейера
"""

from .logger import logger, set_log_level
from .config import Config
from .profiler import Profiler

__all__ = ["logger", "set_log_level", "Config", "Profiler"]
