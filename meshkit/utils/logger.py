# meshkit/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.  Все модули пишут в "meshkit".
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("meshkit")


logger = init_logger()


def set_log_level(level) -> None:
    """Уровень можно передать числом или строкой ("DEBUG", "info" ...)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        logger.warning(f"[Logger] Unknown log level {level!r}, keeping {logger.level}")
        return
    logger.setLevel(level)
