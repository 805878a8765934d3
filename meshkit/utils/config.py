"""
Загрузчик/сохранитель настроек (допуски алгоритмов) в формате JSON.
Если файл не найден – используются настройки по‑умолчанию, на диск
ничего не пишется, пока не вызван save().
"""

import json
import os
from pathlib import Path
from meshkit.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    # порог вырожденности треугольника, относительно диагонали bbox
    "degenerate_face_epsilon": 1e-7,
    # синус угла между рёбрами UV, ниже которого вклад треугольника в тангенс пропускается
    "tangent_det_epsilon": 1e-6,
    # шаг вдоль кривой для построения базиса torus‑knot
    "curve_step": 0.01,
    "log_level": "INFO",
}

CONFIG_ENV = "MESHKIT_CONFIG"


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            if path is None:
                path = os.environ.get(CONFIG_ENV, "meshkit.json")
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить singleton (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = dict(DEFAULT_CONFIG)
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data.update(loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config {self.path}: {exc}")
                self.data = dict(DEFAULT_CONFIG)
        else:
            logger.debug(f"[Config] No config file {self.path} – using defaults.")
        set_log_level(self.data.get("log_level", DEFAULT_CONFIG["log_level"]))

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info(f"[Config] Configuration saved to {self.path}.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        if key == "log_level":
            set_log_level(value)

    def get(self, key, default=None):
        return self.data.get(key, default)
