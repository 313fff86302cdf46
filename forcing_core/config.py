# forcing_core/config.py
from __future__ import annotations
import os
import textwrap
import yaml

from .models import AppConfig

# ===== App defaults =====
DEFAULT_CONFIG = {
    "default_target": 100,
    "default_variance": 0.5,       # 0 = similar numbers, 1 = varied numbers
    "cell_width": 4,
    "random_seed": None,           # None -> fresh entropy per generation
}

DEFAULT_CONFIG_YAML = textwrap.dedent("""\
default_target: 100
default_variance: 0.5
cell_width: 4
random_seed: null
""")


def ensure_config_exists(path: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_YAML)


def load_app_config(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"Config {path} must be a mapping of settings.")
    merged = dict(DEFAULT_CONFIG)
    merged.update(obj)
    return AppConfig(**merged)


def save_app_config(path: str, config: AppConfig) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.model_dump(), f, sort_keys=False)
