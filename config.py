"""Load/save startup parameters. Config lives in configs/sand.json; missing keys fall back to defaults."""

import json
import logging
from pathlib import Path

from world.constants import (
    BACKGROUND, FPS, SAND_BLUE, SAND_GREEN, SAND_RED, SCALE, WORLD_HEIGHT, WORLD_WIDTH,
)
from world.palette import Palette

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_FILE = CONFIG_DIR / "sand.json"

logger = logging.getLogger("sand.config")


def load_config(path: Path | str | None = None) -> dict:
    """Read path (default configs/sand.json) merged over defaults. Missing file = defaults."""
    p = Path(path) if path is not None else CONFIG_FILE
    if not p.exists():
        logger.debug("No config at %s, using defaults", p)
        return _default_config()
    with open(p, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"config {p} must be a JSON object")
    logger.info("Loaded config from %s", p)
    return _merge_defaults(data)


def save_config(params: dict, path: Path | str | None = None) -> Path:
    p = Path(path) if path is not None else CONFIG_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(_merge_defaults(params), f, indent=2)
    return p


def palette_from_config(cfg: dict) -> Palette:
    pal = cfg["palette"]
    return Palette(red=tuple(pal["red"]), green=tuple(pal["green"]), blue=tuple(pal["blue"]))


def _default_config() -> dict:
    return {
        "world": {"width": WORLD_WIDTH, "height": WORLD_HEIGHT},
        "scale": SCALE,
        "fps": FPS,
        "seed": -1,
        "background": list(BACKGROUND),
        "palette": {"red": list(SAND_RED), "green": list(SAND_GREEN), "blue": list(SAND_BLUE)},
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    for section in ("world", "palette"):
        if section in data:
            d[section] = {**d[section], **data[section]}
    for k in ("scale", "fps", "seed", "background", "log_level"):
        if k in data:
            d[k] = data[k]
    return d
