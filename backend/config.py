# backend/config.py

import os
import logging
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "game_config.yaml")


@dataclass
class GameConfig:
    rows: int = 9
    cols: int = 9
    num_mines: int = 10
    tick_interval_seconds: int = 1
    default_player_name: str = "Unknown Player"
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        self._coerce()
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError(
                f"Board must be at least 1x1, got {self.rows}x{self.cols}"
            )
        if self.num_mines < 0 or self.num_mines >= self.rows * self.cols:
            raise InvalidConfigurationError(
                f"Cannot place {self.num_mines} mines on a {self.rows}x{self.cols} board: "
                f"mine count must be below {self.rows * self.cols}"
            )
        if self.tick_interval_seconds <= 0:
            raise InvalidConfigurationError("tick_interval_seconds must be positive")
        return self

    def _coerce(self):
        try:
            self.rows = _whole(self.rows)
            self.cols = _whole(self.cols)
            self.num_mines = _whole(self.num_mines)
            self.tick_interval_seconds = _whole(self.tick_interval_seconds)
            if self.seed is not None:
                self.seed = _whole(self.seed)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidConfigurationError(f"Bad game config value: {exc}") from exc
        self.default_player_name = str(self.default_player_name)


def _whole(value) -> int:
    # YAML may hand back "9" or 9.0; accept those, reject 9.5 and bools
    if isinstance(value, bool):
        raise TypeError(f"expected a whole number, got {value!r}")
    number = int(value)
    if isinstance(value, float) and number != value:
        raise ValueError(f"expected a whole number, got {value!r}")
    return number


def load_config(path: str = DEFAULT_CONFIG_PATH) -> GameConfig:
    """
    Load the `game:` section of a YAML config file.
    Unknown keys are ignored; a missing file gives the defaults.
    """
    raw = {}
    if path and os.path.exists(path):
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
    else:
        logger.info("Config %s not found, using defaults", path)

    section = raw.get("game", {}) or {}
    known = {f.name for f in fields(GameConfig)}
    values = {k: v for k, v in section.items() if k in known}
    return GameConfig(**values).validate()
