# rollerball/config.py
from dataclasses import dataclass, field
from typing import Dict
import logging
import os
import tomllib  # python >=3.11

logger = logging.getLogger(__name__)

# Defaults (material units)
PIECE_VALUES = {
    "PAWN": 1,
    "KNIGHT": 3,
    "ROOK": 5,
    "KING": 1000,
}

@dataclass
class SearchConfig:
    depth: int = 2
    use_alpha_beta: bool = True  # False runs plain exhaustive minimax

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())

@dataclass
class UIConfig:
    engine_name: str = "Rollerball"
    think_delay_ms: int = 500  # pause before the engine replies in the CLI

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "rollerball.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if not hasattr(target, k):
                    continue
                if k == "piece_values":
                    # partial tables only override the pieces they name
                    v = {**PIECE_VALUES, **{name.upper(): val for name, val in v.items()}}
                setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ROLLERBALL_CONFIG_TOML", "rollerball.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("ROLLERBALL_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("Ignoring ROLLERBALL_SEARCH_DEPTH=%r (not an integer)", override_depth)
