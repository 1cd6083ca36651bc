# draughts/config.py
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
import os
import tomllib  # python >=3.11

SCORING_TYPES = ("Number", "NumberAndPotential")


@dataclass
class BotConfig:
    no_random: bool = False
    scoring_type: str = "NumberAndPotential"  # "Number" | "NumberAndPotential"
    optimization: str = "O1"  # "O0" disables alpha-beta pruning
    is_light_bot: bool = False
    is_dark_bot: bool = True
    light_bot_level: int = 3
    dark_bot_level: int = 3


@dataclass
class SearchConfig:
    max_depth: int = 3


@dataclass
class GameConfig:
    max_num_turns: int = 150


@dataclass
class UIConfig:
    engine_name: str = "Draughts"
    api_port: int = 8000


# (section, key) as used in config files -> (dataclass attribute, field)
_KEYS: Dict[Tuple[str, str], Tuple[str, str]] = {
    ("Bot", "NoRandom"): ("bot", "no_random"),
    ("Bot", "BotScoringType"): ("bot", "scoring_type"),
    ("Bot", "Optimization"): ("bot", "optimization"),
    ("Bot", "IsLightBot"): ("bot", "is_light_bot"),
    ("Bot", "IsDarkBot"): ("bot", "is_dark_bot"),
    ("Bot", "LightBotLevel"): ("bot", "light_bot_level"),
    ("Bot", "DarkBotLevel"): ("bot", "dark_bot_level"),
    ("Bot", "MaxDepth"): ("search", "max_depth"),
    ("Game", "MaxNumTurns"): ("game", "max_num_turns"),
}


def _resolve(section: str, key: str) -> Tuple[str, str]:
    try:
        return _KEYS[(section, key)]
    except KeyError:
        raise KeyError(f"unknown setting {section}.{key}") from None


@dataclass
class Config:
    bot: BotConfig = field(default_factory=BotConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    def __call__(self, section: str, key: str) -> Any:
        """String-keyed lookup, e.g. ``config("Bot", "NoRandom")``."""
        group, name = _resolve(section, key)
        return getattr(getattr(self, group), name)

    def set(self, section: str, key: str, value: Any) -> None:
        group, name = _resolve(section, key)
        setattr(getattr(self, group), name, value)

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "Config":
        cfg = Config()
        # naive merge: unknown sections and keys are ignored
        for section, values in raw.items():
            if not isinstance(values, dict):
                if section == "log_level":
                    cfg.log_level = str(values)
                continue
            for k, v in values.items():
                if (section, k) in _KEYS:
                    cfg.set(section, k, v)
        return cfg

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        if not os.path.exists(path):
            return Config()
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        return Config.from_dict(raw)


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("DRAUGHTS_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("DRAUGHTS_SEARCH_DEPTH")
if override_depth and override_depth.isdigit():
    CONFIG.search.max_depth = int(override_depth)
