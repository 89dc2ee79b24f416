# ataxx/config.py
from dataclasses import dataclass, field
import os
import tomllib


@dataclass
class SearchConfig:
    depth: int = 4  # plies searched before static evaluation


@dataclass
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "ataxx.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # unknown keys are ignored
        for section in ("search", "web"):
            for k, v in raw.get(section, {}).items():
                target = getattr(cfg, section)
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "ataxx.toml"))
# allow env override of depth for quick debugging
_override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
if _override_depth:
    CONFIG.search.depth = int(_override_depth)
