import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"
CONFIG_ENV_VAR = "TYPEID_CONFIG"


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="WARN"):
        self.level = level


class OutputConfig:
    __slots__ = ("indent", "default_prefix")

    def __init__(self, indent=None, default_prefix=""):
        self.indent = indent
        self.default_prefix = default_prefix


class Config:
    __slots__ = ("logging", "output")

    def __init__(self, logging=None, output=None):
        self.logging = logging or LoggingConfig()
        self.output = output or OutputConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            LoggingConfig(**d.get("logging", {})),
            OutputConfig(**d.get("output", {})),
        )


def load_config(path=None):
    """Load config from ``path``, then $TYPEID_CONFIG, then the packaged default."""
    if path:
        config_path = Path(path)
    elif os.environ.get(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    else:
        config_path = _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
