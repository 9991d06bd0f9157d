"""
Mint configuration
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .keyset import is_denomination

logger = logging.getLogger(__name__)

DEFAULT_DENOMINATIONS = [1, 2, 4, 8]


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class MintConfig:
    """Denominations the mint signs for, plus logging."""
    denominations: List[int] = field(default_factory=lambda: list(DEFAULT_DENOMINATIONS))
    log: LogConfig = field(default_factory=LogConfig)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.denominations:
            raise ValueError("at least one denomination is required")
        for d in self.denominations:
            if not is_denomination(d):
                raise ValueError(f"invalid denomination: {d!r}")
        if len(set(self.denominations)) != len(self.denominations):
            raise ValueError("duplicate denominations")
        if not isinstance(logging.getLevelName(self.log.level.upper()), int):
            raise ValueError(f"unknown log level: {self.log.level}")

    @classmethod
    def from_dict(cls, data: dict) -> "MintConfig":
        return cls(
            denominations=list(data.get("denominations", DEFAULT_DENOMINATIONS)),
            log=LogConfig(**data.get("log", {})),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: Union[str, Path, None] = None) -> MintConfig:
    """
    Loads a JSON config file. A missing path or file yields the defaults.
    """
    if path is None:
        return MintConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config file %s not found, using defaults", path)
        return MintConfig()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Loaded config from %s", path)
    return MintConfig.from_dict(data)


def setup_logging(config: LogConfig) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file))
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        handlers=handlers,
        force=True,
    )
