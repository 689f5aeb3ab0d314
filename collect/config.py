from dataclasses import dataclass, asdict, fields, replace
import logging
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectConfig:
    """process-wide defaults, overridden per call by explicit strict= arguments"""
    strict_numeric: bool = False  # max/min/sum raise on non-numeric values
    strict_contains: bool = False  # contains compares type and value


_config = CollectConfig()


def get_config() -> CollectConfig:
    return _config


def configure(**overrides: Any) -> CollectConfig:
    """replace selected defaults. unknown option names raise TypeError."""
    global _config
    known = {f.name for f in fields(CollectConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"unknown collect option(s): {', '.join(unknown)}")
    _config = replace(_config, **overrides)
    logger.debug(f"config: {asdict(_config)}")
    return _config


def reset_config() -> CollectConfig:
    """restore the defaults"""
    global _config
    _config = CollectConfig()
    return _config


def resolve_strict(strict: Any, option: str) -> bool:
    """an explicit strict flag wins, None falls back to the configured option"""
    if strict is None:
        return bool(getattr(_config, option))
    return bool(strict)


