"""Configuration helpers for the intersection engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Numeric tolerances used by the boundary intersection engine."""

    # |cross| at or below this counts as parallel
    parallel_eps: float = 1e-12
    # slack on segment parameters so hits on corners are not lost
    extent_eps: float = 1e-9


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)


__all__ = ["EngineConfig", "get_engine_config", "set_engine_config"]
