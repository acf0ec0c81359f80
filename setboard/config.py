from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

SEED_ENV = "SETBOARD_SEED"
LOG_LEVEL_ENV = "SETBOARD_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    # Fixed shuffle seed for reproducible games; None means system entropy.
    seed: int | None = None
    log_level: str = "INFO"


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_dotenv_if_present(env_path: Path | None = None) -> bool:
    """Load a ``.env`` file without overriding variables already set."""

    path = env_path or _project_root() / ".env"
    if not path.exists():
        return False

    from dotenv import load_dotenv

    return load_dotenv(dotenv_path=path, override=False)


def get_seed() -> int | None:
    raw = os.environ.get(SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{LOG_LEVEL_ENV} is not a logging level: {level!r}")
    return level


def load_config(*, env_path: Path | None = None) -> EngineConfig:
    load_dotenv_if_present(env_path)
    return EngineConfig(seed=get_seed(), log_level=get_log_level())
