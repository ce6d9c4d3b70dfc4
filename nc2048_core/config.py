from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_SAVE_FILE = 'nc2048_save.dat'


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from NC2048_* environment variables."""
    save_file: str = DEFAULT_SAVE_FILE
    random_tiles: bool = True
    seed: Optional[int] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            save_file=os.getenv('NC2048_SAVE_FILE') or DEFAULT_SAVE_FILE,
            random_tiles=_env_flag('NC2048_RANDOM_TILES', True),
            seed=_env_int('NC2048_SEED'),
            debug=_env_flag('NC2048_DEBUG', False),
        )
