from __future__ import annotations

"""Environment-derived settings for the command-line entry point."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from incflat.constants import DEFAULT_ENCODING, ENV_PREFIX


def _flag(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    """Defaults read from ``INCFLAT_*`` variables; CLI flags take precedence."""
    include_path: Tuple[Path, ...] = ()
    json_logs: bool = False
    encoding: str = DEFAULT_ENCODING
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw_path = env.get(f'{ENV_PREFIX}INCLUDE_PATH', '')
        include_path = tuple(Path(p) for p in raw_path.split(os.pathsep) if p)
        return cls(
            include_path=include_path,
            json_logs=_flag(env.get(f'{ENV_PREFIX}JSON_LOGS')),
            encoding=env.get(f'{ENV_PREFIX}ENCODING') or DEFAULT_ENCODING,
            debug=env.get('DEBUG') == '1',
        )
