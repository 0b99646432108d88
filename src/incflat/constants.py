from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Exact shape of the unresolved-include diagnostic. Tests compare against it verbatim.
UNKNOWN_INCLUDE_FMT: str = 'unknown include file {name} at file {path} at line {line}'

DEFAULT_ENCODING: str = 'utf-8'

# Written after every copied line; directive lines contribute nothing.
LINE_TERMINATOR: str = '\n'

ENV_PREFIX: str = 'INCFLAT_'
