from __future__ import annotations
"""
Include path resolution.

Quoted includes (``#include "name"``) are looked up next to the including
file first and fall back to the search directories; angle includes
(``#include <name>``) go straight to the search directories. The first
existing candidate wins.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from incflat.core.interfaces.fs import IncludeResolverProtocol
from incflat.core.models import PathLike, SearchConfig, as_search_config
from incflat.logging.helpers import get_logger, trace_io


class IncludePathResolver(IncludeResolverProtocol):
    """Resolve include names against the including directory and a search path."""

    def __init__(
        self,
        search: Union[SearchConfig, Sequence[PathLike], None] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._search = as_search_config(search)
        self._log = logger or get_logger('resolve')

    @property
    def search(self) -> SearchConfig:
        return self._search

    def candidates(self, name: str, *, is_quoted: bool, current_dir: Path) -> Iterator[Path]:
        """Yield every path tried for *name*, in lookup order."""
        if is_quoted:
            yield current_dir / name
        for directory in self._search:
            yield directory / name

    def resolve(self, name: str, *, is_quoted: bool, current_dir: Path) -> Optional[Path]:
        """Return the first existing candidate for *name*, or None."""
        for candidate in self.candidates(name, is_quoted=is_quoted, current_dir=current_dir):
            if candidate.exists():
                trace_io(self._log, 'resolved include', name=name, path=str(candidate))
                return candidate
        trace_io(self._log, 'include not found', name=name, current_dir=str(current_dir))
        return None
