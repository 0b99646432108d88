from __future__ import annotations

"""Error taxonomy for include expansion.

Every failure aborts the whole run. The boolean driver API converts these
into a ``False`` outcome; `Preprocessor.expand` lets them propagate.
"""

from pathlib import Path
from typing import Optional

from incflat.constants import UNKNOWN_INCLUDE_FMT
from incflat.parsing.source import DirectiveSource


class IncflatError(Exception):
    """Base class for all expansion failures."""


class IncludeNotFoundError(IncflatError):
    """An include directive names a file found neither locally nor on the search path.

    ``str(exc)`` is the exact user-facing diagnostic.
    """

    def __init__(self, name: str, source: DirectiveSource) -> None:
        self.name = name
        self.source = source
        super().__init__(
            UNKNOWN_INCLUDE_FMT.format(name=name, path=source.path, line=source.line)
        )


class SourceReadError(IncflatError):
    """The root file or an included file could not be opened or decoded."""

    def __init__(self, path: Path, reason: Optional[str] = None) -> None:
        self.path = path
        msg = f'cannot read {path}'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)


class OutputWriteError(IncflatError):
    """The output destination could not be created or truncated."""

    def __init__(self, path: Path, reason: Optional[str] = None) -> None:
        self.path = path
        msg = f'cannot write {path}'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)
