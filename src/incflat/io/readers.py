from __future__ import annotations

"""
Line readers for source files.

`TextSourceReader.open` returns an open `LineSource`; the caller drains it
and closes it. Both open and decode failures surface as `SourceReadError`.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO

from incflat.constants import DEFAULT_ENCODING
from incflat.core.errors import SourceReadError
from incflat.core.interfaces.readers import SourceReaderProtocol
from incflat.logging.helpers import get_logger, trace_io


class LineSource:
    """An open text file yielding its lines without the trailing newline.

    Lines end at LF only; a CR (lone or before the LF) stays part of the line.
    """

    def __init__(self, path: Path, fp: TextIO) -> None:
        self.path = path
        self._fp = fp

    def __iter__(self) -> Iterator[str]:
        try:
            # newline="" still splits at a lone \r; glue such pieces back together.
            pending = ''
            for piece in self._fp:
                if piece.endswith('\n'):
                    yield pending + piece[:-1]
                    pending = ''
                else:
                    pending += piece
            if pending:
                yield pending
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(self.path, str(exc)) from exc

    def close(self) -> None:
        self._fp.close()


class TextSourceReader(SourceReaderProtocol):
    def __init__(
        self,
        *,
        encoding: str = DEFAULT_ENCODING,
        errors: str = 'strict',
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._encoding = encoding
        self._errors = errors
        self._log = logger or get_logger('io.readers')

    def open(self, path: Path) -> LineSource:
        try:
            fp = path.open('r', encoding=self._encoding, errors=self._errors, newline='')
        except OSError as exc:
            self._log.debug('could not open %s (%s)', path, exc)
            raise SourceReadError(path, exc.strerror or str(exc)) from exc
        trace_io(self._log, 'opened source', path=str(path), encoding=self._encoding)
        return LineSource(path, fp)
