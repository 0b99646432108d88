from __future__ import annotations

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class LineSourceProtocol(Protocol):
    """An open source file yielding lines without their terminator."""

    def __iter__(self) -> Iterator[str]:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class SourceReaderProtocol(Protocol):
    def open(self, path: Path) -> LineSourceProtocol:
        """Open *path* for line reading or raise `SourceReadError`."""
        ...
