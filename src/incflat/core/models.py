from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class IncludeDirective:
    """A recognized ``#include`` line: the raw name and its delimiter form."""
    name: str
    is_quoted: bool

    def __str__(self) -> str:
        return f'"{self.name}"' if self.is_quoted else f'<{self.name}>'


@dataclass(frozen=True)
class SearchConfig:
    """Ordered fallback directories for include resolution, fixed for one run."""
    directories: Tuple[Path, ...] = ()

    @classmethod
    def from_paths(cls, paths: Optional[Iterable[PathLike]]) -> "SearchConfig":
        return cls(directories=tuple(Path(p) for p in (paths or ())))

    def __iter__(self):
        return iter(self.directories)

    def __len__(self) -> int:
        return len(self.directories)


@dataclass
class ExpansionReport:
    root: Optional[Path] = None
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    # Canonical paths in the order they were first entered.
    files: List[Path] = field(default_factory=list)
    skipped: int = 0
    lines_written: int = 0
    max_depth: int = 0

    def add_file(self, path: Path, *, depth: int) -> None:
        self.files.append(path)
        if depth > self.max_depth:
            self.max_depth = depth

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "root": str(self.root) if self.root else None,
                "files": [str(p) for p in self.files],
                "skipped": self.skipped,
                "lines_written": self.lines_written,
                "max_depth": self.max_depth,
                "duration_s": self.duration_s,
            },
            indent=indent,
        )


def as_search_config(dirs: Union[SearchConfig, Sequence[PathLike], None]) -> SearchConfig:
    """Normalize a caller-supplied directory list into a `SearchConfig`."""
    if isinstance(dirs, SearchConfig):
        return dirs
    return SearchConfig.from_paths(dirs)
