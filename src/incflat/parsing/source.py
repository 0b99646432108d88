from __future__ import annotations
"""Directive location model.

Carries the file and 1-based line of an include directive so that the
unresolved-include diagnostic can point at it. The path is kept exactly as
the file was reached (root path as given, nested paths as joined during
resolution) rather than its canonical form.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DirectiveSource:
    """Represents the origin of an include directive.

    Attributes:
        path: Path of the file containing the directive, as it was reached.
        line: 1-based line number in that file.
    """
    path: Optional[Path] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a compact ``path:line N`` label for debug logs."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<unknown>"

    def with_line(self, line: int) -> "DirectiveSource":
        """Return a copy pointing at *line* of the same file."""
        return DirectiveSource(path=self.path, line=line)
