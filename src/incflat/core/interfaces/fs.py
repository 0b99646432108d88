from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IncludeResolverProtocol(Protocol):
    def resolve(self, name: str, *, is_quoted: bool, current_dir: Path) -> Optional[Path]:
        ...
