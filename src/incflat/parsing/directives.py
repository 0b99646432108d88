from __future__ import annotations

import logging
import re
from typing import Optional

from incflat.core.models import IncludeDirective

# Anchored on both ends: anything besides whitespace around the directive
# turns the line back into plain content.
_INCLUDE_RE = re.compile(
    r'\s*#\s*include\s*(?:"(?P<quoted>[^>"]*)"|<(?P<angle>[^>"]*)>)\s*'
)


class IncludeDirectiveParser:
    """Recognizes ``#include "name"`` and ``#include <name>`` lines."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or logging.getLogger("incflat.directives")

    def parse_line(self, line: str) -> Optional[IncludeDirective]:
        """Return the directive carried by *line*, or None for plain content.

        A trailing newline is ignored; any other trailing text after the
        closing delimiter disqualifies the line.
        """
        m = _INCLUDE_RE.fullmatch(line.rstrip("\n"))
        if m is None:
            return None
        quoted = m.group("quoted")
        if quoted is not None:
            directive = IncludeDirective(name=quoted, is_quoted=True)
        else:
            directive = IncludeDirective(name=m.group("angle"), is_quoted=False)
        self._log.debug("directive %s", directive)
        return directive
