from __future__ import annotations

from incflat.core.errors import (
    IncflatError,
    IncludeNotFoundError,
    OutputWriteError,
    SourceReadError,
)
from incflat.core.models import ExpansionReport, IncludeDirective, SearchConfig
from incflat.expansion.expander import Preprocessor, preprocess
from incflat.parsing.directives import IncludeDirectiveParser
from incflat.parsing.source import DirectiveSource
from incflat.resolution.path_resolver import IncludePathResolver

__version__ = '1.0.0'


__all__ = [
    'preprocess',
    'Preprocessor',
    'IncludeDirectiveParser',
    'IncludePathResolver',
    'IncludeDirective',
    'SearchConfig',
    'ExpansionReport',
    'DirectiveSource',
    'IncflatError',
    'IncludeNotFoundError',
    'SourceReadError',
    'OutputWriteError',
]
