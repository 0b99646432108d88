from __future__ import annotations

"""
Recursive include expansion.

`Preprocessor` walks the root file line by line, copies plain lines to the
output sink and replaces every include directive with the expansion of the
file it names. Nesting is tracked with an explicit stack of open frames, so
include depth is bounded by the input only.

Each file is entered at most once per run: its canonical path goes into the
visited set before it is opened, and any later include of it writes nothing.
All per-run state lives in `_ExpansionRun`, so one `Preprocessor` can serve
independent runs.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, TextIO, Union

from incflat.constants import DEFAULT_ENCODING, LINE_TERMINATOR
from incflat.core.errors import IncflatError, IncludeNotFoundError, OutputWriteError, SourceReadError
from incflat.core.interfaces.fs import IncludeResolverProtocol
from incflat.core.interfaces.readers import LineSourceProtocol, SourceReaderProtocol
from incflat.core.models import ExpansionReport, PathLike, SearchConfig, as_search_config
from incflat.io.readers import TextSourceReader
from incflat.logging.helpers import get_logger
from incflat.parsing.directives import IncludeDirectiveParser
from incflat.parsing.source import DirectiveSource
from incflat.resolution.path_resolver import IncludePathResolver


@dataclass
class _Frame:
    """One file being expanded; `path` is kept as reached for diagnostics."""
    path: Path
    origin: DirectiveSource
    source: LineSourceProtocol
    lines: Iterator[str]
    current_dir: Path
    line_no: int = 0


class _ExpansionRun:
    """Visited set, frame stack and report for a single top-level expansion."""

    def __init__(self, owner: "Preprocessor", root: Path, sink: TextIO) -> None:
        self._owner = owner
        self._sink = sink
        self._visited: Set[Path] = set()
        self._frames: List[_Frame] = []
        self.report = ExpansionReport(root=root)

    def execute(self) -> ExpansionReport:
        try:
            self._enter(self.report.root)
            while self._frames:
                frame = self._frames[-1]
                line = next(frame.lines, None)
                if line is None:
                    self._frames.pop().source.close()
                    continue
                frame.line_no += 1
                directive = self._owner.parser.parse_line(line)
                if directive is None:
                    self._write(line)
                    continue
                target = self._owner.resolver.resolve(
                    directive.name,
                    is_quoted=directive.is_quoted,
                    current_dir=frame.current_dir,
                )
                where = frame.origin.with_line(frame.line_no)
                if target is None:
                    exc = IncludeNotFoundError(directive.name, where)
                    self._owner.log.error(
                        '%s', exc,
                        extra={'context': {
                            'include': directive.name,
                            'file': str(where.path),
                            'line': where.line,
                        }},
                    )
                    raise exc
                self._enter(target, where)
        finally:
            while self._frames:
                self._frames.pop().source.close()
            self.report.finish()
        return self.report

    def _enter(self, path: Path, where: Optional[DirectiveSource] = None) -> None:
        try:
            canonical = path.resolve()
        except (OSError, RuntimeError) as exc:
            raise SourceReadError(path, str(exc)) from exc
        if canonical in self._visited:
            self.report.skipped += 1
            self._owner.log.debug('%s: %s already expanded, skipped', where.format() if where else '<root>', path)
            return
        self._visited.add(canonical)
        source = self._owner.reader.open(path)
        self.report.add_file(canonical, depth=len(self._frames))
        self._frames.append(
            _Frame(
                path=path,
                origin=DirectiveSource(path=path),
                source=source,
                lines=iter(source),
                current_dir=path.parent,
            )
        )

    def _write(self, line: str) -> None:
        try:
            self._sink.write(line + LINE_TERMINATOR)
        except OSError as exc:
            raise OutputWriteError(Path(getattr(self._sink, 'name', '<stream>')), str(exc)) from exc
        self.report.lines_written += 1


class Preprocessor:
    """Flattens ``#include`` directives of a root file into one text stream.

    Args:
        search_directories: Ordered fallback directories for include lookup.
        encoding: Encoding of source files and of the output file.
        errors: Decoding error policy passed to `open` for source files.
        logger: Optional logger; defaults to ``incflat.expand``.
        parser, resolver, reader: Collaborator overrides, mainly for tests.
    """

    def __init__(
        self,
        search_directories: Union[SearchConfig, Sequence[PathLike], None] = None,
        *,
        encoding: str = DEFAULT_ENCODING,
        errors: str = 'strict',
        logger: Optional[logging.Logger] = None,
        parser: Optional[IncludeDirectiveParser] = None,
        resolver: Optional[IncludeResolverProtocol] = None,
        reader: Optional[SourceReaderProtocol] = None,
    ) -> None:
        self.search = as_search_config(search_directories)
        self.encoding = encoding
        self.log = logger or get_logger('expand')
        self.parser = parser or IncludeDirectiveParser(logger=get_logger('directives'))
        self.resolver = resolver or IncludePathResolver(self.search)
        self.reader = reader or TextSourceReader(encoding=encoding, errors=errors)

    def expand(self, input_path: PathLike, sink: TextIO) -> ExpansionReport:
        """Write the expansion of *input_path* to *sink*.

        Raises:
            IncludeNotFoundError: A directive could not be resolved.
            SourceReadError: An input file could not be opened or decoded.
            OutputWriteError: Writing to *sink* failed.
        """
        report = _ExpansionRun(self, Path(input_path), sink).execute()
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug('expansion report: %s', report.to_json(indent=None))
        return report

    def expand_to_string(self, input_path: PathLike) -> str:
        buf = io.StringIO()
        self.expand(input_path, buf)
        return buf.getvalue()

    def run(self, input_path: PathLike, output_path: PathLike) -> bool:
        """Expand *input_path* into *output_path*; return True on full success.

        The output is created or truncated first. On failure it may hold a
        partial expansion.
        """
        out = Path(output_path)
        try:
            with self.open_output(out) as sink:
                self.expand(input_path, sink)
        except IncflatError as exc:
            self.log.debug('expansion of %s failed: %s', input_path, exc)
            return False
        return True

    def open_output(self, path: Path) -> TextIO:
        try:
            return path.open('w', encoding=self.encoding, newline='')
        except OSError as exc:
            raise OutputWriteError(path, exc.strerror or str(exc)) from exc


def preprocess(
    input_path: PathLike,
    output_path: PathLike,
    search_directories: Union[SearchConfig, Sequence[PathLike], None] = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> bool:
    """Expand *input_path* into *output_path* using *search_directories*.

    Returns False when an include cannot be resolved, an input cannot be read
    or the output cannot be written.
    """
    return Preprocessor(search_directories, encoding=encoding).run(input_path, output_path)
