from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Mapping, NoReturn, Optional, Sequence, TextIO

from incflat.config import Settings
from incflat.core.errors import IncflatError, IncludeNotFoundError
from incflat.expansion.expander import Preprocessor
from incflat.logging.factory import DefaultLoggerFactory
from incflat.logging.helpers import get_logger


logger = get_logger('incflat')


def _configure_logging(ns: argparse.Namespace, settings: Settings) -> None:
    """Configure process-wide logging from the -v/-q/--json-logs switches."""
    factory = DefaultLoggerFactory.for_verbosity(
        verbose=ns.verbose, quiet=ns.quiet, json_logs=ns.json_logs or settings.json_logs
    )
    global logger
    logger = factory.get_logger('incflat')


def _build_parser() -> argparse.ArgumentParser:
    from incflat import __version__

    p = argparse.ArgumentParser(
        prog="incflat",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "incflat – inline #include \"…\" / #include <…> directives into a "
            "single flattened file.\n"
            "Quoted includes are looked up next to the including file first, "
            "then in the -I directories; angle includes use the -I directories only."
        ),
    )
    p.add_argument("input", metavar="INPUT", type=Path, help="Root file to expand.")
    p.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Destination file (created or truncated). '-' or omitted writes to stdout.",
    )
    p.add_argument(
        "-I",
        "--include-dir",
        metavar="DIR",
        action="append",
        dest="include_dirs",
        default=[],
        help=(
            "Add DIR to the include search path. Repeatable; searched in the order given, "
            "before any directory listed in INCFLAT_INCLUDE_PATH."
        ),
    )
    p.add_argument(
        "--encoding",
        metavar="ENC",
        help="Encoding of the sources and the output (default: INCFLAT_ENCODING or utf-8).",
    )
    p.add_argument(
        "--list-files",
        action="store_true",
        help=(
            "After a successful run, print the canonical path of every expanded file.\n"
            "Goes to stdout with -o FILE, to stderr when the expansion itself is on stdout."
        ),
    )
    p.add_argument("--json-logs", action="store_true", help="Emit log records as JSON lines.")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _search_path(ns: argparse.Namespace, settings: Settings) -> List[Path]:
    return [Path(d) for d in ns.include_dirs] + list(settings.include_path)


def run(
    argv: Sequence[str],
    *,
    environ: Optional[Mapping[str, str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the tool with an argv-like sequence and return the exit code."""
    settings = Settings.from_env(environ)
    ns = _build_parser().parse_args(list(argv))

    _configure_logging(ns, settings)

    out_stream = stdout or sys.stdout
    preprocessor = Preprocessor(
        _search_path(ns, settings),
        encoding=ns.encoding or settings.encoding,
    )
    logger.debug('search path: %s', ', '.join(str(d) for d in preprocessor.search) or '<empty>')

    to_stdout = ns.output in (None, '-')
    try:
        if to_stdout:
            report = preprocessor.expand(ns.input, out_stream)
        else:
            with preprocessor.open_output(Path(ns.output)) as sink:
                report = preprocessor.expand(ns.input, sink)
    except IncludeNotFoundError:
        # Already reported by the expander with the directive location.
        return 1
    except IncflatError as exc:
        logger.error('%s', exc)
        return 1

    if ns.list_files:
        # Never mix the file list into an expansion written to stdout.
        list_stream = (stderr or sys.stderr) if to_stdout else out_stream
        for path in report.files:
            list_stream.write(f'{path}\n')
    return 0


def main() -> NoReturn:
    """Entry point for the `incflat` console script."""
    try:
        raise SystemExit(run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if Settings.from_env().debug:
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
