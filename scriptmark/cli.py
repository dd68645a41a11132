"""Command-line interface for the script converter.

WHY: Writers convert a finished TeX script to Markdown from the
terminal. The CLI wires together format detection, file reading,
script assembly, Markdown rendering, and file writing behind a single
command.

HOW: argparse accepts the input and output paths plus verbosity flags.
Formats are detected from both suffixes and checked before the input is
read. Status messages go to stderr; the rendered Markdown goes to the
output file. Any ScriptError or OSError is printed as "Error: ..." and
the process exits with status 1.

RULES:
- -i/--infile and -o/--outfile are required
- Only .tex -> .md is supported; anything else fails before reading
- -v raises and -q lowers the log level from SCRIPTMARK_LOG_LEVEL
- --info writes the script information report beside the output as
  <stem>-info.txt and prints it to stderr
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from scriptmark import __version__
from scriptmark.config import DEFAULT_LOG_LEVEL
from scriptmark.conversion import check_conversion, convert_text, detect_format, render
from scriptmark.core.wordcount import script_wordcount
from scriptmark.errors import ScriptError
from scriptmark.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

# Quietest first; -v moves right, -q moves left.
_LOG_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def resolve_log_level(verbose: int, quiet: int, default: str = DEFAULT_LOG_LEVEL) -> int:
    """Shift the default log level by the -v/-q counts, clamped to the known levels.

    Example:
        >>> resolve_log_level(1, 0, "INFO") == logging.DEBUG
        True
    """
    base = logging.getLevelName(default)
    if base not in _LOG_LEVELS:
        base = logging.INFO
    index = _LOG_LEVELS.index(base) + verbose - quiet
    index = max(0, min(index, len(_LOG_LEVELS) - 1))
    return _LOG_LEVELS[index]


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def sidecar_path(outfile: Path, output: FormatterOutput) -> Path:
    """Path for an extra output written beside outfile, named by its suffix.

    Example:
        >>> sidecar_path(Path("out/ep3.md"), FormatterOutput("-info.txt", "")).name
        'ep3-info.txt'
    """
    return outfile.with_name(outfile.stem + output.suffix)


def run(args: argparse.Namespace) -> None:
    """Convert args.infile to args.outfile.

    Raises:
        ScriptError: Unsupported conversion or unparseable script.
        OSError: The input could not be read or the output written.
    """
    infile = Path(args.infile)
    outfile = Path(args.outfile)

    source = detect_format(infile)
    target = detect_format(outfile)
    check_conversion(source, target)

    logger.debug("Reading from: %s", infile)
    text = infile.read_text(encoding="utf-8")

    script, output = convert_text(text, source, target)
    _status("Parsed '{}' by {} ({} lines)".format(
        script.title, script.author, len(script.paragraphs),
    ))
    _status("  Words: {}".format(script_wordcount(script)))

    logger.debug("Writing to: %s", outfile)
    outfile.write_text(output.content, encoding="utf-8")
    _status("Saved: {}".format(outfile))

    if args.info:
        info = render(script, "script_info")
        info_path = sidecar_path(outfile, info)
        info_path.write_text(info.content, encoding="utf-8")
        _status("Saved: {}".format(info_path))
        _status("")
        _status(info.content.rstrip("\n"))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="scriptmark",
        description="Convert a TeX audio-drama script into performer-facing Markdown.",
    )

    parser.add_argument(
        "-i", "--infile",
        required=True,
        help="The input file to operate on (.tex).",
    )

    parser.add_argument(
        "-o", "--outfile",
        required=True,
        help="The file to output the results to (.md).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More log output (repeatable).",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Less log output (repeatable).",
    )

    parser.add_argument(
        "--info",
        action="store_true",
        help="Also write the script's header, word count and line breakdown "
             "to <outfile stem>-info.txt and print it to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(resolve_log_level(args.verbose, args.quiet))

    try:
        run(args)
    except (ScriptError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
