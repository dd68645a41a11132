"""File format detection and the in-memory conversion pipeline.

WHY: The CLI deals in paths, but the pipeline deals in text. Format
detection and the "is this direction supported" check happen before
any file is read, so a wrong pairing fails fast without touching disk.

HOW: detect_format() maps a path suffix through config.FORMAT_EXTENSIONS.
check_conversion() rejects every pairing not in SUPPORTED_CONVERSIONS.
convert_text() assembles the Script from TeX text and runs the formatter
registered for the target format through render(). convert() keeps only
the rendered text.

RULES:
- Unknown suffixes raise UnsupportedConversionError
- Only tex -> markdown is accepted
- convert() is pure: text in, text out
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

from scriptmark.config import FORMAT_EXTENSIONS, SUPPORTED_CONVERSIONS
from scriptmark.core.assembler import assemble_script
from scriptmark.core.ir import Script
from scriptmark.errors import UnsupportedConversionError
from scriptmark.formatters import FORMATTERS
from scriptmark.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def detect_format(path: Union[str, Path]) -> str:
    """Return the format name for a path from its suffix.

    Raises:
        UnsupportedConversionError: The suffix is missing or unknown.
    """
    suffix = Path(path).suffix.lower()
    fmt = FORMAT_EXTENSIONS.get(suffix)
    if fmt is None:
        known = ", ".join(sorted(FORMAT_EXTENSIONS))
        raise UnsupportedConversionError(
            str(path), "",
            "Invalid file extension '{}': should be one of {}".format(suffix, known),
        )
    return fmt


def check_conversion(source: str, target: str) -> None:
    """Raise UnsupportedConversionError unless source -> target is supported."""
    logger.debug("%s -> %s", source, target)
    if (source, target) not in SUPPORTED_CONVERSIONS:
        raise UnsupportedConversionError(source, target)


def render(script: Script, target: str) -> FormatterOutput:
    """Run the formatter registered for target over an assembled Script."""
    return FORMATTERS[target]().format(script)[0]


def convert_text(text: str, source: str, target: str) -> Tuple[Script, FormatterOutput]:
    """Assemble TeX text and render it, returning both the Script and the output.

    Raises:
        UnsupportedConversionError: The pairing is not supported.
        MissingFieldError, InvalidLineError: The source could not be parsed.
    """
    check_conversion(source, target)
    script = assemble_script(text)
    return script, render(script, target)


def convert(text: str, source: str, target: str) -> str:
    """Convert a whole document from one format to another.

    Args:
        text: The source document contents.
        source: Source format name, e.g. "tex".
        target: Target format name, e.g. "markdown".

    Returns:
        The rendered target document.

    Raises:
        UnsupportedConversionError: The pairing is not supported.
        MissingFieldError, InvalidLineError: The source could not be parsed.
    """
    _, output = convert_text(text, source, target)
    return output.content
