"""Script assembly: full TeX document text into the Script IR.

WHY: A script file is a TeX document with header commands (title,
author, series, tags, summary) followed by the body lines after a
``\\clearpage``. Formatters need all of it as one Script object.

HOW: Each header field is looked up with its own pre-compiled pattern
from METADATA_FIELDS. The body starts after the first ``\\clearpage``
(or at the start if there is none), ``\\end{document}`` is removed, and
every non-blank line is parsed into a Container in order.

RULES:
- title, author, series, tags and summary are all mandatory;
  a missing one raises MissingFieldError naming it
- Header values are matched on a single line and kept raw
- tags: "[a][b][a]" -> ["a", "b", "a"] (order kept, duplicates kept)
- series goes through SeriesEntry.parse
- The first failing body line aborts assembly (InvalidLineError)
- date and characters are left empty
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from scriptmark.core.ir import Container, Script, SeriesEntry
from scriptmark.core.parser import parse_container
from scriptmark.errors import MissingFieldError

logger = logging.getLogger(__name__)


def _command_pattern(command: str) -> re.Pattern[str]:
    """Build the pattern for ``\\command{VALUE}``; command is a regex fragment."""
    return re.compile(r"\\" + command + r"\{(?P<value>.*?)\}")


METADATA_FIELDS: dict[str, re.Pattern[str]] = {
    "title": _command_pattern(r"renewcommand\{\\SceneName\}"),
    "author": _command_pattern("scriptAuthor"),
    "series": _command_pattern("scriptSeries"),
    "tags": _command_pattern("scriptTags"),
    "summary": _command_pattern("summary"),
}
"""Header field name -> pattern whose ``value`` group holds the field."""

_TAG_RE = re.compile(r"\[(.*?)\]")
_PAGE_BREAK_RE = re.compile(r"\\clearpage")
END_OF_DOCUMENT = "\\end{document}"


def search_command(pattern: re.Pattern[str], text: str) -> Optional[str]:
    """Return the ``value`` group of the first match of pattern, or None."""
    match = pattern.search(text)
    if match is None:
        return None
    return match.group("value")


def extract_field(name: str, text: str) -> str:
    """Look up one mandatory header field.

    Raises:
        MissingFieldError: The field's command does not occur in text.
    """
    value = search_command(METADATA_FIELDS[name], text)
    if value is None:
        raise MissingFieldError(name)
    return value


def parse_tags(value: str) -> List[str]:
    """Split a ``[a][b][c]`` tag string into ["a", "b", "c"]."""
    return _TAG_RE.findall(value)


def body_text(text: str) -> str:
    """Return the part of the document holding the script lines."""
    match = _PAGE_BREAK_RE.search(text)
    start = match.end() if match else 0
    logger.debug("Script body starts at offset %d", start)
    return text[start:].replace(END_OF_DOCUMENT, "")


def parse_paragraphs(body: str) -> List[Container]:
    """Parse every non-blank body line into a Container, in order."""
    paragraphs: List[Container] = []
    for line in body.split("\n"):
        if not line.strip():
            continue
        paragraphs.append(parse_container(line))
    return paragraphs


def assemble_script(text: str) -> Script:
    """Build the Script IR from a complete TeX script document.

    Args:
        text: The full contents of the .tex file.

    Returns:
        The assembled Script with header metadata and all paragraphs.

    Raises:
        MissingFieldError: A mandatory header command is absent.
        InvalidLineError: A body line could not be parsed.
    """
    fields = {name: extract_field(name, text) for name in METADATA_FIELDS}

    paragraphs = parse_paragraphs(body_text(text))
    logger.debug("Parsed %d paragraphs", len(paragraphs))

    return Script(
        author=fields["author"],
        title=fields["title"],
        series=SeriesEntry.parse(fields["series"]),
        tags=parse_tags(fields["tags"]),
        summary=fields["summary"],
        paragraphs=paragraphs,
    )
