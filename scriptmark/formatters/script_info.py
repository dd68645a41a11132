"""Script information report: header metadata, word count, span dump.

WHY: Before publishing, a writer wants to check that the header was
read correctly and how many words are actually voiced. A plain text
report is also the quickest way to see how each line was classified.

HOW: One "Key: value" line per header field, the word count, a blank
line, then one line per span. The first span of a container is
prefixed with the container kind; following spans get "_".

RULES:
- Tags are shown bracketed and space-separated: [a] [b]
- Series is empty when the script is not part of one
- Output suffix: "-info.txt"
"""

from __future__ import annotations

from typing import List

from scriptmark.core.ir import Script
from scriptmark.core.wordcount import script_wordcount
from scriptmark.formatters.base import BaseFormatter, FormatterOutput


def render_info(script: Script) -> str:
    lines: List[str] = [
        "Title: {}".format(script.title),
        "Author: {}".format(script.author),
        "Series: {}".format(script.series),
        "Tags: {}".format(" ".join("[{}]".format(tag) for tag in script.tags)),
        "Date: {}".format(script.date.isoformat() if script.date else "None"),
        "Summary: {}".format(script.summary),
    ]
    for character in script.characters:
        lines.append("Character: {}".format(character))
    lines.append("Words: {}".format(script_wordcount(script)))
    lines.append("")

    for container in script.paragraphs:
        for index, span in enumerate(container.spans):
            prefix = container.kind.name if index == 0 else "_"
            lines.append("{}::{}({!r})".format(prefix, span.kind.name, span.contents))

    return "\n".join(lines) + "\n"


class ScriptInfoFormatter(BaseFormatter):
    """Formatter that produces the plain text information report."""

    @property
    def name(self) -> str:
        return "Script Info"

    def format(self, script: Script) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-info.txt",
                content=render_info(script),
            )
        ]
