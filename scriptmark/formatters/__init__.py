"""Output formatter registry.

WHY: The CLI and the conversion pipeline need a single lookup to find
the right formatter by name. Adding a format means one new module and
one new line here.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["markdown"]()``.

RULES:
- Keys are snake_case identifiers; "markdown" matches config.FORMAT_MARKDOWN
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scriptmark.formatters.markdown import MarkdownFormatter
from scriptmark.formatters.script_info import ScriptInfoFormatter

if TYPE_CHECKING:
    from scriptmark.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "markdown": MarkdownFormatter,
    "script_info": ScriptInfoFormatter,
}
