"""Abstract base formatter and output container.

WHY: Every output consumes the same Script IR but produces different
file content. This base class enforces a consistent interface so the
CLI and the conversion pipeline can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements, a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` is appended to the output stem, e.g. ``"-info.txt"``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from scriptmark.core.ir import Script


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the output stem when the
                output is written beside another file,
                e.g. ``"-info.txt"`` -> ``"episode-3-info.txt"``.
        content: The file content.
    """

    suffix: str
    content: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Markdown'."""

    @abstractmethod
    def format(self, script: Script) -> list[FormatterOutput]:
        """Convert the Script IR into one or more output files.

        Args:
            script: The assembled script, header metadata and paragraphs.

        Returns:
            List of FormatterOutput objects, each containing a file suffix
            and content string.
        """
