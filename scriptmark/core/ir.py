"""Intermediate representation dataclasses for parsed audio-drama scripts.

WHY: The TeX source is a flat sequence of commands. The Markdown renderer
and the word counter both need the same structure (lines, their kind,
and the typed runs of text inside them) but look at it differently.
The IR is the single well-typed form both consume, decoupling parsing
from rendering.

HOW: A small hierarchy:
  Span      : one run of text with a SpanKind (normal, emphasis, cue)
  Container : one script line: a ContainerKind plus ordered spans
  Script    : the complete document: header metadata plus containers
Supporting value types: WordCount, SeriesEntry, Character.

RULES:
- Span is the atomic unit and is immutable once created
- Container span order is source order and is never rearranged
- Script is built once by the assembler and treated as read-only after
- date and characters exist on Script but are not populated yet
- WordCount is a monoid under + with WordCount.zero() as identity
"""

from __future__ import annotations

import datetime
import enum
import math
import re
from dataclasses import dataclass, field
from typing import List, Optional

from scriptmark.config import DENSITY_DECIMALS, SERIES_PLACEHOLDERS


class SpanKind(enum.Enum):
    """The formatting/semantic kind of a span."""

    NORMAL = "normal"
    EMPHASIS = "emphasis"
    INLINE_DIRECTION = "inline_direction"


class ContainerKind(enum.Enum):
    """The kind of script line a container represents."""

    SPOKEN = "spoken"
    STAGE_DIR = "stage_dir"
    SFX = "sfx"
    LISTENER_DIALOGUE = "listener_dialogue"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class Span:
    """A run of text tagged with a SpanKind.

    RULES:
    - contents is already normalized (TeX idioms removed, spaces collapsed)
    - kind decides both rendering and spoken/unspoken classification
    """

    kind: SpanKind
    contents: str

    @classmethod
    def normal(cls, contents: str) -> Span:
        return cls(SpanKind.NORMAL, contents)

    @classmethod
    def emphasis(cls, contents: str) -> Span:
        return cls(SpanKind.EMPHASIS, contents)

    @classmethod
    def inline(cls, contents: str) -> Span:
        return cls(SpanKind.INLINE_DIRECTION, contents)

    def with_kind(self, kind: SpanKind) -> Span:
        """Return a copy of this span with a different kind."""
        return Span(kind, self.contents)


@dataclass
class Container:
    """One line of a script: a kind plus its spans in source order.

    WHY: A script line like ``\\spoken{Hi \\direct{softly} there}`` mixes
    dialogue and performance cues. The container keeps the line-level
    kind while the spans keep each piece's own kind.

    HOW: Built incrementally by the parser via append(), which returns
    the container so calls can be chained.
    """

    kind: ContainerKind
    spans: List[Span] = field(default_factory=list)

    def append(self, span: Span) -> Container:
        """Add a span to the end of the container and return the container."""
        self.spans.append(span)
        return self

    def __len__(self) -> int:
        return len(self.spans)

    def plain_text(self) -> str:
        """Return the span contents joined by single spaces, ignoring kinds."""
        return " ".join(span.contents for span in self.spans)


@dataclass(frozen=True)
class WordCount:
    """Spoken and unspoken word totals.

    RULES:
    - total = spoken + unspoken
    - density = spoken / total, NaN when total is 0
    - Addition is associative and commutative, zero() is the identity
    """

    spoken: int = 0
    unspoken: int = 0

    @classmethod
    def zero(cls) -> WordCount:
        return cls(0, 0)

    @classmethod
    def only_spoken(cls, words: int) -> WordCount:
        return cls(spoken=words, unspoken=0)

    @classmethod
    def only_unspoken(cls, words: int) -> WordCount:
        return cls(spoken=0, unspoken=words)

    def total(self) -> int:
        return self.spoken + self.unspoken

    def density(self) -> float:
        """Fraction of words that are spoken, or NaN if nothing was counted."""
        total = self.total()
        if total == 0:
            return math.nan
        return self.spoken / total

    def __add__(self, other: WordCount) -> WordCount:
        if not isinstance(other, WordCount):
            return NotImplemented
        return WordCount(
            spoken=self.spoken + other.spoken,
            unspoken=self.unspoken + other.unspoken,
        )

    def __radd__(self, other):
        # Lets sum() start from the integer 0.
        if other == 0:
            return self
        return NotImplemented

    def __str__(self) -> str:
        density = self.density()
        if math.isnan(density):
            density_text = "———%"
        else:
            density_text = "{:.{prec}f}%".format(100.0 * density, prec=DENSITY_DECIMALS)

        return "{:,} spoken + {:,} unspoken -> {:,} total (ρ = {})".format(
            self.spoken, self.unspoken, self.total(), density_text,
        )


# "My Series (Part 3)" -> ("My Series", 3)
_SERIES_RE = re.compile(r"^(.*?) \(Part (\d+)\)$")


@dataclass(frozen=True)
class SeriesEntry:
    """The series a script belongs to, with its part index.

    Both fields are None when the script is standalone or the header
    value could not be read as ``Title (Part N)``.
    """

    title: Optional[str] = None
    part: Optional[int] = None

    @classmethod
    def parse(cls, value: str) -> SeriesEntry:
        """Parse a free-text series header value.

        RULES:
        - "", "—" and "\\textemdash" mean no series
        - Otherwise a trailing " (Part N)" is required; the text before it
          is the title
        - Anything else also yields an empty entry
        """
        if value in SERIES_PLACEHOLDERS:
            return cls()

        match = _SERIES_RE.match(value)
        if match is None:
            return cls()

        return cls(title=match.group(1), part=int(match.group(2)))

    def __str__(self) -> str:
        if self.title is not None and self.part is not None:
            return "{} (Part {})".format(self.title, self.part)
        return ""


@dataclass(frozen=True)
class Character:
    """A character listed in the script's cast."""

    name: str
    description: str

    def __str__(self) -> str:
        return "{} => {}".format(self.name, self.description)


@dataclass(frozen=True)
class Script:
    """The complete intermediate representation of a script.

    WHY: This is the top-level object formatters and the word counter
    receive. It holds the header metadata and every parsed line.

    HOW: Built in one step by core.assembler.assemble_script().

    RULES:
    - tags keep source order and may contain duplicates
    - characters is an ordered list; display order is declaration order
    - date and characters are always empty in this version
    - paragraphs are in source line order
    """

    author: str
    title: str
    series: SeriesEntry = field(default_factory=SeriesEntry)
    tags: List[str] = field(default_factory=list)
    date: Optional[datetime.date] = None
    summary: str = ""
    characters: List[Character] = field(default_factory=list)
    paragraphs: List[Container] = field(default_factory=list)
