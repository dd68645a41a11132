"""Spoken/unspoken word counting over the script IR.

WHY: Script writers track how much of a script is actually voiced versus
stage directions and cues. Speech density (spoken / total) is the number
they care about.

HOW: Words are counted per span with a single regex. Each span's words
go wholly into one bucket depending on the span kind and the kind of
the container it sits in. Container and script totals are sums.

RULES:
- A word is a run of Latin letters (A-Z, a-z, Latin-1 accented letters)
  plus apostrophe, tilde and hyphen
- Non-Latin scripts are not counted at all (known limitation)
- A span is spoken iff its container is SPOKEN and it is not an
  INLINE_DIRECTION; spans are never split between buckets
"""

from __future__ import annotations

import re

from scriptmark.core.ir import Container, ContainerKind, Script, Span, SpanKind, WordCount

WORD_RE = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ'~-]+")


def count_words(text: str) -> int:
    """Return the number of words in text.

    Example:
        >>> count_words("This isn't some text, is it?")
        6
    """
    return sum(1 for _ in WORD_RE.finditer(text))


def is_spoken(span: Span, context: ContainerKind) -> bool:
    """Whether span counts as spoken inside a container of kind context."""
    if context is not ContainerKind.SPOKEN:
        return False
    return span.kind is not SpanKind.INLINE_DIRECTION


def span_wordcount(span: Span, context: ContainerKind) -> WordCount:
    words = count_words(span.contents)
    if is_spoken(span, context):
        return WordCount.only_spoken(words)
    return WordCount.only_unspoken(words)


def container_wordcount(container: Container) -> WordCount:
    """Sum the word counts of every span in the container."""
    return sum(
        (span_wordcount(span, container.kind) for span in container.spans),
        WordCount.zero(),
    )


def script_wordcount(script: Script) -> WordCount:
    """Sum the word counts of every paragraph in the script."""
    return sum(
        (container_wordcount(container) for container in script.paragraphs),
        WordCount.zero(),
    )
