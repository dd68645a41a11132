"""Markdown script formatter with context-sensitive span rendering.

WHY: Scripts are shared and performed from Markdown. Readers need to
tell at a glance what is voiced (bold), what is a performance cue
(italic, in parentheses), and what is a stage direction, sound effect
or listener line (quoted block). The same span renders differently
depending on the line it sits in.

HOW: render_span() gives the context-free form of a span.
render_container() adjusts each span for its container kind, joins them
with spaces, collapses whitespace, then wraps the line for its kind.
render_script() emits the Characters section, a fixed formatting guide,
then one block per paragraph, all separated by blank lines.

RULES:
- NORMAL -> text, EMPHASIS -> /text/, INLINE_DIRECTION -> *(text)*
- PLAIN_TEXT lines: spans as-is, no wrapper
- STAGE_DIR / SFX / LISTENER_DIALOGUE: inline directions lose their
  asterisks, then the line is wrapped in > *[..]*, > *[sfx: ..]*,
  > *« .. »*
- SPOKEN lines: normal and emphasis spans are bolded, inline directions
  are left as *(cue)*; emphasis inside a spoken line logs a warning
  because it may really belong to a cue
- Output suffix: ".md"
"""

from __future__ import annotations

import logging
import re
from typing import List

from scriptmark.config import FORMATTING_GUIDE_DIVIDER
from scriptmark.core.ir import Container, ContainerKind, Script, Span, SpanKind
from scriptmark.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")

# Wrapper templates for the quoted line kinds.
_BLOCK_TEMPLATES = {
    ContainerKind.STAGE_DIR: "> *[{}]*",
    ContainerKind.SFX: "> *[sfx: {}]*",
    ContainerKind.LISTENER_DIALOGUE: "> *« {} »*",
}


def render_span(span: Span) -> str:
    """Render a span without regard to its container.

    Example:
        >>> render_span(Span.emphasis("impact"))
        '/impact/'
    """
    if span.kind is SpanKind.EMPHASIS:
        return "/{}/".format(span.contents)
    if span.kind is SpanKind.INLINE_DIRECTION:
        return "*({})*".format(span.contents)
    return span.contents


def _render_spoken_span(span: Span, container: Container) -> str:
    text = render_span(span)
    if span.kind is SpanKind.NORMAL:
        return "**{}**".format(text)
    if span.kind is SpanKind.EMPHASIS:
        # Can't tell whether this emphasis is dialogue or part of a cue.
        logger.warning(
            'The emphasised span "%s" occurs within the scope of a spoken line '
            "and has been rendered as spoken. However, it MAY occur within an "
            'inline direction, etc., but we do not know. Context: "%s"',
            text, container.plain_text(),
        )
        return "**{}**".format(text)
    return text


def _render_span_in(span: Span, container: Container) -> str:
    """Render a span as it should appear inside the given container."""
    kind = container.kind
    if kind is ContainerKind.SPOKEN:
        return _render_spoken_span(span, container)

    if kind in _BLOCK_TEMPLATES and span.kind is SpanKind.INLINE_DIRECTION:
        # > *[text (cue)]* rather than > *[text *(cue)*]*
        return render_span(span).strip("*")

    return render_span(span)


def render_container(container: Container) -> str:
    """Render one script line to Markdown.

    Example:
        >>> render_container(Container(ContainerKind.SPOKEN, [
        ...     Span.inline("quietly"), Span.normal("hi")]))
        '*(quietly)* **hi**'
    """
    joined = " ".join(_render_span_in(span, container) for span in container.spans)
    text = _WHITESPACE_RE.sub(" ", joined).strip()

    template = _BLOCK_TEMPLATES.get(container.kind)
    if template is None:
        return text
    return template.format(text)


def formatting_guide() -> List[str]:
    """Example renderings of each line kind, included in every output."""
    examples = [
        Container(ContainerKind.SPOKEN).append(Span.normal("spoken text")),
        Container(ContainerKind.SPOKEN).append(Span.emphasis("emphasis")),
        Container(ContainerKind.SPOKEN).append(Span.inline("tone cue, suggested")),
        Container(ContainerKind.STAGE_DIR).append(Span.normal("stage direction and/or sfx")),
        Container(ContainerKind.LISTENER_DIALOGUE).append(
            Span.normal("example listener dialogue, not intended to be voiced")
        ),
        Container(ContainerKind.PLAIN_TEXT).append(Span.normal(FORMATTING_GUIDE_DIVIDER)),
    ]
    return ["## Formatting guide"] + [render_container(c) for c in examples]


def render_script(script: Script) -> str:
    """Render the whole script: characters, formatting guide, then lines."""
    blocks: List[str] = ["## Characters"]
    for character in script.characters:
        blocks.append("- **{}** ∼ {}".format(character.name, character.description))

    blocks.extend(formatting_guide())
    blocks.extend(render_container(container) for container in script.paragraphs)

    return "\n\n".join(blocks)


class MarkdownFormatter(BaseFormatter):
    """Formatter that produces the performer-facing Markdown script."""

    @property
    def name(self) -> str:
        return "Markdown"

    def format(self, script: Script) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=".md",
                content=render_script(script),
            )
        ]
