"""Line and span parsing: TeX script lines into Containers of Spans.

WHY: Each body line of a script is one block command wrapping prose that
may contain inline commands, e.g.
``\\spoken{Hello. \\direct{whispering} Come closer.}``. The renderer and
word counter need to know the line kind and which parts are cues.

HOW: parse_container() normalizes the line, matches the outer
``\\command{body}``, maps the command to a ContainerKind, partitions the
body around inline commands, and hands every non-blank piece to
parse_span().

RULES:
- Container commands: spoken, stagedir, listener, sfx
- Unknown container commands degrade to PLAIN_TEXT with a warning
- Inline commands: direct -> INLINE_DIRECTION, ul -> EMPHASIS
- Unknown inline commands raise UnknownInlineCommandError (no fallback)
- A span failure is re-raised as InvalidLineError carrying the line
- Spans keep source order
"""

from __future__ import annotations

import logging
import re

from scriptmark.core.ir import Container, ContainerKind, Span, SpanKind
from scriptmark.core.normalizer import unescape
from scriptmark.core.partition import regex_partition
from scriptmark.errors import InvalidLineError, UnknownInlineCommandError

logger = logging.getLogger(__name__)

CONTAINER_KINDS: dict[str, ContainerKind] = {
    "spoken": ContainerKind.SPOKEN,
    "stagedir": ContainerKind.STAGE_DIR,
    "listener": ContainerKind.LISTENER_DIALOGUE,
    "sfx": ContainerKind.SFX,
}

INLINE_KINDS: dict[str, SpanKind] = {
    "direct": SpanKind.INLINE_DIRECTION,
    "ul": SpanKind.EMPHASIS,
}

# The whole line: \command{body}
_LINE_RE = re.compile(r"^\\(.*?)\{(.*)\}$")

# One inline command with its argument, used to partition a line body.
INLINE_COMMAND_RE = re.compile(r"\\.+?\{.*?\}")

# A single inline command, capturing name and argument.
_SPAN_COMMAND_RE = re.compile(r"\\(.+)\{(.*)\}")


def parse_span(fragment: str) -> Span:
    """Classify one partitioned fragment of a line body.

    Args:
        fragment: Either plain prose or a single ``\\command{argument}``.

    Returns:
        A NORMAL span for prose, otherwise the kind mapped from the
        command name, with normalized contents.

    Raises:
        UnknownInlineCommandError: The command is not direct or ul.
    """
    text = unescape(fragment)
    match = _SPAN_COMMAND_RE.search(text)

    if match is None:
        return Span.normal(text)

    command = match.group(1)
    kind = INLINE_KINDS.get(command)
    if kind is None:
        raise UnknownInlineCommandError(command, fragment)

    return Span(kind, unescape(match.group(2)))


def parse_container(line: str) -> Container:
    """Parse one body line into a Container.

    Args:
        line: A non-empty source line shaped like ``\\command{body}``.

    Returns:
        The container with its spans in source order.

    Raises:
        InvalidLineError: The line is not ``\\command{body}``, or one of
            its inline commands is unknown (chained as the cause).
    """
    text = unescape(line)
    match = _LINE_RE.match(text)
    if match is None:
        raise InvalidLineError(line)

    command, body = match.group(1), match.group(2)

    kind = CONTAINER_KINDS.get(command)
    if kind is None:
        logger.warning("Could not identify container kind for command: %s", command)
        kind = ContainerKind.PLAIN_TEXT

    container = Container(kind)
    for fragment in regex_partition(INLINE_COMMAND_RE, body):
        if not fragment:
            continue

        try:
            container.append(parse_span(fragment))
        except UnknownInlineCommandError as exc:
            raise InvalidLineError(line, str(exc)) from exc

    return container
