"""Exception hierarchy for script parsing and conversion.

WHY: Every parse failure aborts the whole conversion, and the person
running it needs to know which header field or which line was at
fault. A small hierarchy lets the CLI catch one base class while tests
and library callers can target the specific failure.

RULES:
- ScriptError is the base; the CLI catches only this (plus OSError)
- Every error carries the offending field, line or fragment in details
- Unknown container commands are NOT errors (they degrade to plain text)
"""

from typing import Optional


class ScriptError(Exception):
    """Base exception for all scriptmark errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join("{}={!r}".format(k, v) for k, v in self.details.items())
            return "{} ({})".format(self.message, detail_str)
        return self.message


class MissingFieldError(ScriptError):
    """A mandatory header command was not found in the document."""

    def __init__(self, field: str):
        super().__init__("Could not find header field: {}".format(field), {"field": field})
        self.field = field


class InvalidLineError(ScriptError):
    """A body line could not be parsed into a container."""

    def __init__(self, line: str, reason: str = "line does not match \\command{body}"):
        super().__init__("Could not parse line: {}".format(reason), {"line": line})
        self.line = line
        self.reason = reason


class UnknownInlineCommandError(ScriptError):
    """A command inside a line is not one of the known inline commands."""

    def __init__(self, command: str, fragment: str):
        super().__init__(
            "Unknown inline command: \\{}".format(command),
            {"fragment": fragment},
        )
        self.command = command
        self.fragment = fragment


class UnsupportedConversionError(ScriptError):
    """The requested source/target format pairing is not supported."""

    def __init__(self, source: str, target: str, message: str = ""):
        msg = message or "Only TeX -> Markdown conversion is supported"
        super().__init__(msg, {"source": source, "target": target})
        self.source = source
        self.target = target
