"""TeX idiom removal for prose text.

WHY: Script authors write ``\\ldots{}``, ``\\$`` and ``\\href{..}{..}`` in
their TeX source. None of those make sense in Markdown output, and they
would confuse word counting and span classification.

HOW: unescape() applies a fixed sequence of substitutions, then collapses
whitespace and trims the ends.

RULES:
- Order matters: ellipses, quotes, escaped symbols, \\kaosmile,
  \\Tilde, \\href, whitespace, trim
- ``\\ldots{}`` / ``\\textellipsis{}`` keep a trailing space, the bare
  forms do not
- Unknown commands pass through untouched
- Never fails: every string has an unescaped form
"""

from __future__ import annotations

import re

# (literal, replacement) pairs; the braced forms must run before the bare ones.
_ELLIPSES = (
    ("\\ldots{}", "... "),
    ("\\ldots", "..."),
    ("\\textellipsis{}", "... "),
    ("\\textellipsis", "..."),
)

_QUOTES_RE = re.compile(r"``(.*?)''")
_ESCAPED_SYMBOL_RE = re.compile(r"\\([%&$])")
_KAOSMILE_RE = re.compile(r"\\kaosmile(\{\})?")
_TILDE_RE = re.compile(r"\\Tilde(\{\})?")
_HREF_RE = re.compile(r"\\href\{(.*?)\}\{(.*?)\}")
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")

TILDE = "\u223c"


def unescape(text: str) -> str:
    """Remove the TeX idioms from a piece of prose.

    Args:
        text: TeX-formatted text, possibly containing other commands.

    Returns:
        The text with known idioms rewritten, whitespace collapsed to
        single spaces, and leading/trailing space removed.

    Example:
        >>> unescape(r"Some text\\textellipsis{} and more")
        'Some text... and more'
    """
    for literal, replacement in _ELLIPSES:
        text = text.replace(literal, replacement)

    text = _QUOTES_RE.sub(r'"\1"', text)
    text = _ESCAPED_SYMBOL_RE.sub(r"\1", text)

    text = _KAOSMILE_RE.sub("^_^ ", text)
    text = _TILDE_RE.sub(TILDE, text)

    # Links come out in Markdown syntax: [TEXT](URL)
    text = _HREF_RE.sub(r"[\2](\1)", text)

    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
