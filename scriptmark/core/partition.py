"""Delimiter-preserving string partitioning.

WHY: ``re.split`` drops the delimiters unless the pattern has a capture
group, and even then the groups are awkward to pair up. The parser needs
the text between inline commands AND the commands themselves, in order.

RULES:
- Output alternates: text before a match, the match, text before the
  next match, the match, ... then any tail after the last match
- "".join(result) == text for every pattern and input
- The "before" pieces may be empty; callers drop empty pieces
- An empty tail is not emitted
"""

from __future__ import annotations

import re
from typing import List, Union


def regex_partition(pattern: Union[str, re.Pattern[str]], text: str) -> List[str]:
    """Partition text around every match of pattern, keeping the matches.

    Args:
        pattern: Compiled pattern (or pattern string) for the delimiters.
        text: The string to partition.

    Returns:
        Ordered pieces whose concatenation is exactly ``text``.

    Example:
        >>> regex_partition("C+", "ABCCQBCPCCC")
        ['AB', 'CC', 'QB', 'C', 'P', 'CCC']
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    pieces: List[str] = []
    position = 0
    for match in pattern.finditer(text):
        pieces.append(text[position:match.start()])
        pieces.append(match.group(0))
        position = match.end()

    tail = text[position:]
    if tail:
        pieces.append(tail)

    return pieces
