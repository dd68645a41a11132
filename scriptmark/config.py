"""Configuration constants, format mappings, and .env loading.

WHY: Centralizes the values that are easy to want to change (file
extensions, log level, report precision, the formatting-guide divider)
so they are plain data, not buried in parsing or rendering logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level dicts, sets, and strings. Environment variables
override the defaults where noted.

RULES:
- FORMAT_EXTENSIONS maps lowercase suffixes (with dot) to format names
- Only "tex" -> "markdown" is a supported conversion
- All overridable defaults read SCRIPTMARK_* environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# File formats
# ---------------------------------------------------------------------------

FORMAT_TEX = "tex"
FORMAT_MARKDOWN = "markdown"

FORMAT_EXTENSIONS: dict[str, str] = {
    ".tex": FORMAT_TEX,
    ".md": FORMAT_MARKDOWN,
}
"""File suffix (lowercase, with dot) -> format name."""

SUPPORTED_CONVERSIONS: set[tuple[str, str]] = {
    (FORMAT_TEX, FORMAT_MARKDOWN),
}

# ---------------------------------------------------------------------------
# Script conventions
# ---------------------------------------------------------------------------

SERIES_PLACEHOLDERS: frozenset[str] = frozenset({"", "—", "\\textemdash"})
"""Header values of \\scriptSeries meaning "not part of a series"."""

FORMATTING_GUIDE_DIVIDER = "--8<--"

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = os.getenv("SCRIPTMARK_LOG_LEVEL", "INFO").upper()
DENSITY_DECIMALS = int(os.getenv("SCRIPTMARK_DENSITY_DECIMALS", "2"))
