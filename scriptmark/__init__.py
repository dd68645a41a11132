"""scriptmark: TeX audio-drama scripts to performer-facing Markdown.

WHY: Scripts are written in a small set of TeX commands (\\spoken,
\\stagedir, \\sfx, \\listener with inline \\direct and \\ul). Performers
and listeners read them as Markdown. This package parses the TeX into a
well-typed intermediate representation (IR) and renders it.

HOW: Three-stage pipeline: assemble (core: normalize, partition, parse
lines, collect header metadata), count (core.wordcount), format
(pluggable formatters). Each stage is independently testable.

RULES:
- All formatters consume the same Script IR
- Adding a new output format = one new formatter module, no core changes
- The IR is the stable contract between parsing and formatting
- Conversion is one-way: TeX -> Markdown
"""

__version__ = "0.1.0"
