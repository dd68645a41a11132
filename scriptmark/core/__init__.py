"""Core parsing modules and the intermediate representation.

WHY: The core package is the stable heart of the converter: the IR
dataclasses and the TeX parsing pipeline that builds them. Formatters
consume the IR and never touch TeX.

HOW: normalizer.py strips TeX idioms, partition.py splits line bodies
around inline commands, parser.py builds Spans and Containers,
assembler.py builds the whole Script, wordcount.py aggregates spoken
and unspoken totals. ir.py defines the data structures.

RULES:
- IR dataclasses are the contract; change with care
- Parsing is format-agnostic, no Markdown logic here
"""
