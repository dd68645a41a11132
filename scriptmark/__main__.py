"""Package entry point for ``python -m scriptmark``.

WHY: Users run the converter as
``python -m scriptmark -i episode.tex -o episode.md``. Python's ``-m``
flag looks for ``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from scriptmark.cli import main

if __name__ == "__main__":
    main()
