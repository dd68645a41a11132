"""Shared test fixtures for the scriptmark test suite.

WHY: Several test modules need the same sample script: a complete TeX
document with a header and a body covering every line kind. Keeping it
here means all tests agree on what "a valid script" is.

HOW: Module constants hold the raw TeX text; fixtures hand out the text,
the assembled Script, and a hand-built Script for formatter tests.

RULES:
- SAMPLE_TEX must assemble without errors
- MINIMAL_TEX is the smallest valid document (one spoken line)
"""

import pytest

from scriptmark.core.ir import Character, Container, ContainerKind, Script, SeriesEntry, Span


SAMPLE_TEX = r"""\documentclass{article}
\usepackage{scriptstyle}
\renewcommand{\SceneName}{The Lighthouse Keeper}
\scriptAuthor{lilellia}
\scriptSeries{Coastal Nights (Part 2)}
\scriptTags{[F4A][comfort][rain][comfort]}
\summary{A storm, a lamp, and a long night\ldots}
\begin{document}
\maketitle
\clearpage
\stagedir{Rain against glass. \direct{distant thunder} A door creaks.}

\spoken{Oh! You're soaked\textellipsis{} come in, come in. \direct{softly} Sit by the lamp.}
\sfx{Kettle whistling}
\listener{\direct{shivering} Thank you.}

\spoken{It's \ul{really} coming down out there.}
\end{document}
"""

MINIMAL_TEX = r"""\renewcommand{\SceneName}{Tiny}
\scriptAuthor{someone}
\scriptSeries{\textemdash}
\scriptTags{}
\summary{Short.}
\clearpage
\spoken{Hello there.}
\end{document}
"""


@pytest.fixture
def sample_tex():
    return SAMPLE_TEX


@pytest.fixture
def minimal_tex():
    return MINIMAL_TEX


@pytest.fixture
def built_script():
    """A hand-built Script with characters, for formatter tests."""
    return Script(
        author="lilellia",
        title="Built",
        series=SeriesEntry("A Series", 7),
        tags=["a", "b"],
        summary="Summary text.",
        characters=[
            Character("Keeper", "an old lighthouse keeper"),
            Character("Listener", "a stranded traveller"),
        ],
        paragraphs=[
            Container(ContainerKind.STAGE_DIR, [Span.normal("Rain.")]),
            Container(ContainerKind.SPOKEN, [Span.inline("quietly"), Span.normal("hi")]),
        ],
    )
