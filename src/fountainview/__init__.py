"""fountainview: Fountain screenplay classification and preview rendering.

fountainview classifies the lines of a Fountain screenplay into structural
roles, groups dual dialogue into side-by-side blocks and renders the result
as preview HTML, editor decorations or a print-ready document.
"""

from .config import FountainViewSettings, get_settings
from .parser import (
    ClassifiedLine,
    ClassifierOptions,
    DualDialogueBlock,
    LineType,
    RenderTree,
    SingleLine,
    assemble,
    classify,
)

__version__ = "0.1.0"

__all__ = [
    "ClassifiedLine",
    "ClassifierOptions",
    "DualDialogueBlock",
    "FountainViewSettings",
    "LineType",
    "RenderTree",
    "SingleLine",
    "__version__",
    "assemble",
    "classify",
    "get_settings",
]
