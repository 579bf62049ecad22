"""fountainview API module.

- FountainPreview: Classify, assemble and render documents with configured options
- PreviewSession: Last-write-wins holder for the current render tree
"""

from fountainview.api.preview import FountainPreview as FountainPreview
from fountainview.api.preview import PreviewSession as PreviewSession

__all__ = [
    "FountainPreview",
    "PreviewSession",
]
