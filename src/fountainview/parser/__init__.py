"""Fountain line classification and dual dialogue block assembly."""

from __future__ import annotations

from .assembler import BlockAssembler, assemble
from .classifier import FountainClassifier, classify, split_lines
from .models import (
    ClassifiedLine,
    ClassifierOptions,
    ClassifierState,
    DualDialogueBlock,
    LineType,
    RenderNode,
    RenderTree,
    SingleLine,
    SourceLine,
)

__all__ = [
    "BlockAssembler",
    "ClassifiedLine",
    "ClassifierOptions",
    "ClassifierState",
    "DualDialogueBlock",
    "FountainClassifier",
    "LineType",
    "RenderNode",
    "RenderTree",
    "SingleLine",
    "SourceLine",
    "assemble",
    "classify",
    "split_lines",
]
