"""
Models package for ace_editor

Contains data structures passed between the extractor, the host-facing
components and the command line pipeline.
"""

from .state import ProgramState, pipeline
from .editor import (
    AttributeSet,
    AttributeValue,
    DirectiveMatch,
    EditorInstance,
    FilterProcessResult,
    ManifestDelta,
    RenderManifest,
)
from .forms import FieldType, FormField

__all__ = [
    "ProgramState",
    "pipeline",
    "AttributeSet",
    "AttributeValue",
    "DirectiveMatch",
    "EditorInstance",
    "FilterProcessResult",
    "ManifestDelta",
    "RenderManifest",
    "FieldType",
    "FormField",
]
