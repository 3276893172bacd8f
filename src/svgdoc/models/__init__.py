"""IR (Intermediate Representation) models for the SVG document generator.

This module defines the Pydantic models that represent data flowing through
the pipeline stages. All models support JSON serialization; primitive lists
round-trip through the `kind` discriminator.

Key Design Principles:
1. Fresh per call: every model is built for one generation and discarded
2. Paint order: primitive lists are ordered, later entries draw on top
3. Monotonic canvas: height only grows during layout
4. Substring fidelity: content text runs carry unmodified input text

Model Hierarchy:
- Container → Document → Canvas + Primitives
- TextLine → WrappedSegments (transient, inside layout)
- Artifact (serialized output)
"""

from .base import (
    BaseIRModel,
    FontWeight,
    LineCategory,
    PageConfig,
    RenderProfile,
    TextAnchor,
    TextRole,
)
from .document import (
    Artifact,
    Canvas,
    Container,
    Document,
)
from .primitive import (
    Circle,
    Primitive,
    Rect,
    StraightLine,
    TextRun,
)
from .text import (
    TextLine,
    WrappedSegment,
)

__all__ = [
    # Base types
    "BaseIRModel",
    "FontWeight",
    "LineCategory",
    "PageConfig",
    "RenderProfile",
    "TextAnchor",
    "TextRole",
    # Text
    "TextLine",
    "WrappedSegment",
    # Primitives
    "Circle",
    "Primitive",
    "Rect",
    "StraightLine",
    "TextRun",
    # Document
    "Artifact",
    "Canvas",
    "Container",
    "Document",
]
