"""Pipeline stages for SVG document generation.

Deterministic Stages:
1. stage_classify - Line category from an ordered rule table
2. stage_wrap - Greedy wrapping with tiered glyph-width estimates
3. stage_layout - Flow layout onto a growing canvas
4. stage_serialize - SVG sub-document inside an HTML container

Each stage is a pure transformation and can be run separately or
through `svgdoc.generator`.
"""

from .stage_classify import (
    ClassificationRule,
    LineClassifier,
    classify_line,
)
from .stage_layout import CategoryStyle, FlowLayoutEngine, LayoutStyle
from .stage_serialize import (
    escape_html_text,
    escape_svg_text,
    output_file_name,
    render_container,
    render_svg,
    serialize_document,
)
from .stage_wrap import (
    estimate_char_width,
    estimate_text_width,
    strip_unrenderable,
    wrap_line,
)

__all__ = [
    # Classify
    "ClassificationRule",
    "LineClassifier",
    "classify_line",
    # Wrap
    "estimate_char_width",
    "estimate_text_width",
    "strip_unrenderable",
    "wrap_line",
    # Layout
    "CategoryStyle",
    "FlowLayoutEngine",
    "LayoutStyle",
    # Serialize
    "escape_html_text",
    "escape_svg_text",
    "output_file_name",
    "render_container",
    "render_svg",
    "serialize_document",
]
