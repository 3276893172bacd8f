"""Drawing primitive IR models.

Primitives are the atomic drawing instructions produced by the layout
engine. They are stored in paint order: earlier entries are painted first,
later entries on top. The `kind` field tags each variant so a mixed list
round-trips through JSON.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import BaseIRModel, FontWeight, TextAnchor, TextRole


class Rect(BaseIRModel):
    """Filled (optionally stroked) rectangle."""

    kind: Literal["rect"] = "rect"
    x: float
    y: float = Field(..., description="Top edge Y coordinate")
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    fill: str = "#ffffff"
    stroke: Optional[str] = None
    stroke_width: float = Field(default=0, ge=0)
    corner_radius: float = Field(default=0, ge=0)

    @property
    def x2(self) -> float:
        """Right edge X coordinate."""
        return self.x + self.width

    @property
    def y2(self) -> float:
        """Bottom edge Y coordinate."""
        return self.y + self.height


class TextRun(BaseIRModel):
    """Single line of text placed at a baseline position."""

    kind: Literal["text"] = "text"
    x: float
    y: float = Field(..., description="Baseline Y coordinate")
    text: str
    font_size: float = Field(..., gt=0)
    font_weight: FontWeight = FontWeight.NORMAL
    fill: str = "#333333"
    anchor: TextAnchor = TextAnchor.START
    role: TextRole = TextRole.CONTENT
    line_index: Optional[int] = Field(
        None, ge=0, description="Source line index for content runs"
    )


class StraightLine(BaseIRModel):
    """Straight stroked line segment."""

    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "#dddddd"
    stroke_width: float = Field(default=1, gt=0)

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5


class Circle(BaseIRModel):
    """Filled circle, used for bullet and notice markers."""

    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float = Field(..., gt=0)
    fill: str = "#007acc"


Primitive = Annotated[
    Union[Rect, TextRun, StraightLine, Circle],
    Field(discriminator="kind"),
]
