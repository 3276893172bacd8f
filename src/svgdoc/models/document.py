"""Document-level IR models."""

import math
from datetime import datetime, timezone

from pydantic import Field

from .base import BaseIRModel, RenderProfile, TextRole
from .primitive import Primitive, TextRun


class Canvas(BaseIRModel):
    """
    Vertically growable drawing surface.

    Height is monotonically non-decreasing: the grow helpers never shrink
    it, and the layout engine only touches it through them.
    """

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def grow_by(self, amount: float) -> None:
        """Extend the canvas downwards by `amount`."""
        if amount < 0:
            raise ValueError(f"Canvas cannot shrink (grow_by {amount})")
        self.height = self.height + amount

    def grow_to(self, height: float) -> None:
        """Extend the canvas to at least `height`."""
        if height > self.height:
            self.height = height

    def page_count(self, page_height: float) -> int:
        """Number of nominal pages the canvas spans."""
        return max(1, math.ceil(self.height / page_height - 1e-9))


class Document(BaseIRModel):
    """
    Laid-out vector document.

    Holds the primitive list in paint order plus the final canvas. Built
    fresh for every layout call and never shared between calls.
    """

    canvas: Canvas
    primitives: list[Primitive] = Field(default_factory=list)
    cursor_y: float = Field(..., description="Final flow cursor position")
    line_count: int = Field(default=0, ge=0, description="Number of source lines laid out")
    profile: RenderProfile = RenderProfile.DECORATED

    @property
    def text_runs(self) -> list[TextRun]:
        """All text runs, in paint order."""
        return [p for p in self.primitives if isinstance(p, TextRun)]

    @property
    def content_runs(self) -> list[TextRun]:
        """Text runs that carry input text."""
        return [r for r in self.text_runs if r.role == TextRole.CONTENT]

    @property
    def is_empty(self) -> bool:
        """Check if no visible input text was laid out."""
        return not any(r.text.strip() for r in self.content_runs)

    def count(self, kind: str) -> int:
        """Count primitives of a given `kind` tag."""
        return sum(1 for p in self.primitives if p.kind == kind)


class Container(BaseIRModel):
    """Document plus the metadata shown around it in the output page."""

    document: Document
    source_name: str = Field(..., description="Display name of the source file")
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    format_label: str = Field(default="SVG", description="Shown in the page header")


class Artifact(BaseIRModel):
    """Serialized output handed to the persistence/download layer."""

    content: bytes
    content_type: str = "text/html;charset=utf-8"
    file_name: str

    @property
    def size_bytes(self) -> int:
        """Size of the serialized content."""
        return len(self.content)

    def text(self) -> str:
        """Decode the content as UTF-8."""
        return self.content.decode("utf-8")
