"""Text-level IR models: source lines and their wrapped segments."""

from pydantic import Field

from .base import BaseIRModel


class TextLine(BaseIRModel):
    """Single line of source content with its position in the input."""

    text: str = Field(..., description="Raw line text, without the newline")
    index: int = Field(..., ge=0, description="0-indexed sequence number")

    class Config:
        frozen = True

    @property
    def is_blank(self) -> bool:
        """Check if the line has no visible characters."""
        return not self.text.strip()


class WrappedSegment(BaseIRModel):
    """
    Width-bounded piece of a line, ready to become one text run.

    `text` is always a substring of the source line starting at `start`.
    """

    text: str = ""
    width: float = Field(default=0.0, ge=0.0, description="Estimated rendered width")
    start: int = Field(default=0, ge=0, description="Offset within the source line")

    @property
    def end(self) -> int:
        """Offset just past the last character."""
        return self.start + len(self.text)
