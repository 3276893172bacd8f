"""Base models and common types for the SVG document generator."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class LineCategory(str, Enum):
    """Semantic category of a source text line."""

    TITLE = "title"
    SUBHEADING = "subheading"
    BULLET_POINT = "bullet_point"
    WARNING = "warning"
    BODY = "body"


class RenderProfile(str, Enum):
    """Rendering variant of the layout engine."""

    PLAIN = "plain"  # typography only
    DECORATED = "decorated"  # highlights, separators, markers


class FontWeight(str, Enum):
    """SVG font-weight values used by the renderer."""

    NORMAL = "normal"
    BOLD = "bold"


class TextAnchor(str, Enum):
    """Horizontal alignment of a text run relative to its x coordinate."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


class TextRole(str, Enum):
    """What a text run represents in the document."""

    CONTENT = "content"  # substring of an input line
    GLYPH = "glyph"  # decoration glyph, e.g. the notice mark
    FOOTER = "footer"  # page-number footer


class BaseIRModel(BaseModel):
    """Base class for all IR models."""

    class Config:
        validate_assignment = True


class PageConfig(BaseIRModel):
    """Nominal page geometry, in the same units as font sizes."""

    width: float = Field(default=595, gt=0, description="Page width")
    height: float = Field(default=842, gt=0, description="Nominal page height")
    margin_x: float = Field(default=50, ge=0, description="Left and right margin")
    margin_top: float = Field(default=60, ge=0)
    margin_bottom: float = Field(default=60, ge=0)

    @model_validator(mode="after")
    def _check_content_area(self) -> "PageConfig":
        if self.width - 2 * self.margin_x <= 0:
            raise ValueError(
                f"Margins ({self.margin_x}) leave no content width on a {self.width} page"
            )
        return self

    @property
    def content_width(self) -> float:
        """Horizontal space available between the side margins."""
        return self.width - 2 * self.margin_x

    @property
    def content_right(self) -> float:
        """Right edge X coordinate of the content area."""
        return self.width - self.margin_x
