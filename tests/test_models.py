"""Tests for IR models and settings."""

import pytest
from pydantic import ValidationError

from svgdoc.config import Settings
from svgdoc.errors import GenerationFailure, SVGDocError, ValidationFailure
from svgdoc.models import (
    Canvas,
    Circle,
    Document,
    PageConfig,
    Rect,
    RenderProfile,
    StraightLine,
    TextLine,
    TextRun,
)
from svgdoc.pipeline.stage_layout import LayoutStyle


class TestPageConfig:
    """Tests for PageConfig model."""

    def test_defaults(self):
        page = PageConfig()

        assert (page.width, page.height) == (595, 842)
        assert page.content_width == 495
        assert page.content_right == 545

    def test_margins_must_leave_content_width(self):
        """Side margins that consume the page are rejected."""
        with pytest.raises(ValidationError):
            PageConfig(width=100, margin_x=50)

    def test_positive_dimensions(self):
        with pytest.raises(ValidationError):
            PageConfig(width=0)
        with pytest.raises(ValidationError):
            PageConfig(height=-1)


class TestTextLine:
    """Tests for TextLine model."""

    def test_frozen(self):
        line = TextLine(text="a", index=0)
        with pytest.raises(ValidationError):
            line.text = "b"

    def test_negative_index(self):
        with pytest.raises(ValidationError):
            TextLine(text="a", index=-1)


class TestDocument:
    """Tests for Document model."""

    def test_json_round_trip(self, engine, sample_lines):
        """Mixed primitives survive JSON via the kind tag."""
        document = engine.layout(sample_lines)
        restored = Document.model_validate_json(document.model_dump_json())

        assert restored == document
        assert [type(p) for p in restored.primitives] == [type(p) for p in document.primitives]

    def test_primitive_counts(self):
        document = Document(
            canvas=Canvas(width=100, height=100),
            cursor_y=0,
            primitives=[
                Rect(x=0, y=0, width=1, height=1),
                Circle(cx=0, cy=0, r=1),
                StraightLine(x1=0, y1=0, x2=3, y2=4),
                TextRun(x=0, y=0, text="a", font_size=10),
            ],
        )

        assert document.count("rect") == 1
        assert document.count("text") == 1
        assert document.primitives[2].length == 5
        assert not document.is_empty

    def test_canvas_rejects_invalid_assignment(self):
        """Assignments are validated."""
        canvas = Canvas(width=100, height=100)
        with pytest.raises(ValidationError):
            canvas.height = 0


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SVGDOC_PAGE_WIDTH", raising=False)
        current = Settings(_env_file=None)

        assert current.page_config() == PageConfig()
        assert current.default_profile == RenderProfile.DECORATED

    def test_env_override(self, monkeypatch):
        """SVGDOC_ variables override defaults."""
        monkeypatch.setenv("SVGDOC_PAGE_WIDTH", "612")
        monkeypatch.setenv("SVGDOC_LINE_HEIGHT", "20")
        monkeypatch.setenv("SVGDOC_DEFAULT_PROFILE", "plain")
        current = Settings(_env_file=None)

        assert current.page_config().width == 612
        assert current.default_profile == RenderProfile.PLAIN
        assert LayoutStyle.from_settings(current).line_height == 20


class TestErrors:
    """Tests for the error taxonomy."""

    def test_hierarchy(self):
        assert issubclass(GenerationFailure, SVGDocError)
        assert issubclass(ValidationFailure, SVGDocError)

    def test_message_without_context(self):
        assert str(GenerationFailure("boom")) == "boom"
