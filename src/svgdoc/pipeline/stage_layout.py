"""Flow Layout Stage - Place classified, wrapped lines on a growing canvas.

The engine walks the source lines in order with a vertical flow cursor and
emits drawing primitives in paint order:
- Title: highlight rectangle, bold runs, separator rule
- Subheading: bold runs plus a small trailing gap
- Warning: notice marker with "!" glyph, indented warning-colored runs
- BulletPoint: dot marker replacing the "- " prefix, indented runs
- Body: plain runs; blank lines advance by a short gap

The canvas is a single continuous page that grows in batches whenever the
cursor reaches the bottom margin. Each `layout` call owns its own cursor,
canvas and primitive list.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from svgdoc.config import Settings, settings
from svgdoc.models import (
    Canvas,
    Circle,
    Document,
    FontWeight,
    LineCategory,
    PageConfig,
    Primitive,
    Rect,
    RenderProfile,
    StraightLine,
    TextAnchor,
    TextLine,
    TextRole,
    TextRun,
    WrappedSegment,
)
from svgdoc.pipeline.stage_classify import LineClassifier, strip_bullet_marker
from svgdoc.pipeline.stage_wrap import strip_unrenderable, wrap_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryStyle:
    """Typography for one line category."""

    font_size: float
    font_weight: FontWeight = FontWeight.NORMAL
    fill: str = "#333333"


CATEGORY_STYLES: dict[LineCategory, CategoryStyle] = {
    LineCategory.TITLE: CategoryStyle(18, FontWeight.BOLD, "#007acc"),
    LineCategory.SUBHEADING: CategoryStyle(16, FontWeight.BOLD, "#1f2937"),
    LineCategory.WARNING: CategoryStyle(14, FontWeight.NORMAL, "#b45309"),
    LineCategory.BULLET_POINT: CategoryStyle(14),
    LineCategory.BODY: CategoryStyle(14),
}


@dataclass(frozen=True)
class LayoutStyle:
    """Vertical rhythm and decoration settings."""

    line_height: float = 24
    title_gap: float = 10
    subheading_gap: float = 6
    blank_gap: float = 12
    growth_lines: int = 10
    bullet_indent: float = 16
    warning_indent: float = 20

    highlight_fill: str = "#e8f4fd"
    separator_color: str = "#007acc"
    bullet_color: str = "#007acc"
    bullet_radius: float = 3
    warning_color: str = "#f59e0b"
    warning_radius: float = 7
    warning_glyph: str = "!"
    warning_glyph_size: float = 10
    footer_color: str = "#999999"
    footer_rule_color: str = "#dddddd"
    footer_font_size: float = 10

    def __post_init__(self):
        if self.line_height <= 0 or self.growth_lines < 1:
            raise ValueError("line_height must be positive and growth_lines at least 1")

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "LayoutStyle":
        """Build the spacing configuration from application settings."""
        source = source or settings
        return cls(
            line_height=source.line_height,
            title_gap=source.title_gap,
            subheading_gap=source.subheading_gap,
            blank_gap=source.blank_gap,
            growth_lines=source.growth_lines,
            bullet_indent=source.bullet_indent,
            warning_indent=source.warning_indent,
        )

    @property
    def growth_step(self) -> float:
        """Canvas height added per overflow."""
        return self.growth_lines * self.line_height


@dataclass
class _FlowState:
    """Mutable state of a single layout pass."""

    y: float
    canvas: Canvas
    primitives: list[Primitive] = field(default_factory=list)
    growth_count: int = 0

    def emit(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)


def as_text_lines(lines: Sequence[Union[TextLine, str]]) -> list[TextLine]:
    """Normalize input to TextLine models, re-indexed by position.

    Characters without a glyph are removed here, so measurement, primitives
    and serialized markup all see the same text.
    """
    return [
        TextLine(
            text=strip_unrenderable(line.text if isinstance(line, TextLine) else line),
            index=i,
        )
        for i, line in enumerate(lines)
    ]


class FlowLayoutEngine:
    """Lays out text lines as vector primitives.

    One engine serves both rendering profiles: `plain` keeps only the
    per-category typography, `decorated` adds highlights, separators and
    markers. The engine itself is immutable configuration.
    """

    def __init__(
        self,
        page: Optional[PageConfig] = None,
        profile: Optional[Union[RenderProfile, str]] = None,
        style: Optional[LayoutStyle] = None,
        classifier: Optional[LineClassifier] = None,
        category_styles: Optional[dict[LineCategory, CategoryStyle]] = None,
    ):
        """Initialize the engine.

        Args:
            page: Page geometry (default from settings, 595 x 842)
            profile: Rendering profile (default from settings, decorated)
            style: Spacing and decoration (default from settings)
            classifier: Line classifier (default rule table)
            category_styles: Typography per category
        """
        self.page = page or settings.page_config()
        self.profile = RenderProfile(profile or settings.default_profile)
        self.style = style or LayoutStyle.from_settings()
        self.classifier = classifier or LineClassifier()
        self.category_styles = category_styles or CATEGORY_STYLES

    @property
    def decorated(self) -> bool:
        return self.profile == RenderProfile.DECORATED

    def initial_height(self, line_count: int) -> float:
        """Seed height: nominal page or a line-count estimate, whichever is larger."""
        estimate = (
            self.page.margin_top
            + self.page.margin_bottom
            + line_count * self.style.line_height
        )
        return max(self.page.height, estimate)

    def layout(self, lines: Sequence[Union[TextLine, str]]) -> Document:
        """Lay out lines in order and return the finished document.

        Args:
            lines: Source lines (TextLine models or plain strings)

        Returns:
            Document with primitives in paint order and the final canvas
        """
        text_lines = as_text_lines(lines)
        state = _FlowState(
            y=self.page.margin_top,
            canvas=Canvas(
                width=self.page.width,
                height=self.initial_height(len(text_lines)),
            ),
        )

        for line in text_lines:
            category = self.classifier.classify(line)
            self._place_line(state, line, category)

        self._finish(state)

        if state.growth_count:
            logger.debug(
                "Canvas grew %d time(s) to %.1f", state.growth_count, state.canvas.height
            )

        return Document(
            canvas=state.canvas,
            primitives=state.primitives,
            cursor_y=state.y,
            line_count=len(text_lines),
            profile=self.profile,
        )

    def _content_for(self, line: TextLine, category: LineCategory) -> tuple[str, int, float]:
        """Text to render, its offset in the line, and its indent."""
        if not self.decorated:
            return line.text, 0, 0.0
        if category == LineCategory.BULLET_POINT:
            text, offset = strip_bullet_marker(line.text)
            return text, offset, self.style.bullet_indent
        if category == LineCategory.WARNING:
            return line.text, 0, self.style.warning_indent
        return line.text, 0, 0.0

    def _place_line(self, state: _FlowState, line: TextLine, category: LineCategory) -> None:
        text, offset, indent = self._content_for(line, category)
        # Narrow pages keep at least half the content width for the text
        indent = min(indent, self.page.content_width / 2)
        typo = self.category_styles[category]
        segments = wrap_line(
            text,
            typo.font_size,
            self.page.content_width - indent,
            offset=offset,
        )
        advance = self.style.blank_gap if line.is_blank else self.style.line_height
        x = self.page.margin_x + indent

        for i, segment in enumerate(segments):
            self._ensure_room(state)
            if i == 0 and self.decorated:
                self._decorate(state, category, segment, typo)
            state.emit(
                TextRun(
                    x=x,
                    y=state.y,
                    text=segment.text,
                    font_size=typo.font_size,
                    font_weight=typo.font_weight,
                    fill=typo.fill,
                    role=TextRole.CONTENT,
                    line_index=line.index,
                )
            )
            state.y += advance

        if category == LineCategory.TITLE:
            if self.decorated:
                rule_y = state.y - self.style.line_height / 2
                state.emit(
                    StraightLine(
                        x1=self.page.margin_x,
                        y1=rule_y,
                        x2=self.page.content_right,
                        y2=rule_y,
                        stroke=self.style.separator_color,
                        stroke_width=1.5,
                    )
                )
            state.y += self.style.title_gap
        elif category == LineCategory.SUBHEADING:
            state.y += self.style.subheading_gap

    def _decorate(
        self,
        state: _FlowState,
        category: LineCategory,
        segment: WrappedSegment,
        typo: CategoryStyle,
    ) -> None:
        """Emit the markers painted beneath or beside a line's first run."""
        margin_x = self.page.margin_x
        # Visual middle of lowercase/CJK glyphs sits about 0.35 em above the baseline
        mid_y = state.y - typo.font_size * 0.35

        if category == LineCategory.TITLE:
            state.emit(
                Rect(
                    x=margin_x - 6,
                    y=state.y - typo.font_size,
                    width=segment.width + 12,
                    height=typo.font_size + 8,
                    fill=self.style.highlight_fill,
                    corner_radius=4,
                )
            )
        elif category == LineCategory.BULLET_POINT:
            state.emit(
                Circle(
                    cx=margin_x + self.style.bullet_indent / 2 - 2,
                    cy=mid_y,
                    r=self.style.bullet_radius,
                    fill=self.style.bullet_color,
                )
            )
        elif category == LineCategory.WARNING:
            cx = margin_x + self.style.warning_radius
            state.emit(
                Circle(cx=cx, cy=mid_y, r=self.style.warning_radius, fill=self.style.warning_color)
            )
            state.emit(
                TextRun(
                    x=cx,
                    y=mid_y + self.style.warning_glyph_size * 0.35,
                    text=self.style.warning_glyph,
                    font_size=self.style.warning_glyph_size,
                    font_weight=FontWeight.BOLD,
                    fill="#ffffff",
                    anchor=TextAnchor.MIDDLE,
                    role=TextRole.GLYPH,
                )
            )

    def _ensure_room(self, state: _FlowState) -> None:
        """Grow the canvas in whole batches once the cursor reaches the bottom margin."""
        while state.y > state.canvas.height - self.page.margin_bottom:
            state.canvas.grow_by(self.style.growth_step)
            state.growth_count += 1

    def _finish(self, state: _FlowState) -> None:
        """Reconcile canvas height and append the footer."""
        state.canvas.grow_to(state.y + self.page.margin_bottom)

        height = state.canvas.height
        margin_bottom = self.page.margin_bottom
        rule_y = height - margin_bottom * 0.6
        state.emit(
            StraightLine(
                x1=self.page.margin_x,
                y1=rule_y,
                x2=self.page.content_right,
                y2=rule_y,
                stroke=self.style.footer_rule_color,
            )
        )
        pages = state.canvas.page_count(self.page.height)
        state.emit(
            TextRun(
                x=self.page.width / 2,
                y=height - margin_bottom * 0.25,
                text=f"Page 1 / {pages}",
                font_size=self.style.footer_font_size,
                fill=self.style.footer_color,
                anchor=TextAnchor.MIDDLE,
                role=TextRole.FOOTER,
            )
        )
