"""Tests for line classification stage."""

import pytest

from svgdoc.models import LineCategory, TextLine
from svgdoc.pipeline.stage_classify import (
    DEFAULT_RULES,
    ClassificationRule,
    LineClassifier,
    classify_line,
    strip_bullet_marker,
)


class TestDefaultRules:
    """Tests for the default rule table."""

    @pytest.mark.parametrize(
        "text",
        ["1. 文檔概述", "12. Appendix", "翻譯文檔：report.pdf", "翻譯文檔", "Translated Document: a.pdf"],
    )
    def test_titles(self, text):
        """Numbered headings and the title marker are titles."""
        assert classify_line(text) == LineCategory.TITLE

    @pytest.mark.parametrize("text", ["一. 簡介", "二、方法", "十一．附錄", "A. Scope"])
    def test_subheadings(self, text):
        """CJK ordinals and capital-letter headings are subheadings."""
        assert classify_line(text) == LineCategory.SUBHEADING

    @pytest.mark.parametrize(
        "text",
        ["注意事項：", "這點很重要", "WARNING: hot surface", "Please take notice", "Caution"],
    )
    def test_warnings(self, text):
        """Notice keywords mark warnings, Latin ones case-insensitively."""
        assert classify_line(text) == LineCategory.WARNING

    @pytest.mark.parametrize("text", ["- 本翻譯僅供參考使用", "   - 文檔格式：PDF", "\t- tabbed"])
    def test_bullets(self, text):
        """Dash items, optionally indented, are bullet points."""
        assert classify_line(text) == LineCategory.BULLET_POINT

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "本文檔已成功翻譯為中文版本。", "1.5 million", "-not a bullet", "一些文字", "AB. no"],
    )
    def test_body_fallback(self, text):
        """Everything else, including blank lines, is body."""
        assert classify_line(text) == LineCategory.BODY

    def test_title_requires_space_after_number(self):
        """Numbered titles need a space after the period."""
        assert classify_line("1.Title") == LineCategory.BODY

    def test_title_marker_must_lead_the_line(self):
        """The marker only counts at the start of the line."""
        assert classify_line("關於翻譯文檔") == LineCategory.BODY


class TestRulePriority:
    """First matching rule wins."""

    def test_title_beats_warning(self):
        """A numbered heading with a notice keyword is still a title."""
        assert classify_line("3. 重要說明") == LineCategory.TITLE

    def test_subheading_beats_warning(self):
        """A subheading with a notice keyword is still a subheading."""
        assert classify_line("二. 注意") == LineCategory.SUBHEADING

    def test_warning_beats_bullet(self):
        """A bullet mentioning a keyword is a warning."""
        assert classify_line("- 警告：請勿分享") == LineCategory.WARNING

    def test_rule_order(self):
        """Default table is ordered title, subheading, warning, bullet."""
        assert [r.category for r in DEFAULT_RULES] == [
            LineCategory.TITLE,
            LineCategory.SUBHEADING,
            LineCategory.WARNING,
            LineCategory.BULLET_POINT,
        ]


class TestLineClassifier:
    """Tests for LineClassifier."""

    def test_accepts_text_lines(self):
        """TextLine models classify like their text."""
        classifier = LineClassifier()
        assert classifier.classify(TextLine(text="1. Intro", index=0)) == LineCategory.TITLE

    def test_classify_all_preserves_order(self):
        """Bulk classification returns one category per line in order."""
        lines = [TextLine(text=t, index=i) for i, t in enumerate(["1. A", "- b", "c"])]
        assert LineClassifier().classify_all(lines) == [
            LineCategory.TITLE,
            LineCategory.BULLET_POINT,
            LineCategory.BODY,
        ]

    def test_custom_rules(self):
        """Custom tables replace the defaults."""
        rule = ClassificationRule(LineCategory.WARNING, lambda text: text.endswith("!"))
        classifier = LineClassifier(rules=[rule])

        assert classifier.classify("Stop!") == LineCategory.WARNING
        assert classifier.classify("1. Title") == LineCategory.BODY

    def test_custom_fallback(self):
        """An empty table returns the fallback for everything."""
        classifier = LineClassifier(rules=[], fallback=LineCategory.SUBHEADING)
        assert classifier.classify("anything") == LineCategory.SUBHEADING


class TestStripBulletMarker:
    """Tests for bullet marker removal."""

    def test_strips_marker_and_indent(self):
        """Indent and "- " are removed; offset points at the remainder."""
        text, offset = strip_bullet_marker("  - bullet one")
        assert text == "bullet one"
        assert offset == 4

    def test_no_marker(self):
        """Text without a marker is returned unchanged."""
        assert strip_bullet_marker("plain") == ("plain", 0)
