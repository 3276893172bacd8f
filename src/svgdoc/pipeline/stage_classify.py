"""Classification Stage - Assign a semantic category to each text line.

Rules are an ordered table evaluated first-match-wins:
1. Title - "1. ", "12. " numbered headings, or the document title marker
2. Subheading - CJK ordinals ("一.", "二、") or "A. " letter headings
3. Warning - lines mentioning a notice keyword
4. BulletPoint - "- " items, optionally indented
5. Body - everything else, including blank lines

Classification is total: every string gets a category.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from svgdoc.models import LineCategory, TextLine


# Leading line of a generated document, e.g. "翻譯文檔：report.pdf"
TITLE_MARKERS = ("翻譯文檔", "Translated Document")

NUMBERED_TITLE_PATTERN = r"^\d+\. "
TITLE_MARKER_PATTERN = r"^(?:{})(?:\s*[:：].*)?$".format(
    "|".join(re.escape(m) for m in TITLE_MARKERS)
)

CJK_ORDINALS = "一二三四五六七八九十百"
SUBHEADING_PATTERNS = [
    rf"^[{CJK_ORDINALS}]+[.、．]",  # 一. / 二、 / 十一．
    r"^[A-Z]\. ",  # A. Scope
]

# Substring match; Latin keywords are case-insensitive
NOTICE_KEYWORDS = [
    "注意",
    "重要",
    "警告",
    "提醒",
    "notice",
    "important",
    "warning",
    "caution",
]

BULLET_PATTERN = r"^\s*- "


Matcher = Callable[[str], bool]


@dataclass(frozen=True)
class ClassificationRule:
    """One entry of the classification table."""

    category: LineCategory
    matcher: Matcher
    description: str = ""

    def matches(self, text: str) -> bool:
        return self.matcher(text)


def _regex_matcher(*patterns: str, flags: int = 0) -> Matcher:
    compiled = [re.compile(p, flags) for p in patterns]

    def match(text: str) -> bool:
        return any(p.search(text) for p in compiled)

    return match


def _keyword_matcher(keywords: Sequence[str]) -> Matcher:
    lowered = [k.lower() for k in keywords]

    def match(text: str) -> bool:
        haystack = text.lower()
        return any(k in haystack for k in lowered)

    return match


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        LineCategory.TITLE,
        _regex_matcher(NUMBERED_TITLE_PATTERN, TITLE_MARKER_PATTERN),
        "numbered heading or document title marker",
    ),
    ClassificationRule(
        LineCategory.SUBHEADING,
        _regex_matcher(*SUBHEADING_PATTERNS),
        "CJK ordinal or capital-letter heading",
    ),
    ClassificationRule(
        LineCategory.WARNING,
        _keyword_matcher(NOTICE_KEYWORDS),
        "contains a notice keyword",
    ),
    ClassificationRule(
        LineCategory.BULLET_POINT,
        _regex_matcher(BULLET_PATTERN),
        "dash bullet",
    ),
)


class LineClassifier:
    """Classifies text lines with an ordered rule table.

    Holds no per-call state, so one instance can be shared freely.
    """

    def __init__(
        self,
        rules: Optional[Sequence[ClassificationRule]] = None,
        fallback: LineCategory = LineCategory.BODY,
    ):
        """Initialize classifier.

        Args:
            rules: Ordered rule table (default DEFAULT_RULES). First match wins.
            fallback: Category for lines no rule matches.
        """
        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES
        self.fallback = fallback

    def classify(self, line: Union[TextLine, str]) -> LineCategory:
        """Return the category of a single line."""
        text = line.text if isinstance(line, TextLine) else line
        for rule in self.rules:
            if rule.matches(text):
                return rule.category
        return self.fallback

    def classify_all(self, lines: Sequence[TextLine]) -> list[LineCategory]:
        """Classify lines in order."""
        return [self.classify(line) for line in lines]


_default_classifier = LineClassifier()


def classify_line(line: Union[TextLine, str]) -> LineCategory:
    """Classify a line with the default rule table."""
    return _default_classifier.classify(line)


def strip_bullet_marker(text: str) -> tuple[str, int]:
    """Split off a leading "- " bullet marker.

    Returns:
        Tuple of (remaining text, offset of the remainder in `text`).
        Text without a marker is returned unchanged with offset 0.
    """
    match = re.match(BULLET_PATTERN, text)
    if match is None:
        return text, 0
    return text[match.end():], match.end()
