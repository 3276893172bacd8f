"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from svgdoc.models import PageConfig
from svgdoc.pipeline.stage_layout import FlowLayoutEngine, LayoutStyle


@pytest.fixture
def page():
    """Default A4-sized page in points."""
    return PageConfig()


@pytest.fixture
def engine(page):
    """Decorated layout engine with default spacing."""
    return FlowLayoutEngine(page=page, profile="decorated", style=LayoutStyle())


@pytest.fixture
def plain_engine(page):
    """Plain layout engine with default spacing."""
    return FlowLayoutEngine(page=page, profile="plain", style=LayoutStyle())


@pytest.fixture
def fixed_time():
    """Fixed generation timestamp for reproducible output."""
    return datetime(2024, 1, 5, 15, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def sample_lines():
    """Mixed-category document resembling a translated report."""
    return [
        "翻譯文檔：report.pdf",
        "",
        "1. 文檔概述",
        "   這是一份經過專業翻譯的PDF文檔，保持了原始格式和內容結構。",
        "一. 技術規格",
        "   - 文檔格式：PDF",
        "注意事項：",
        "- 本翻譯僅供參考使用",
        "Plain <body> & \"text\" with 'quotes'",
    ]


@pytest.fixture
def output_dir(tmp_path):
    """Create a temporary output directory."""
    out_dir = tmp_path / "output"
    out_dir.mkdir()
    return out_dir
