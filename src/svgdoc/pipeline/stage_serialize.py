"""Serialization Stage - Render primitives to SVG and wrap them in HTML.

Two escaping passes are kept strictly apart:
- `escape_svg_text` for anything placed inside the SVG sub-document
  (control characters stripped, XML entities for & < > " ')
- `escape_html_text` for values interpolated into the outer HTML page

The output is a single self-contained HTML file with the SVG inline.
"""

import html
import re
from pathlib import PurePath
from typing import Callable, Optional
from xml.sax.saxutils import escape as xml_escape

from svgdoc.models import (
    Artifact,
    Circle,
    Container,
    Document,
    Rect,
    StraightLine,
    TextAnchor,
    TextRun,
)
from svgdoc.pipeline.stage_wrap import strip_unrenderable

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
CONTENT_TYPE = "text/html;charset=utf-8"
FONT_FAMILY = "Microsoft YaHei, PingFang TC, Noto Sans CJK TC, sans-serif"

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_svg_text(text: str) -> str:
    """Escape text for SVG content or attribute values."""
    return xml_escape(strip_unrenderable(text), _XML_ENTITIES)


def escape_html_text(text: str) -> str:
    """Escape text interpolated into the HTML wrapper."""
    return html.escape(text, quote=True)


def _num(value: float) -> str:
    """Format a coordinate compactly and deterministically."""
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _render_rect(rect: Rect) -> str:
    attrs = (
        f'x="{_num(rect.x)}" y="{_num(rect.y)}" '
        f'width="{_num(rect.width)}" height="{_num(rect.height)}" '
        f'fill="{escape_svg_text(rect.fill)}"'
    )
    if rect.corner_radius:
        attrs += f' rx="{_num(rect.corner_radius)}"'
    if rect.stroke:
        attrs += (
            f' stroke="{escape_svg_text(rect.stroke)}"'
            f' stroke-width="{_num(rect.stroke_width)}"'
        )
    return f"<rect {attrs}/>"


def _render_text(run: TextRun) -> str:
    attrs = (
        f'x="{_num(run.x)}" y="{_num(run.y)}" '
        f'font-family="{FONT_FAMILY}" font-size="{_num(run.font_size)}" '
        f'font-weight="{run.font_weight.value}" fill="{escape_svg_text(run.fill)}"'
    )
    if run.anchor != TextAnchor.START:
        attrs += f' text-anchor="{run.anchor.value}"'
    return f'<text {attrs} xml:space="preserve">{escape_svg_text(run.text)}</text>'


def _render_line(line: StraightLine) -> str:
    return (
        f'<line x1="{_num(line.x1)}" y1="{_num(line.y1)}" '
        f'x2="{_num(line.x2)}" y2="{_num(line.y2)}" '
        f'stroke="{escape_svg_text(line.stroke)}" stroke-width="{_num(line.stroke_width)}"/>'
    )


def _render_circle(circle: Circle) -> str:
    return (
        f'<circle cx="{_num(circle.cx)}" cy="{_num(circle.cy)}" r="{_num(circle.r)}" '
        f'fill="{escape_svg_text(circle.fill)}"/>'
    )


PRIMITIVE_RENDERERS: dict[type, Callable] = {
    Rect: _render_rect,
    TextRun: _render_text,
    StraightLine: _render_line,
    Circle: _render_circle,
}


def render_svg(document: Document) -> str:
    """Render a laid-out document as a standalone SVG element.

    The coordinate space is page width x final canvas height, and
    primitives are written in paint order after the page background.
    """
    width = _num(document.canvas.width)
    height = _num(document.canvas.height)
    elements = [
        f'<rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="white" stroke="#ddd" stroke-width="1"/>'
    ]
    for primitive in document.primitives:
        elements.append(PRIMITIVE_RENDERERS[type(primitive)](primitive))

    body = "\n  ".join(elements)
    return (
        f'<svg class="svg-page" xmlns="{SVG_NAMESPACE}" '
        f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">\n'
        f"  {body}\n"
        f"</svg>"
    )


def render_container(container: Container, svg: Optional[str] = None) -> str:
    """Embed the SVG sub-document in a printable HTML page.

    Args:
        container: Document plus page metadata
        svg: Pre-rendered SVG markup (rendered from the document if omitted)

    Returns:
        Complete HTML document text
    """
    if svg is None:
        svg = render_svg(container.document)

    name = escape_html_text(container.source_name)
    label = escape_html_text(container.format_label)
    local_time = escape_html_text(container.generated_at.strftime("%Y/%m/%d %H:%M:%S"))
    iso_time = escape_html_text(container.generated_at.isoformat())
    page_width = _num(container.document.canvas.width)

    return f"""<!DOCTYPE html>
<html lang="zh-TW">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{label} 翻譯文檔 - {name}</title>
    <style>
        body {{
            margin: 0;
            padding: 20px;
            font-family: 'Microsoft YaHei', sans-serif;
            background: #f5f5f5;
        }}
        .page-container {{
            max-width: {page_width}px;
            margin: 0 auto;
            background: white;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }}
        .svg-page {{
            width: 100%;
            height: auto;
            display: block;
        }}
        .header {{
            text-align: center;
            padding: 20px;
            background: #007acc;
            color: white;
        }}
        .footer {{
            text-align: center;
            padding: 10px;
            background: #f8f9fa;
            font-size: 12px;
            color: #666;
        }}
        @media print {{
            body {{ margin: 0; padding: 0; background: white; }}
            .page-container {{ box-shadow: none; max-width: none; }}
        }}
    </style>
</head>
<body>
    <div class="page-container">
        <div class="header">
            <h1>PDF 翻譯文檔 ({label}格式)</h1>
            <p>原始文件：{name}</p>
            <p>翻譯時間：{local_time}</p>
        </div>
        {svg}
        <div class="footer">
            <p>此文檔由 PDF 翻譯工具生成 ({label}格式) | 生成時間：{iso_time}</p>
        </div>
    </div>
</body>
</html>
"""


def output_file_name(source_name: str) -> str:
    """Derive the download name: `report.pdf` becomes `translated_report_svg.html`.

    Directory components are dropped so the name is always a bare file name.
    """
    base = re.sub(r"\.pdf$", "", PurePath(source_name).name, flags=re.IGNORECASE)
    return f"translated_{base}_svg.html"


def serialize_document(container: Container, file_name: Optional[str] = None) -> Artifact:
    """Serialize a container to UTF-8 HTML bytes."""
    markup = render_container(container)
    return Artifact(
        content=markup.encode("utf-8"),
        content_type=CONTENT_TYPE,
        file_name=file_name or output_file_name(container.source_name),
    )
