"""Document generation entry points.

Runs the pipeline stages in order:
text → split_lines → classify → wrap → layout → serialize → Artifact

Any unexpected fault inside the stages surfaces as a single
GenerationFailure; there are no retries and no partial results.
"""

import logging
import warnings
from datetime import datetime
from typing import Optional, Sequence, Union

from svgdoc.config import settings
from svgdoc.errors import GenerationFailure, InputEmpty, ValidationFailure
from svgdoc.models import Artifact, Container, Document, PageConfig, RenderProfile
from svgdoc.pipeline.stage_layout import FlowLayoutEngine, LayoutStyle
from svgdoc.pipeline.stage_serialize import serialize_document

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split newline-delimited text into lines (CRLF tolerated)."""
    return text.replace("\r\n", "\n").split("\n")


def build_document(
    lines: Sequence[str],
    page: Optional[PageConfig] = None,
    profile: Optional[Union[RenderProfile, str]] = None,
    style: Optional[LayoutStyle] = None,
) -> Document:
    """Lay out lines without serializing.

    Issues an InputEmpty warning when no line has visible content; the
    returned document is still valid.
    """
    if not any(line.strip() for line in lines):
        logger.warning("No content lines to lay out; producing a minimal document")
        warnings.warn("no content lines to lay out", InputEmpty, stacklevel=2)

    engine = FlowLayoutEngine(page=page, profile=profile, style=style)
    return engine.layout(lines)


def generate_artifact(
    content: Union[str, Sequence[str]],
    source_name: str,
    page: Optional[PageConfig] = None,
    profile: Optional[Union[RenderProfile, str]] = None,
    generated_at: Optional[datetime] = None,
    file_name: Optional[str] = None,
) -> Artifact:
    """Generate the HTML+SVG artifact for one document.

    Args:
        content: Newline-delimited text or an already split line sequence
        source_name: Display name of the source file
        page: Page geometry (default 595 x 842 from settings)
        profile: Rendering profile (default from settings)
        generated_at: Timestamp shown in the output (default now, UTC)
        file_name: Output file name (default derived from source_name)

    Returns:
        Serialized artifact

    Raises:
        GenerationFailure: If layout or serialization fails
    """
    lines = split_lines(content) if isinstance(content, str) else list(content)
    logger.info("Generating document for %s (%d lines)", source_name, len(lines))

    stage = "layout"
    try:
        document = build_document(lines, page=page, profile=profile)

        stage = "serialize"
        container_fields = {
            "document": document,
            "source_name": source_name,
            "format_label": settings.format_label,
        }
        if generated_at is not None:
            container_fields["generated_at"] = generated_at
        artifact = serialize_document(Container(**container_fields), file_name=file_name)
    except Exception as exc:
        logger.error("Document generation failed for %s during %s: %s", source_name, stage, exc)
        raise GenerationFailure(str(exc), source_name=source_name, stage=stage) from exc

    logger.info(
        "Generated %s: %d primitives, canvas %.0fx%.0f, %d bytes",
        artifact.file_name,
        len(document.primitives),
        document.canvas.width,
        document.canvas.height,
        artifact.size_bytes,
    )
    return artifact


def validate_artifact(artifact: Artifact) -> Artifact:
    """Check that an artifact is non-empty, decodable and well-formed.

    Returns:
        The same artifact, for chaining

    Raises:
        ValidationFailure: If any check fails
    """
    if not artifact.content:
        raise ValidationFailure(f"{artifact.file_name}: artifact is empty")

    try:
        markup = artifact.text()
    except UnicodeDecodeError as exc:
        raise ValidationFailure(f"{artifact.file_name}: content is not valid UTF-8") from exc

    if "<svg" not in markup or "</svg>" not in markup:
        raise ValidationFailure(f"{artifact.file_name}: missing SVG sub-document")
    if not markup.rstrip().endswith("</html>"):
        raise ValidationFailure(f"{artifact.file_name}: HTML container is truncated")

    logger.debug("Validated %s (%d bytes)", artifact.file_name, artifact.size_bytes)
    return artifact
