"""Error taxonomy for document generation.

`InputEmpty` is a warning: the generator still produces a minimal valid
document. The two exceptions are what callers (job tracking, download)
catch; the core never retries.
"""

from typing import Optional


class InputEmpty(UserWarning):
    """No non-blank content lines were supplied for layout."""


class SVGDocError(Exception):
    """Base class for generator failures."""


class GenerationFailure(SVGDocError):
    """Unexpected fault while building primitives or serializing."""

    def __init__(self, message: str, source_name: Optional[str] = None, stage: Optional[str] = None):
        self.source_name = source_name
        self.stage = stage
        detail = message
        if stage:
            detail = f"[{stage}] {detail}"
        if source_name:
            detail = f"{detail} (source: {source_name})"
        super().__init__(detail)


class ValidationFailure(SVGDocError):
    """Produced artifact failed the caller-side sanity check."""
