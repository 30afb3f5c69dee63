"""
errors.py — Failure taxonomy for mockup generation.

Everything a single mockup type can fail with derives from MockupError,
so the compositor can turn it into a per-type result instead of aborting
the rest of the batch.
"""

from __future__ import annotations

from typing import List


class MockupError(Exception):
    """Base class for per-mockup-type failures."""


class LogoDecodeError(MockupError):
    """Logo bytes are unreadable or in an unsupported format."""


class TemplateNotFoundError(MockupError):
    """No garment template asset exists for the requested mockup type."""


class PersistError(MockupError):
    """Encoding or writing the composited image failed."""


class VectorizationFailure(MockupError):
    """Auto-vectorisation did not produce a usable SVG. Never fatal."""


class MockupBatchError(Exception):
    """Raised by summarize_batch when at least one mockup type failed."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Failed to generate some mockups: {', '.join(self.errors)}")
