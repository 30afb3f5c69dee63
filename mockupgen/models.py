"""
models.py — Request / result types shared by every stage of the pipeline.

MockupRequest is validated on construction (pydantic); results are plain
dataclasses produced per mockup type and aggregated per batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Literal, Optional, Tuple, Union, get_args

from pydantic import BaseModel, Field, field_validator

Industry = Literal[
    "technology",
    "healthcare",
    "finance",
    "education",
    "retail",
    "food-beverage",
    "fashion",
    "sports",
    "entertainment",
    "other",
]

MockupType = Literal[
    "tshirt-front",
    "tshirt-back",
    "hoodie-front",
    "hoodie-back",
    "sweatshirt-front",
    "sweatshirt-back",
    "polo-front",
    "polo-back",
    "tank-top-front",
    "tank-top-back",
]

LogoPosition = Literal[
    "center",
    "left-chest",
    "right-chest",
    "top-left",
    "top-right",
    "bottom-left",
    "bottom-right",
]

LogoSize   = Literal["small", "medium", "large"]
TextStyle  = Literal["bold", "elegant", "casual"]
LayoutName = Literal["centered", "corner", "full-width"]

INDUSTRIES:     Tuple[str, ...] = get_args(Industry)
MOCKUP_TYPES:   Tuple[str, ...] = get_args(MockupType)
LOGO_POSITIONS: Tuple[str, ...] = get_args(LogoPosition)

LogoSource = Union[Path, bytes]


def split_mockup_type(mockup_type: str) -> Tuple[str, Optional[str]]:
    """
    'tank-top-back' → ('tank-top', 'back').
    Keys without a -front / -back suffix return (key, None).
    """
    for side in ("front", "back"):
        suffix = f"-{side}"
        if mockup_type.endswith(suffix):
            return mockup_type[: -len(suffix)], side
    return mockup_type, None


class MockupRequest(BaseModel):
    """One caller invocation: a logo plus the garments to put it on."""

    logo: LogoSource = Field(description="Path to an uploaded logo, or its raw bytes")
    logo_format: Optional[str] = Field(
        default=None,
        description="Format tag for byte buffers, e.g. 'svg' or 'png'",
    )
    industry: Industry = "other"
    company_name: str
    tagline: str = ""
    mockup_types: List[MockupType] = Field(min_length=1)
    logo_position: Optional[LogoPosition] = None
    lead_id: Optional[str] = Field(
        default=None,
        description="CRM lead the logo was fetched from; informational only",
    )

    @field_validator("company_name")
    @classmethod
    def _company_name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("company_name must not be empty")
        return v

    @field_validator("tagline")
    @classmethod
    def _strip_tagline(cls, v: str) -> str:
        return v.strip()

    @field_validator("logo_format")
    @classmethod
    def _normalise_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip().lower().lstrip(".") or None


@dataclass
class MockupResult:
    """Outcome for one mockup type."""
    mockup_type: str
    success: bool
    output_location: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None       # exception class name on failure

    @classmethod
    def ok(cls, mockup_type: str, output_location: str) -> "MockupResult":
        return cls(mockup_type=mockup_type, success=True, output_location=output_location)

    @classmethod
    def failed(cls, mockup_type: str, exc: BaseException) -> "MockupResult":
        return cls(
            mockup_type=mockup_type,
            success=False,
            error=str(exc) or type(exc).__name__,
            error_kind=type(exc).__name__,
        )


@dataclass
class MockupBatchResult:
    """A fully successful batch, as handed to the caller-facing layer."""
    id: str
    mockups: List[dict] = field(default_factory=list)     # [{"type": ..., "url": ...}]
    created_at: str = ""
