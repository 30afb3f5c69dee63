"""
industries.py — Static industry styling table.

Each industry carries a palette, the mockup types that suit it, and a
styling triple (logo size tier, text style, layout policy) that drives
the compositor defaults. The table is built once at import and never
mutated; profiles are frozen.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import LayoutName, LogoSize, MockupType, TextStyle


class IndustryStyling(BaseModel):
    model_config = ConfigDict(frozen=True)

    logo_size: LogoSize
    text_style: TextStyle
    layout: LayoutName


class IndustryProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    description: str
    primary_colors: Tuple[str, ...] = Field(description="Ordered hex colours, strongest first")
    secondary_colors: Tuple[str, ...]
    recommended_mockup_types: Tuple[MockupType, ...]
    styling: IndustryStyling


_BLUE_PRIMARY  = ("#3B82F6", "#1E40AF", "#6366F1", "#8B5CF6", "#06B6D4")
_SLATE_SECOND  = ("#1E293B", "#475569", "#64748B", "#94A3B8")
_WARM_PRIMARY  = ("#DC2626", "#EA580C", "#D97706", "#059669", "#0D9488")
_DARK_SECOND   = ("#1E293B", "#374151", "#4B5563")
_VIVID_PRIMARY = ("#8B5CF6", "#A855F7", "#C084FC", "#F472B6", "#EC4899")


def _profile(key, name, description, primary, secondary, mockups, logo_size, text_style, layout):
    return IndustryProfile(
        key=key,
        name=name,
        description=description,
        primary_colors=primary,
        secondary_colors=secondary,
        recommended_mockup_types=mockups,
        styling=IndustryStyling(logo_size=logo_size, text_style=text_style, layout=layout),
    )


INDUSTRY_PROFILES: Dict[str, IndustryProfile] = {
    p.key: p
    for p in (
        _profile(
            "technology", "Technology",
            "Modern, clean designs for tech companies and startups",
            _BLUE_PRIMARY, _SLATE_SECOND,
            ("tshirt-front", "hoodie-front", "polo-front"),
            "medium", "bold", "centered",
        ),
        _profile(
            "healthcare", "Healthcare",
            "Professional and trustworthy designs for medical organizations",
            ("#059669", "#047857", "#0D9488", "#0891B2", "#0EA5E9"), _DARK_SECOND,
            ("polo-front", "tshirt-front", "sweatshirt-front"),
            "medium", "elegant", "centered",
        ),
        _profile(
            "finance", "Finance",
            "Sophisticated designs for financial institutions",
            ("#1E293B", "#334155", "#475569", "#64748B", "#0F172A"),
            ("#F59E0B", "#D97706", "#B45309", "#92400E"),
            ("polo-front", "tshirt-front", "hoodie-front"),
            "medium", "elegant", "centered",
        ),
        _profile(
            "education", "Education",
            "Engaging designs for schools and educational institutions",
            _WARM_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "hoodie-front", "sweatshirt-front"),
            "large", "casual", "full-width",
        ),
        _profile(
            "retail", "Retail",
            "Vibrant designs for retail and e-commerce businesses",
            _WARM_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "tank-top-front", "hoodie-front"),
            "medium", "casual", "centered",
        ),
        _profile(
            "food-beverage", "Food & Beverage",
            "Appetizing designs for restaurants and food businesses",
            _WARM_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "tank-top-front", "polo-front"),
            "large", "casual", "centered",
        ),
        _profile(
            "fashion", "Fashion",
            "Trendy designs for fashion and lifestyle brands",
            _VIVID_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "tank-top-front", "hoodie-front"),
            "medium", "elegant", "corner",
        ),
        _profile(
            "sports", "Sports",
            "Dynamic designs for sports teams and athletic brands",
            _WARM_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "tank-top-front", "hoodie-front"),
            "large", "bold", "centered",
        ),
        _profile(
            "entertainment", "Entertainment",
            "Creative designs for entertainment and media companies",
            _VIVID_PRIMARY, _DARK_SECOND,
            ("tshirt-front", "hoodie-front", "tank-top-front"),
            "large", "casual", "full-width",
        ),
        _profile(
            "other", "Other",
            "Versatile designs for any business type",
            _BLUE_PRIMARY, _SLATE_SECOND,
            ("tshirt-front", "polo-front", "hoodie-front"),
            "medium", "bold", "centered",
        ),
    )
}


def get_industry_profile(key: str) -> IndustryProfile:
    try:
        return INDUSTRY_PROFILES[key]
    except KeyError:
        valid = ", ".join(INDUSTRY_PROFILES)
        raise KeyError(f"Unknown industry {key!r} (expected one of: {valid})") from None


def recommended_colors(key: str) -> Tuple[str, str]:
    """(first primary, first secondary) hex colours for an industry."""
    profile = get_industry_profile(key)
    return profile.primary_colors[0], profile.secondary_colors[0]


def recommended_mockup_types(key: str) -> List[str]:
    return list(get_industry_profile(key).recommended_mockup_types)


def list_industries() -> List[IndustryProfile]:
    return list(INDUSTRY_PROFILES.values())
