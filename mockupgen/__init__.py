"""
mockupgen — logo-on-garment mockup generator.

Usage:
    from mockupgen import MockupGenerator, MockupRequest, Settings

    generator = MockupGenerator.from_settings(Settings.from_env())
    results = generator.generate_all(MockupRequest(
        logo="uploads/logo.png",
        industry="technology",
        company_name="Acme",
        mockup_types=["tshirt-front", "tshirt-back"],
    ))
"""

from .cache import CacheStats, ResultCache
from .compositor import MockupCompositor
from .config import Settings
from .errors import (
    LogoDecodeError,
    MockupBatchError,
    MockupError,
    PersistError,
    TemplateNotFoundError,
    VectorizationFailure,
)
from .industries import INDUSTRY_PROFILES, get_industry_profile
from .models import MockupBatchResult, MockupRequest, MockupResult
from .orchestrator import MockupGenerator, build_fingerprint, summarize_batch

__all__ = [
    "CacheStats",
    "INDUSTRY_PROFILES",
    "LogoDecodeError",
    "MockupBatchError",
    "MockupBatchResult",
    "MockupCompositor",
    "MockupError",
    "MockupGenerator",
    "MockupRequest",
    "MockupResult",
    "PersistError",
    "ResultCache",
    "Settings",
    "TemplateNotFoundError",
    "VectorizationFailure",
    "build_fingerprint",
    "get_industry_profile",
    "summarize_batch",
]
