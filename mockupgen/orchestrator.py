"""
orchestrator.py — Generate every requested mockup type for one request.

Types run one after another in the order given, each through the result
cache. A failing type never stops the others; the full per-type list is
always returned. summarize_batch() applies the caller-facing rule: the
batch only counts if every type succeeded.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from PIL import Image
from rich.console import Console

from .cache import CacheStats, ResultCache
from .compositor import MockupCompositor
from .config import Settings
from .errors import MockupBatchError
from .logo import is_vector_source
from .models import MockupBatchResult, MockupRequest, MockupResult

logger = logging.getLogger(__name__)
console = Console()


def logo_identity(request: MockupRequest) -> str:
    """SHA-256 of the logo bytes; the path itself if the file can't be read."""
    logo = request.logo
    if isinstance(logo, (bytes, bytearray)):
        return hashlib.sha256(logo).hexdigest()
    try:
        return hashlib.sha256(Path(logo).read_bytes()).hexdigest()
    except OSError:
        return str(logo)


def build_fingerprint(request: MockupRequest, mockup_type: str, identity: Optional[str] = None) -> str:
    """
    Cache key for one mockup type. Fields are JSON-encoded so free text
    containing the separator cannot make two requests collide. The last
    field is how the logo bytes will be decoded, which the format hint
    or the file suffix decides.
    """
    parts = [
        identity if identity is not None else logo_identity(request),
        mockup_type,
        request.industry,
        request.company_name,
        request.tagline,
        request.logo_position or "auto",
        "vector" if is_vector_source(request.logo, request.logo_format) else "raster",
    ]
    return "mockup:" + json.dumps(parts, ensure_ascii=False, separators=(",", ":"))


class MockupGenerator:
    """Runs the compositor over a batch of mockup types, through the cache."""

    def __init__(
        self,
        compositor: MockupCompositor,
        cache: Optional[ResultCache] = None,
        ttl: Optional[float] = None,
        verbose: bool = False,
    ) -> None:
        self.compositor = compositor
        self.cache = cache if cache is not None else ResultCache()
        self.ttl = ttl
        self.verbose = verbose

    @classmethod
    def from_settings(cls, settings: Settings, verbose: bool = False) -> "MockupGenerator":
        return cls(
            MockupCompositor(settings),
            ResultCache(default_ttl=settings.cache_ttl),
            verbose=verbose,
        )

    def _compose_guarded(
        self,
        request: MockupRequest,
        mockup_type: str,
        logos: Dict[int, Image.Image],
    ) -> MockupResult:
        try:
            return self.compositor.compose(request, mockup_type, logos)
        except Exception as exc:
            logger.exception(f"{mockup_type}: unexpected compositing failure")
            return MockupResult.failed(mockup_type, exc)

    def generate_all(self, request: MockupRequest) -> List[MockupResult]:
        """One MockupResult per requested type, in request order."""
        identity = logo_identity(request)
        # normalised logo per box size, shared by the types of this batch
        logos: Dict[int, Image.Image] = {}
        results: List[MockupResult] = []
        total = len(request.mockup_types)

        for idx, mockup_type in enumerate(request.mockup_types, 1):
            key = build_fingerprint(request, mockup_type, identity)
            result = self.cache.get_or_compute(
                key,
                lambda t=mockup_type: self._compose_guarded(request, t, logos),
                self.ttl,
            )
            results.append(result)

            if self.verbose:
                if result.success:
                    console.print(f"    → [{idx}/{total}] {mockup_type} [green]✓[/green] [dim]{result.output_location}[/dim]")
                else:
                    console.print(f"    → [{idx}/{total}] {mockup_type} [yellow]✗ {result.error}[/yellow]")

        ok = sum(1 for r in results if r.success)
        logger.info(f"Batch for {request.company_name!r}: {ok} ok, {total - ok} failed of {total}")
        return results

    def stats(self) -> CacheStats:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()


def summarize_batch(results: List[MockupResult]) -> MockupBatchResult:
    """
    Collapse per-type results into the caller-facing batch.
    Raises MockupBatchError (joined messages) if any type failed.
    """
    failed = [r for r in results if not r.success]
    if failed:
        raise MockupBatchError([r.error or "Unknown error" for r in failed])

    now = datetime.now(timezone.utc)
    return MockupBatchResult(
        id=f"mockup-{int(now.timestamp() * 1000)}",
        mockups=[{"type": r.mockup_type, "url": r.output_location} for r in results],
        created_at=now.isoformat(),
    )
