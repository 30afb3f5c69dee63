"""
config.py — Runtime settings read from the environment (and .env).

Variables (all optional):
  MOCKUP_TEMPLATES_DIR       garment template PNGs            (templates)
  MOCKUP_OUTPUT_DIR          write-once output location       (outputs/mockups)
  MOCKUP_CACHE_TTL           result-cache TTL, seconds        (600)
  MOCKUP_CANVAS_WIDTH        canonical working canvas width   (800)
  MOCKUP_CANVAS_HEIGHT       canonical working canvas height  (1000)
  MOCKUP_MAX_VECTOR_COLORS   colour gate for auto-vectorise   (4)
  MOCKUP_VECTORIZE           1/0, enable auto-vectorise       (1)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TEMPLATES_DIR     = Path("templates")
OUTPUT_DIR        = Path("outputs/mockups")
CACHE_TTL_SECONDS = 10 * 60
CANVAS_SIZE       = (800, 1000)
MAX_VECTOR_COLORS = 4

_TRUTHY = {"1", "true", "yes", "on"}


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer — using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={raw!r} must be positive — using {default}")
        return default
    return value


@dataclass
class Settings:
    templates_dir: Path = TEMPLATES_DIR
    output_dir: Path = OUTPUT_DIR
    cache_ttl: float = CACHE_TTL_SECONDS
    canvas_width: int = CANVAS_SIZE[0]
    canvas_height: int = CANVAS_SIZE[1]
    max_vector_colors: int = MAX_VECTOR_COLORS
    vectorize: bool = True

    @property
    def canvas_size(self) -> tuple:
        return (self.canvas_width, self.canvas_height)

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        dotenv: bool = True,
    ) -> "Settings":
        """Build settings from *env* (default: os.environ after loading .env)."""
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ

        vectorize_raw = env.get("MOCKUP_VECTORIZE", "1").strip().lower()
        return cls(
            templates_dir=Path(env.get("MOCKUP_TEMPLATES_DIR") or TEMPLATES_DIR),
            output_dir=Path(env.get("MOCKUP_OUTPUT_DIR") or OUTPUT_DIR),
            cache_ttl=_int_env(env, "MOCKUP_CACHE_TTL", CACHE_TTL_SECONDS),
            canvas_width=_int_env(env, "MOCKUP_CANVAS_WIDTH", CANVAS_SIZE[0]),
            canvas_height=_int_env(env, "MOCKUP_CANVAS_HEIGHT", CANVAS_SIZE[1]),
            max_vector_colors=_int_env(env, "MOCKUP_MAX_VECTOR_COLORS", MAX_VECTOR_COLORS),
            vectorize=vectorize_raw in _TRUTHY,
        )
