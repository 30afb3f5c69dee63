#!/usr/bin/env python3
"""
build_templates.py — Write the placeholder garment templates.

Usage:
    python scripts/build_templates.py                 # → $MOCKUP_TEMPLATES_DIR or ./templates
    python scripts/build_templates.py --dir assets/templates --overwrite
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from mockupgen.config import Settings
from mockupgen.templates import SHARED_TEMPLATES, write_placeholder_templates

console = Console()


def main() -> None:
    parser = argparse.ArgumentParser(description="Write placeholder garment templates")
    parser.add_argument("--dir", type=Path, default=None, help="Template directory")
    parser.add_argument("--overwrite", action="store_true", help="Replace existing files")
    args = parser.parse_args()

    settings = Settings.from_env()
    target = args.dir or settings.templates_dir
    written = write_placeholder_templates(target, settings.canvas_size, overwrite=args.overwrite)

    for path in written:
        console.print(f"  [green]✓[/green] {path}")
    if not written:
        console.print(f"  [dim]All templates already present in {target}[/dim]")
    console.print(
        f"  [dim]{len(SHARED_TEMPLATES)} mockup types share the t-shirt art: "
        f"{', '.join(sorted(SHARED_TEMPLATES))}[/dim]"
    )


if __name__ == "__main__":
    main()
