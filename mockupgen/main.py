"""
Logo Mockup Generator — command line

Usage:
  python -m mockupgen.main --logo logo.png --company "Acme" --industry technology
  python -m mockupgen.main --logo logo.svg --company "Acme" --types tshirt-front hoodie-back
  python -m mockupgen.main --list-industries
  python -m mockupgen.main --make-templates
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import Settings
from .errors import MockupBatchError
from .industries import list_industries, recommended_mockup_types
from .models import INDUSTRIES, LOGO_POSITIONS, MOCKUP_TYPES, MockupRequest
from .orchestrator import MockupGenerator, summarize_batch
from .templates import write_placeholder_templates

console = Console()


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Logo Mockup Generator — put a logo on garment mockups"
    )
    parser.add_argument("--logo", type=Path, help="Logo file (PNG, JPEG, GIF, WebP, BMP, TIFF or SVG)")
    parser.add_argument("--company", help="Company name printed under the logo")
    parser.add_argument("--tagline", default="", help="Optional tagline under the company name")
    parser.add_argument("--industry", choices=INDUSTRIES, default="other")
    parser.add_argument(
        "--types",
        nargs="+",
        choices=MOCKUP_TYPES,
        default=None,
        help="Mockup types (default: the industry's recommended types)",
    )
    parser.add_argument("--position", choices=LOGO_POSITIONS, default=None, help="Override logo position")
    parser.add_argument("--templates", type=Path, default=None, help="Template directory")
    parser.add_argument("--output", type=Path, default=None, help="Output directory")
    parser.add_argument("--no-vectorize", action="store_true", help="Skip auto-vectorisation of flat logos")
    parser.add_argument("--list-industries", action="store_true", help="Print the industry table and exit")
    parser.add_argument("--make-templates", action="store_true", help="Write placeholder templates and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    if args.templates is not None:
        settings.templates_dir = args.templates
    if args.output is not None:
        settings.output_dir = args.output
    if args.no_vectorize:
        settings.vectorize = False
    return settings


def print_industries() -> None:
    table = Table(title="Industries")
    table.add_column("Key", style="bold")
    table.add_column("Name")
    table.add_column("Logo")
    table.add_column("Text")
    table.add_column("Layout")
    table.add_column("Recommended mockups", style="dim")
    for p in list_industries():
        table.add_row(
            p.key, p.name,
            p.styling.logo_size, p.styling.text_style, p.styling.layout,
            ", ".join(p.recommended_mockup_types),
        )
    console.print(table)


def run(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)

    if args.list_industries:
        print_industries()
        return 0

    if args.make_templates:
        written = write_placeholder_templates(settings.templates_dir, settings.canvas_size)
        console.print(f"[green]✓[/green] {len(written)} template(s) written → {settings.templates_dir}")
        return 0

    if args.logo is None or not args.company:
        console.print("[bold red]Error:[/bold red] --logo and --company are required.")
        return 2

    types = args.types or recommended_mockup_types(args.industry)
    try:
        request = MockupRequest(
            logo=args.logo,
            industry=args.industry,
            company_name=args.company,
            tagline=args.tagline,
            mockup_types=types,
            logo_position=args.position,
        )
    except ValidationError as exc:
        console.print(f"[bold red]Invalid request:[/bold red] {exc}")
        return 2

    console.print(
        f"\n[bold cyan]→ Generating {len(types)} mockup(s) for {request.company_name} "
        f"({request.industry})[/bold cyan]"
    )
    generator = MockupGenerator.from_settings(settings, verbose=True)
    results = generator.generate_all(request)

    try:
        batch = summarize_batch(results)
    except MockupBatchError as exc:
        console.print(f"[bold red]✗[/bold red] {exc}")
        return 1

    console.print(f"[green]✓ {batch.id}[/green] [dim]{batch.created_at}[/dim]")
    for item in batch.mockups:
        console.print(f"  {item['type']:<18} {item['url']}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
