from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from skripta_cv.config import get_settings
from skripta_cv.exceptions import CvGenerationError
from skripta_cv.models import ProfileData
from skripta_cv.services import get_sample_profile, list_sample_profiles, render_cv


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skripta-cv",
        description="Render CV profile data into a paginated PDF.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Render a profile JSON file")
    render.add_argument("profile", type=Path, help="Path to a ProfileData JSON document")
    render.add_argument("-o", "--output", type=Path, required=True, help="Output PDF path")

    sample = commands.add_parser("sample", help="Render a bundled sample profile")
    sample.add_argument("name", nargs="?", choices=list_sample_profiles())
    sample.add_argument("-o", "--output", type=Path, help="Output PDF path")
    sample.add_argument("--all", action="store_true", help="Render every sample")
    sample.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Output directory for --all (default: current directory)",
    )
    return parser


def _write_pdf(profile: ProfileData, output: Path) -> None:
    rendered = render_cv(profile, get_settings())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(rendered.content)
    print(f"✅ Saved {output} ({rendered.page_count} page(s), {len(rendered.content)} bytes)")
    for defect in rendered.defects:
        print(f"   ⚠️  {defect.message}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and run the requested command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "render":
        try:
            profile = ProfileData.model_validate_json(args.profile.read_text(encoding="utf-8"))
        except OSError as exc:
            print(f"❌ Could not read {args.profile}: {exc}")
            return 1
        except ValidationError as exc:
            print(f"❌ Invalid profile data in {args.profile}:\n{exc}")
            return 1
        _write_pdf(profile, args.output)
        return 0

    if args.all:
        for name in list_sample_profiles():
            _write_pdf(get_sample_profile(name), args.directory / f"sample_cv_{name}.pdf")
        return 0

    if not args.name:
        print("❌ Choose a sample name or pass --all.")
        return 1
    output = args.output or Path(f"sample_cv_{args.name}.pdf")
    _write_pdf(get_sample_profile(args.name), output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except CvGenerationError as exc:
        print(f"\n❌ CV generation failed: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
