"""Command-line interface for hotascurve.

Inspects stored axis curves without the editor:
- ``hotascurve sample CURVE`` prints the response table
- ``hotascurve check CURVE`` validates a curve file
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from hotascurve.core.config.loader import configure_logging, load_app_config, load_config
from hotascurve.core.curves.models import check_invariants
from hotascurve.core.curves.records import CurveRecord, from_record, load_curve_file
from hotascurve.core.curves.sampling import sample_curve

console = Console()
logger = logging.getLogger(__name__)


def sample_command(args: argparse.Namespace) -> int:
    """Print raw input -> shaped output for a curve file."""
    try:
        curve = load_curve_file(args.curve)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load curve: {e}[/red]")
        return 1

    inputs, outputs = sample_curve(curve, args.samples)

    table = Table(title=f"{Path(args.curve).name} ({curve.kind.value})")
    table.add_column("Input", justify="right")
    table.add_column("Output", justify="right")
    for x, y in zip(inputs, outputs, strict=True):
        table.add_row(f"{x:.3f}", f"{y:.4f}")

    console.print(table)
    console.print(
        f"deadzone={curve.deadzone:.3f} saturation={curve.saturation:.3f} "
        f"curvature={curve.curvature:.3f} points={len(curve.control_points)}"
    )
    return 0


def check_command(args: argparse.Namespace) -> int:
    """Validate a curve file and report every problem found."""
    try:
        record = CurveRecord.model_validate(load_config(args.curve))
        curve = from_record(record)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {args.curve}: invalid curve[/red]")
        if isinstance(e, ValidationError):
            for error in e.errors():
                console.print(f"   - {error['msg']}")
        else:
            console.print(f"   - {e}")
        return 1

    violations = check_invariants(curve)
    if violations:
        console.print(f"[red]❌ {args.curve}: invalid curve[/red]")
        for violation in violations:
            console.print(f"   - {violation}")
        return 1

    console.print(f"[green]✅ {args.curve}: valid {curve.kind.value} curve[/green]")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    p = argparse.ArgumentParser(
        prog="hotascurve",
        description="Inspect joystick axis response curves.",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    sub = p.add_subparsers(dest="command", required=True)

    sample = sub.add_parser("sample", help="Print the response table of a curve file")
    sample.add_argument("curve", help="Path to curve file (JSON or YAML)")
    sample.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Number of inputs to sample (default: editor.render_samples from config)",
    )
    sample.set_defaults(func=sample_command)

    check = sub.add_parser("check", help="Validate a curve file")
    check.add_argument("curve", help="Path to curve file (JSON or YAML)")
    check.set_defaults(func=check_command)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    app_config = load_app_config(args.config)
    configure_logging(app_config)

    if getattr(args, "samples", 0) is None:
        args.samples = app_config.editor.render_samples
    if getattr(args, "samples", 2) < 2:
        parser.error("--samples must be >= 2")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
