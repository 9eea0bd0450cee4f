"""Command-line interface for gdtfkit."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gdtfkit.core.config.loader import apply_logging_config, load_app_config
from gdtfkit.core.config.models import AppConfig, LoggingConfig
from gdtfkit.core.errors import GdtfError
from gdtfkit.core.models.gdtf import Gdtf
from gdtfkit.core.parsers.gdtf import GdtfParser

# Document text is printed as-is, so markup and emoji codes in it are not interpreted
console = Console(emoji=False)
logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> AppConfig:
    """Load app config and apply command-line logging overrides."""
    config = load_app_config(args.config)
    overrides = {}
    if args.log_level:
        overrides["level"] = args.log_level
    if args.structured_logs:
        overrides["structured"] = True
    if overrides:
        logging_config = LoggingConfig.model_validate(
            {**config.logging.model_dump(), **overrides}
        )
        config = config.model_copy(update={"logging": logging_config})
    return config


def render_summary(gdtf: Gdtf) -> None:
    """Print fixture identity, DMX modes, attributes and wheels."""
    fixture = gdtf.fixture_type
    console.print(
        Panel(
            f"[bold]{escape(fixture.long_name)}[/bold] ({escape(fixture.short_name)})\n"
            f"Manufacturer: {escape(fixture.manufacturer)}\n"
            f"FixtureTypeID: {escape(fixture.fixture_type_id)}\n"
            f"GDTF version: {gdtf.data_version.value}",
            title=Text(fixture.name),
        )
    )

    modes = Table(title="DMX Modes", show_header=True)
    modes.add_column("Mode", style="cyan")
    modes.add_column("Channels", style="green", justify="right")
    modes.add_column("Footprint", style="yellow", justify="right")
    modes.add_column("Macros", style="magenta", justify="right")
    for mode in fixture.dmx_modes:
        modes.add_row(
            escape(mode.name),
            str(len(mode.dmx_channels)),
            str(mode.footprint),
            str(len(mode.ft_macros)),
        )
    console.print(modes)

    definitions = fixture.attribute_definitions
    attributes = Table(title="Attributes", show_header=True)
    attributes.add_column("Attribute", style="cyan")
    attributes.add_column("Feature", style="magenta")
    attributes.add_column("Unit", style="green")
    attributes.add_column("Activation Group", style="yellow")
    for attr in definitions.attributes:
        attributes.add_row(
            escape(attr.name),
            escape(str(attr.feature)),
            attr.physical_unit.value,
            escape(str(attr.activation_group)) if attr.activation_group is not None else "-",
        )
    console.print(attributes)

    if fixture.wheels:
        wheels = Table(title="Wheels", show_header=True)
        wheels.add_column("Wheel", style="cyan")
        wheels.add_column("Slots", style="white")
        for wheel in fixture.wheels:
            wheels.add_row(
                escape(wheel.name),
                escape(", ".join(slot.name or "-" for slot in wheel.slots)),
            )
        console.print(wheels)

    for problem in definitions.dangling_references():
        console.print(f"[yellow]⚠️  {escape(problem)}[/yellow]")


def run_inspect(args: argparse.Namespace, config: AppConfig) -> int:
    """Decode one file and print its summary."""
    try:
        gdtf = GdtfParser(config.parser).parse(Path(args.file))
    except GdtfError as e:
        logger.debug(f"Decode failed for {args.file}", exc_info=True)
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    render_summary(gdtf)
    return 0


def run_validate(args: argparse.Namespace, config: AppConfig) -> int:
    """Decode each file and report OK/FAIL per file."""
    parser = GdtfParser(config.parser)

    failures = 0
    for file in args.files:
        try:
            gdtf = parser.parse(Path(file))
        except GdtfError as e:
            failures += 1
            logger.debug(f"Decode failed for {file}", exc_info=True)
            console.print(f"[red]FAIL[/red] {escape(file)}: {escape(str(e))}")
            for note in getattr(e, "__notes__", []):
                console.print(f"     [dim]{escape(note)}[/dim]")
            continue
        fixture = gdtf.fixture_type
        identity = escape(f"{fixture.manufacturer} {fixture.name}")
        console.print(f"[green]OK[/green]   {escape(file)}: {identity}")

    console.print(f"\n{len(args.files) - failures}/{len(args.files)} files decoded")
    return 1 if failures else 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="gdtfkit",
        description="gdtfkit - decode and inspect GDTF fixture descriptions",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument(
        "--structured-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    inspect = sub.add_parser("inspect", help="Print a summary of one fixture file")
    inspect.add_argument("file", help="Path to a .gdtf archive or description.xml")

    validate = sub.add_parser("validate", help="Check that fixture files decode")
    validate.add_argument("files", nargs="+", help="Paths to .gdtf archives or description.xml")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = _load_config(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        sys.exit(1)
    apply_logging_config(config)

    if args.cmd == "inspect":
        sys.exit(run_inspect(args, config))
    sys.exit(run_validate(args, config))


if __name__ == "__main__":
    main()
