"""
Command-line interface for termcodec.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape as markup_escape
from rich.table import Table

from termcodec import cursor, erase, screen
from termcodec.ansi import escape
from termcodec.config import CodecConfig, default_config_paths
from termcodec.errors import TermCodecError
from termcodec.logging import get_logger, setup_logging

console = Console()
logger = get_logger("cli")

# Cursor operation name -> number of integer arguments
_CURSOR_ARITY: dict[str, int] = {
    "home": 0,
    "move": 2,
    "up": 1,
    "down": 1,
    "left": 1,
    "right": 1,
    "column": 1,
    "save": 0,
    "restore": 0,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal control-code codec",
        prog="termcodec",
    )

    # Global options
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Config file (defaults to ./termcodec.yaml or ~/.config/termcodec/config.yaml)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write raw escape bytes instead of an escaped representation",
    )
    parser.add_argument(
        "--style",
        choices=["legacy", "standard"],
        help="Cursor sequence style (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # cursor
    cursor_parser = subparsers.add_parser("cursor", help="Encode a cursor operation")
    cursor_parser.add_argument("op", choices=list(_CURSOR_ARITY), help="Cursor operation")
    cursor_parser.add_argument("args", nargs="*", type=int, help="Counts or coordinates")

    # erase
    erase_parser = subparsers.add_parser("erase", help="Encode an erase operation")
    erase_parser.add_argument("name", help="Erase operation name (e.g. clearLine)")

    # mode
    mode_parser = subparsers.add_parser("mode", help="Encode a screen mode")
    mode_parser.add_argument("color_kind", help="monochrome or color")
    mode_parser.add_argument("screen_kind", help="text or graphics")
    mode_parser.add_argument("width", type=int, help="Screen width")
    mode_parser.add_argument("height", type=int, help="Screen height")
    mode_parser.add_argument("-b", "--bit-depth", type=int, help="Color bit depth")

    # listings
    subparsers.add_parser("modes", help="List supported screen modes")
    subparsers.add_parser("names", help="List erase operation names")

    # config
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Show current configuration")
    config_init_parser = config_subparsers.add_parser("init", help="Initialize a new config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="termcodec.yaml",
        help="Output file path",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config, loaded_from = _load_config(args.config)
    if args.style:
        config.sequence_style = args.style
    if args.raw:
        config.escape_output = False

    # Setup logging based on verbosity
    setup_logging("DEBUG" if args.verbose else config.log_level)
    if loaded_from:
        logger.debug("Loaded config from %s", loaded_from)

    try:
        if args.command == "cursor":
            cmd_cursor(args, config)
        elif args.command == "erase":
            cmd_erase(args, config)
        elif args.command == "mode":
            cmd_mode(args, config)
        elif args.command == "modes":
            cmd_modes()
        elif args.command == "names":
            cmd_names()
        elif args.command == "config":
            cmd_config(args, config, loaded_from)
        else:
            parser.print_help()
    except TermCodecError as e:
        console.print(f"[red]Error:[/red] {markup_escape(str(e))}", highlight=False)
        sys.exit(1)


def _load_config(path: Path | None) -> tuple[CodecConfig, Path | None]:
    if path is not None and not path.exists():
        console.print(f"[red]Config file not found: {path}[/red]")
        sys.exit(1)

    try:
        if path is not None:
            return CodecConfig.from_yaml(path), path
        return CodecConfig.load()
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config file:[/red] {markup_escape(str(e))}", highlight=False)
        sys.exit(1)


def _emit(sequence: str, config: CodecConfig) -> None:
    """Write *sequence* either escaped for reading or raw for a terminal."""
    if config.escape_output:
        console.print(escape(sequence), markup=False, highlight=False)
    else:
        sys.stdout.write(sequence)
        sys.stdout.flush()


def cmd_cursor(args: argparse.Namespace, config: CodecConfig) -> None:
    """Encode a cursor operation."""
    arity = _CURSOR_ARITY[args.op]
    if len(args.args) != arity:
        console.print(f"[red]{args.op} takes {arity} argument(s), got {len(args.args)}[/red]")
        sys.exit(2)

    op = getattr(cursor, args.op)(*args.args)
    _emit(cursor.encode(op, config.sequence_style), config)


def cmd_erase(args: argparse.Namespace, config: CodecConfig) -> None:
    """Encode an erase operation."""
    _emit(erase.encode(erase.parse(args.name)), config)


def cmd_mode(args: argparse.Namespace, config: CodecConfig) -> None:
    """Encode a screen mode."""
    mode = screen.decode_request(
        args.color_kind,
        args.screen_kind,
        {"width": args.width, "height": args.height},
        args.bit_depth,
    )
    _emit(screen.encode(mode), config)


def cmd_modes() -> None:
    """List supported screen modes."""
    table = Table(title="Supported Screen Modes")
    table.add_column("Color", style="cyan")
    table.add_column("Kind")
    table.add_column("Dimensions")
    table.add_column("Bit depth", style="dim")
    table.add_column("Sequence", style="green")

    for mode, sequence in screen.legal_modes():
        if isinstance(mode, screen.EnableWrapping):
            table.add_row("wrapping", "-", "-", "-", escape(sequence))
            continue
        color = "color" if isinstance(mode, screen.Color) else "monochrome"
        depth = getattr(mode, "bit_depth", None)
        table.add_row(
            color,
            mode.screen_kind.value,
            f"{mode.dims[0]}x{mode.dims[1]}",
            "-" if depth is None else str(depth),
            escape(sequence),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(screen.ALL)} modes[/dim]")


def cmd_names() -> None:
    """List erase operation names."""
    table = Table(title="Erase Operations")
    table.add_column("Name", style="cyan")
    table.add_column("Region")
    table.add_column("Sequence", style="green")

    for region in erase.ALL:
        table.add_row(region.value, region.name.lower(), escape(region.sequence))

    console.print(table)


def cmd_config(args: argparse.Namespace, config: CodecConfig, loaded_from: Path | None) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        if loaded_from is None:
            console.print("[dim]No config file found. Using defaults.[/dim]")
        else:
            console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")
        console.print("[bold]Current Configuration:[/bold]\n")
        console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))
    elif args.config_command == "init":
        _config_init(Path(args.output))
    else:
        console.print("[yellow]Usage: termcodec config <show|init>[/yellow]")
        console.print("[dim]Search paths:[/dim]")
        for path in default_config_paths():
            console.print(f"  {path}")


def _config_init(output_path: Path) -> None:
    """Initialize a new config file."""
    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    with open(output_path, "w") as f:
        yaml.dump(CodecConfig(sequence_style="legacy").to_dict(), f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {output_path}[/green]")


if __name__ == "__main__":
    main()
