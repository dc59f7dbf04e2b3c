"""Command-line entry point.

Usage
-----
::

    pynpf                          # interactive form
    pynpf --focal-length 24 --once # render once and exit

Interactive commands::

    <field> <value>          type a value into a field (or pick an option)
    slide <field> <number>   drag a field's slider
    show                     redraw the form
    help                     list fields and commands
    quit                     leave (EOF works too)

Fields can be named in camelCase (``focalLength``), snake_case
(``focal_length``) or by their short alias (``f``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pynpf.app import NpfApp
from pynpf.config import NpfConfig, parse_log_level
from pynpf.exceptions import NpfConfigError, UnknownFieldError
from pynpf.ingestion.apply import canonical_field_name
from pynpf.models.camera import SensorSize, TrailType
from pynpf.view.form import CONTROLS, Dropdown

_ALIASES: dict[str, str] = {
    "s": "sensorSize",
    "p": "pixelWidth",
    "f": "focalLength",
    "n": "fNumber",
    "t": "trailType",
}

_QUIT = frozenset({"quit", "exit", "q"})


def _resolve_field(name: str) -> str:
    return _ALIASES.get(name) or canonical_field_name(name)


def _print_help(console: Console) -> None:
    table = Table(title="Fields", show_header=True, header_style="bold magenta")
    table.add_column("Alias", style="cyan")
    table.add_column("Field", style="cyan")
    table.add_column("Accepts", style="green")
    aliases = {field: alias for alias, field in _ALIASES.items()}
    for name, control in CONTROLS.items():
        if isinstance(control, Dropdown):
            accepts = ", ".join(option for option, _ in control.options)
        else:
            accepts = f"{control.minimum:g} to {control.maximum:g}, step {control.step:g}"
        table.add_row(aliases[name], name, accepts)
    console.print(table)
    console.print("Commands: <field> <value>, slide <field> <number>, show, help, quit")


def _prompt_lines(console: Console) -> Iterator[str]:
    while True:
        try:
            yield console.input("[bold cyan]npf>[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return


def handle_line(app: NpfApp, line: str) -> bool:
    """Run one interactive command. Returns ``False`` when the session ends."""
    console = app.view.console
    parts = line.split(maxsplit=1)
    if not parts:
        return True
    command = parts[0]
    argument = parts[1].strip() if len(parts) > 1 else ""

    if command in _QUIT:
        return False
    if command == "help":
        _print_help(console)
        return True
    if command == "show":
        console.print(app.view.render())
        return True

    try:
        if command == "slide":
            name, _, position = argument.partition(" ")
            app.view.slide(_resolve_field(name), float(position))
        else:
            app.view.edit(_resolve_field(command), argument)
    except UnknownFieldError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}. Type 'help' for the field list.")
    except ValueError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}")
    return True


def run_session(app: NpfApp, lines: Iterable[str]) -> None:
    for line in lines:
        if not handle_line(app, line):
            break


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pynpf",
        description="NPF rule calculator: maximum exposure before star trailing.",
    )
    parser.add_argument("--sensor-size", choices=[member.value for member in SensorSize], help="Sensor format")
    parser.add_argument("--pixel-width", help="Image width in pixels (1-10000)")
    parser.add_argument("--focal-length", help="Actual focal length in mm (1-1000)")
    parser.add_argument("--f-number", help="Aperture f-number (0.7-36)")
    parser.add_argument("--trail-type", choices=[member.value for member in TrailType], help="Tolerated trailing")
    parser.add_argument("--declination", type=float, help="Declination of the target in degrees (default 0)")
    parser.add_argument("--log-level", help="Logging level (default WARNING, INFO shows every snapshot)")
    parser.add_argument("--once", action="store_true", help="Render the form once and exit")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    lines: Iterable[str] | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    console = console if console is not None else Console()

    overrides: dict[str, object] = {}
    if args.declination is not None:
        overrides["declination"] = args.declination
    try:
        if args.log_level is not None:
            overrides["log_level"] = parse_log_level(args.log_level)
        config = NpfConfig.from_env(**overrides)
    except NpfConfigError as exc:
        console.print(f"[red]✗[/red] {escape(str(exc))}")
        return 2

    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    initial = {
        "sensorSize": args.sensor_size,
        "pixelWidth": args.pixel_width,
        "focalLength": args.focal_length,
        "fNumber": args.f_number,
        "trailType": args.trail_type,
    }
    app = NpfApp(config, console=console, initial={k: v for k, v in initial.items() if v is not None})
    try:
        console.print(app.view.render())
        if not args.once:
            run_session(app, lines if lines is not None else _prompt_lines(console))
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
