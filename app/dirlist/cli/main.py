"""Main CLI application entry point.

Defines the Typer application: ``dirlist [-l] [-x] [path]`` plus the
width, config, verbosity and version options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from typer.core import TyperCommand

from dirlist import __version__
from dirlist.core.config import ConfigError, dump_config, load_config
from dirlist.listing.models import DisplayMode, resolve_display_mode
from dirlist.listing.scanner import DirectoryOpenError
from dirlist.listing.views import render_listing
from dirlist.utils.formatting import err_console, print_diagnostic, print_error
from dirlist.utils.terminal import get_terminal_width

# ctx.meta key holding mode flags in command-line order
MODE_SELECTIONS_KEY = "dirlist.mode_selections"

_SHORT_MODE_FLAGS: dict[str, DisplayMode] = {"l": DisplayMode.LONG, "x": DisplayMode.ACROSS}
_LONG_MODE_FLAGS: dict[str, DisplayMode] = {
    "--long": DisplayMode.LONG,
    "--across": DisplayMode.ACROSS,
}
_SHORT_VALUE_OPTIONS = frozenset("w")
_LONG_VALUE_OPTIONS = frozenset({"--width", "--config"})


def mode_selections(args: list[str]) -> list[DisplayMode]:
    """Extract display mode flags from raw arguments, in order.

    Clustered short flags (``-lx``) are expanded, option values are
    skipped, and scanning stops at ``--``.

    Args:
        args: Raw command-line arguments.

    Returns:
        Selected modes in the order they appear.
    """
    selections: list[DisplayMode] = []
    skip_value = False
    for arg in args:
        if skip_value:
            skip_value = False
            continue
        if arg == "--":
            break
        if arg.startswith("--"):
            name, has_value, _ = arg.partition("=")
            if name in _LONG_MODE_FLAGS:
                selections.append(_LONG_MODE_FLAGS[name])
            elif name in _LONG_VALUE_OPTIONS and not has_value:
                skip_value = True
            continue
        if arg.startswith("-") and len(arg) > 1:
            cluster = arg[1:]
            for i, flag in enumerate(cluster):
                if flag in _SHORT_MODE_FLAGS:
                    selections.append(_SHORT_MODE_FLAGS[flag])
                elif flag in _SHORT_VALUE_OPTIONS:
                    # Value is either attached ("-w40") or the next argument
                    skip_value = i == len(cluster) - 1
                    break
    return selections


class ListCommand(TyperCommand):
    """Typer command that records the order of mode flags.

    Click processes each option once, so ``-l -x -l`` cannot be told
    apart from ``-l -x`` after parsing. The raw order is captured here
    and the last mode flag wins.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta[MODE_SELECTIONS_KEY] = mode_selections(args)
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="dirlist",
    help="List directory contents.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirlist version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route debug logging to stderr through Rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.command(cls=ListCommand)
def main(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Directory to list."),
    ] = ".",
    long_format: Annotated[
        bool,
        typer.Option("-l", "--long", help="Use a long listing format."),
    ] = False,
    across: Annotated[
        bool,
        typer.Option("-x", "--across", help="List entries by lines instead of by columns."),
    ] = False,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", min=1, help="Assume screen width instead of detecting it."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Load settings from a TOML file."),
    ] = None,
    print_config: Annotated[
        bool,
        typer.Option("--print-config", help="Print the effective settings as TOML and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List the contents of PATH (the current directory by default).

    Entries are shown in columns sorted by name; [bold]-x[/bold] fills
    rows instead and [bold]-l[/bold] prints one line of metadata per
    entry. When both are given, the last one wins.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if print_config:
        typer.echo(dump_config(config), nl=False)
        return

    # -l and -x are declared for parsing and help; ListCommand records their order
    mode = resolve_display_mode(ctx.meta[MODE_SELECTIONS_KEY])

    terminal_width = width or get_terminal_width(config.fallback_width)

    try:
        lines = render_listing(mode, path, terminal_width, config.column_spacing)
    except DirectoryOpenError as e:
        # Reported, not fatal: the process still exits successfully
        print_diagnostic(str(e))
        return

    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()
