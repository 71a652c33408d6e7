#!/usr/bin/env python3
# scout/main.py
from __future__ import annotations
"""
Command line entry point.

    scout                  interactive prompt
    scout --list-engines   print the configured engines and exit
    scout --write-config   (re)write the default config.toml and exit
"""

from pathlib import Path
from typing import Optional

import typer

from scout.boot import boot_sequence
from scout.config import AppConfig, write_default_config
from scout.errors import BrowserLaunchError, ConfigError
from scout.interface import run_session
from scout.ui import colorize, print_line, print_table

cli = typer.Typer(
    name="scout",
    help="Search-engine launcher with prefix routing and live suggestions.",
    epilog="""
    Examples:
    $ scout              then type 'yt cats' and press Enter
    $ scout --list-engines
    """,
    add_completion=False,
)


def _engine_rows(config: AppConfig) -> list[list[str]]:
    rows = []
    for engine in config.engines:
        rows.append([
            engine.id or "(default)",
            engine.display_name,
            engine.search_url_template,
            "yes" if engine.suggestion_url_template else "no",
        ])
    return rows


def _keybind_summary(config: AppConfig) -> str:
    bound = config.keybinds.to_config()
    return ", ".join(f"{key} {action}" for key, action in bound.items())


@cli.command()
def run(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config.toml (defaults to the per-user config dir)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show boot steps and debug logging"),
    list_engines: bool = typer.Option(False, "--list-engines", help="List configured engines and exit"),
    write_config: bool = typer.Option(False, "--write-config", help="Write the default config and exit"),
) -> None:
    """Open the prompt; Enter opens the search in the default browser."""
    if write_config:
        try:
            out = write_default_config(config_path)
        except ConfigError as exc:
            print_line(colorize(f"Error! {exc}", "red"))
            raise typer.Exit(code=1)
        print_line(f"Wrote default config to {out}")
        raise typer.Exit()

    state = boot_sequence(config_path, verbose=verbose)
    config = state.config

    if list_engines:
        print_table(_engine_rows(config), ["Prefix", "Name", "Search URL", "Suggest"])
        if verbose:
            print_line(f"\nKeybinds: {_keybind_summary(config)}")
        raise typer.Exit()

    try:
        outcome = run_session(
            config.engines,
            config.keybinds,
            timeout_seconds=config.timeout,
            max_suggestions=config.max_suggestions,
            logger=state.logger,
        )
    except BrowserLaunchError as exc:
        print_line(colorize(f"Error! {exc}", "red"))
        raise typer.Exit(code=1)
    state.logger.debug("Session ended: %s", outcome)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
