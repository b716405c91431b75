#!/usr/bin/env python3
import os
from pathlib import Path
from typing import Optional

import click
import pyperclip
import tomli
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONFIG_FILENAME, Config
from .core import CommitMessageGenerator
from .exceptions import WhatTheCommitError
from .observers import ConsoleLogObserver, FileLogObserver
from .sources import LineSource
from .template import SystemRandomProvider

console = Console()
err_console = Console(stderr=True)


def print_config(config_dir: Path) -> None:
    """Print the effective settings and where each one came from."""
    config = Config.load(config_dir)
    config_path = config_dir / DEFAULT_CONFIG_FILENAME

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(
            f"[dim]Config file: {escape(str(config_path).replace(os.sep, '/'))}[/dim]"
        )
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<30} {'Source':<10}")
    console.print("-" * 60)

    try:
        file_fields = Config.read_file_settings(config_dir)
    except tomli.TOMLDecodeError:
        file_fields = {}
    env_fields = Config().model_dump(exclude_defaults=True)
    for name, value in config.model_dump().items():
        if name in file_fields:
            source = "config"
        elif name in env_fields:
            source = "env"
        else:
            source = "default"
        shown = "None" if value is None else str(value)
        console.print(f"{name:<20} {escape(shown):<30} {source:<10}")

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME}"
    )


@click.command()
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Directory holding the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-n",
    "--names-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File with one name per line (overrides config setting)",
)
@click.option(
    "-m",
    "--messages-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File with one commit message template per line (overrides config setting)",
)
@click.option("--name", help="Use this name instead of a random one")
@click.option("--template", help="Expand this template instead of a random one")
@click.option(
    "--seed",
    type=int,
    help="Seed the random generator for reproducible output (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log generated messages (overrides config setting)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show the picked template and name on stderr",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    config_dir: bool,
    config_list: bool,
    path: Path,
    names_file: Optional[Path],
    messages_file: Optional[Path],
    name: Optional[str],
    template: Optional[str],
    seed: Optional[int],
    log_file: Optional[Path],
    verbose: bool,
    version: bool,
):
    """
    Print a random commit message.

    Templates may contain XNAMEX, XLOWERNAMEX and XUPPERNAMEX, which are
    replaced by a random name, and XNUMX, XNUM50X, XNUM1,5X, XNUM,5X or
    XNUM42,X, which are replaced by a random number from that range
    (default 1 to 999).

    Configuration can be set in .whatthecommit.toml in the current directory.
    Command line options override configuration file settings.

    Example: git commit -m "$(whatthecommit)"
    """
    try:
        if version:
            from .version import display_version_info

            display_version_info(console)
            return

        config_path_dir = path.absolute()

        if config_list:
            print_config(config_path_dir)
            return

        if config_dir:
            config_path = config_path_dir / DEFAULT_CONFIG_FILENAME
            config_path_str = str(config_path)

            # Create default config file if it doesn't exist
            if not config_path.exists():
                config = Config()
                config.save(config_path_dir)
                console.print(
                    "[yellow]Created new config file with default values[/yellow]"
                )

            pyperclip.copy(config_path_str)
            console.print(f"[green]Config file location:[/green] {escape(config_path_str)}")
            console.print("[green]Path copied to clipboard![/green]")
            return

        config = Config.load(config_path_dir)

        # Command line options override config
        if names_file is not None:
            config.names_file = str(names_file)
        if messages_file is not None:
            config.messages_file = str(messages_file)
        if seed is not None:
            config.seed = seed
        if log_file is not None:
            config.log_file = str(log_file)

        # Pinned values never read their list, so a broken file can't block them
        source = LineSource.from_files(
            None if name is not None else config.names_file,
            None if template is not None else config.messages_file,
        )
        generator = CommitMessageGenerator(
            source, random_provider=SystemRandomProvider(config.seed)
        )

        if verbose:
            generator.add_observer(ConsoleLogObserver(err_console))

        # An explicit --log-file is used as given; config paths are checked
        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            generator.add_observer(FileLogObserver(str(log_file_path)))

        result = generator.generate(template=template, name=name)
        click.echo(result.message)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except WhatTheCommitError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
