"""CLI entrypoint for linkexploder."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__


def _auto_detect_vault(start: Path) -> Path | None:
    """Find the vault root (a folder holding .obsidian) by walking up from `start`."""
    cur = start.resolve()
    for p in (cur, *cur.parents):
        if (p / ".obsidian").is_dir():
            return p
    return None


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="linkexploder")
@click.option(
    "--vault",
    "-v",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Path to the vault root (defaults to the nearest folder containing .obsidian)",
)
@click.option("--debug", is_flag=True, help="Log layout and allocation details to stderr")
@click.pass_context
def cli(ctx: click.Context, vault: Path | None, debug: bool) -> None:
    """linkexploder - Turn a note's links into an Obsidian canvas.

    The canvas shows the note, the notes it links to (two hops deep) and the
    notes that link to it.
    """
    _configure_logging(debug)
    ctx.ensure_object(dict)
    if vault is None:
        detected = _auto_detect_vault(Path.cwd())
        if detected is None:
            raise click.ClickException("Vault not found. Pass --vault /path/to/vault or run from inside a vault.")
        vault = detected

    if not vault.exists() or not vault.is_dir():
        raise click.BadParameter(f"Directory '{vault}' does not exist.", param_hint="--vault / -v")

    ctx.obj["vault"] = vault.resolve()


@cli.command()
@click.argument("note")
@click.option(
    "--folder",
    type=str,
    default=None,
    help="Vault-relative folder for the canvas (overrides the configured location)",
)
@click.option("--open/--no-open", "open_file", default=True, show_default=True, help="Open the canvas once created")
@click.option("--dry-run", is_flag=True, help="Print the canvas JSON instead of writing it")
@click.pass_context
def canvas(ctx: click.Context, note: str, folder: str | None, open_file: bool, dry_run: bool) -> None:
    """Create a canvas from a note's links.

    NOTE is a note name or a vault-relative path.

    Examples:

        linkexploder canvas "Project ideas"

        linkexploder canvas research/reading.md --folder canvases --no-open
    """
    from .commands.canvas_cmd import run_canvas

    exit_code = run_canvas(ctx.obj["vault"], note, folder=folder, open_file=open_file, dry_run=dry_run)
    sys.exit(exit_code)


@cli.group()
def config() -> None:
    """Show or change where new canvas files are created."""


@config.command("show")
@click.option("--json", "output_json", is_flag=True, help="Output settings as JSON")
@click.pass_context
def config_show(ctx: click.Context, output_json: bool) -> None:
    """Show the current settings."""
    from .commands.config_cmd import run_config_show

    exit_code = run_config_show(ctx.obj["vault"], output_json=output_json)
    sys.exit(exit_code)


@config.command("set")
@click.option(
    "--location",
    type=click.Choice(["vault", "same", "specified"]),
    default=None,
    help="vault: vault root; same: folder of the current note; specified: --folder",
)
@click.option("--folder", type=str, default=None, metavar="PATH", help="Folder used with --location specified")
@click.pass_context
def config_set(ctx: click.Context, location: str | None, folder: str | None) -> None:
    """Change the default location for new canvas files.

    Examples:

        linkexploder config set --location same

        linkexploder config set --location specified --folder "folder 1/folder 2"
    """
    from .commands.config_cmd import run_config_set

    if location is None and folder is None:
        raise click.UsageError("Nothing to set. Pass --location and/or --folder.")

    exit_code = run_config_set(ctx.obj["vault"], location=location, folder=folder)
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
