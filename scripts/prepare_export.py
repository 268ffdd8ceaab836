#!/usr/bin/env python3
"""
Export Preparation CLI

Runs the before-export pipeline on Org-style documents and manages the bundled
LaTeX assets.

Commands:
    prepare  - Inject macros and skeleton into a document, copy assets beside it
    profiles - List the registered export profiles
    sync     - Copy missing .sty/.cls assets into a directory

Examples:\n

    prepare_export.py prepare notes/thesis.org                   # Print prepared text

    prepare_export.py prepare notes/thesis.org -o build/thesis.org

    prepare_export.py prepare notes/thesis.org --in-place

    prepare_export.py profiles

    prepare_export.py sync notes/
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from texprofiles.config import load_config
from texprofiles.contexts.export import (
    Document,
    MacroFileMissingError,
    copy_missing_assets,
    setup_export_profiles,
)
from texprofiles.contexts.export.logger import setup_export_logger

app = typer.Typer(
    help="Prepare Org-style documents for LaTeX export with the report and book profiles",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("prepare")
def prepare_command(
    document_path: Annotated[
        Path,
        typer.Argument(help="Document to prepare", exists=True, dir_okay=False),
    ],
    backend: Annotated[
        str,
        typer.Option("--backend", "-b", help="Export backend identifier"),
    ] = "latex",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write prepared text here instead of stdout"),
    ] = None,
    in_place: Annotated[
        bool,
        typer.Option("--in-place", "-i", help="Overwrite the document with the prepared text"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML export config", exists=True, dir_okay=False),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write an export.log into this directory"),
    ] = None,
):
    """
    Run the before-export pipeline on a document.

    Examples:\n

        $ prepare_export.py prepare thesis.org                  # Print to stdout

        $ prepare_export.py prepare thesis.org --in-place       # Rewrite the file
    """
    if output is not None and in_place:
        typer.secho("Error: --output and --in-place are mutually exclusive\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log_dir is not None:
        setup_export_logger(log_dir, backend=backend)

    host = setup_export_profiles(config=load_config(config_path))
    document = Document.from_file(document_path)

    try:
        host.run_before_export(document, backend=backend)
    except MacroFileMissingError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if in_place:
        document.save()
        typer.secho(f"✓ Prepared {document_path}", fg=typer.colors.GREEN, err=True)
    elif output is not None:
        document.save(output)
        typer.secho(f"✓ Prepared {document_path} -> {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(document.text, nl=False)


@app.command("profiles")
def profiles_command():
    """List the registered export profiles."""
    host = setup_export_profiles()

    for profile in host.class_table:
        typer.secho(profile.name, fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  Class:  {profile.document_class}")
        typer.echo(f"  Header: {profile.header}")
        typer.echo(f"  Depths: {profile.max_depth} ({profile.heading_command(1, '...')} first)")


@app.command("sync")
def sync_command(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to copy assets into", exists=True, file_okay=False),
    ],
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML export config", exists=True, dir_okay=False),
    ] = None,
):
    """Copy bundled .sty/.cls assets missing from a directory."""
    config = load_config(config_path)
    result = copy_missing_assets(config.template_dir, directory)

    if not result.template_dir_found:
        typer.secho(f"Template directory not found: {config.template_dir}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=0)

    for path in result.copied:
        typer.secho(f"  + {path.name}", fg=typer.colors.GREEN)
    for path in result.skipped:
        typer.echo(f"  = {path.name} (already present)")
    typer.echo(f"\n{len(result.copied)} copied, {len(result.skipped)} already present")


if __name__ == "__main__":
    app()
