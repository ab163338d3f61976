"""Command-line interface for the outline editor."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from outliner.cache import SnapshotCache
from outliner.config import resolve_data_directory
from outliner.core.edit.mutations import create_initial_model
from outliner.core.snapshot import to_snapshot
from outliner.core.tree.markdown import render_outline_as_json, render_outline_as_markdown
from outliner.editor import COMMAND_NAMES, OutlineEditor, load_editor
from outliner.errors import OutlineError
from outliner.keymap import Keymap
from outliner.logging_config import configure_logging

app = typer.Typer(help="Outliner: a keyboard-driven outline editor.")

DataDirOption = Annotated[
    Path | None,
    typer.Option("--data-dir", "-d", help="Directory holding the outline cache"),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", help="Do not write anything, only log what would be written"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_cache(data_dir: Path | None, *, dry_run: bool = False) -> SnapshotCache:
    dst = data_dir or resolve_data_directory()
    if not dry_run:
        dst.mkdir(parents=True, exist_ok=True)
    return SnapshotCache(dst, dry_run=dry_run)


def _report(cache: SnapshotCache) -> None:
    logger.debug("Cache: {} written, {} unchanged", cache.num_written, cache.num_same)


def _show(editor: OutlineEditor, *, output_json: bool = False) -> None:
    if output_json:
        typer.echo(json.dumps(render_outline_as_json(editor.model), indent=2))
    else:
        typer.echo(render_outline_as_markdown(editor.model), nl=False)


@app.command()
def show(
    data_dir: DataDirOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the outline, marking the cursor with '<'."""
    _show(load_editor(_open_cache(data_dir)), output_json=output_json)


@app.command(name="do")
def do_cmd(
    commands: list[str] = typer.Argument(..., help=f"Commands: {', '.join(COMMAND_NAMES)}"),
    data_dir: DataDirOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Run editor commands in order and print the result."""
    names = [c.replace("-", "_") for c in commands]
    unknown = [c for c in names if c not in COMMAND_NAMES]
    if unknown:
        logger.error("Unknown command(s): {}", ", ".join(unknown))
        raise typer.Exit(1)

    cache = _open_cache(data_dir, dry_run=dry_run)
    editor = load_editor(cache)
    try:
        for name in names:
            editor.run(name)
    except OutlineError as e:
        logger.error("Outline is corrupted: {}", e)
        raise typer.Exit(1) from e
    _report(cache)
    _show(editor)


@app.command()
def keys(
    gestures: list[str] = typer.Argument(..., help="Key gestures, e.g. enter tab shift+tab"),
    data_dir: DataDirOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Dispatch key gestures through the default keymap."""
    keymap = Keymap()
    cache = _open_cache(data_dir, dry_run=dry_run)
    editor = load_editor(cache)
    try:
        for gesture in gestures:
            if keymap.dispatch(gesture, editor) is None:
                logger.warning("Ignoring unbound gesture {!r}", gesture)
    except (ValueError, OutlineError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    _report(cache)
    _show(editor)


@app.command()
def rename(
    title: str = typer.Argument(..., help="New title for the current node"),
    data_dir: DataDirOption = None,
    dry_run: DryRunOption = False,
) -> None:
    """Rename the node under the cursor."""
    cache = _open_cache(data_dir, dry_run=dry_run)
    editor = load_editor(cache)
    try:
        editor.set_title(title)
    except OutlineError as e:
        logger.error("Outline is corrupted: {}", e)
        raise typer.Exit(1) from e
    _report(cache)
    _show(editor)


@app.command()
def reset(data_dir: DataDirOption = None, dry_run: DryRunOption = False) -> None:
    """Discard the cached outline and start from an empty one."""
    cache = _open_cache(data_dir, dry_run=dry_run)
    cache.save(to_snapshot(create_initial_model()))
    _report(cache)
    if not dry_run:
        typer.echo(f"Reset outline in {cache.path}")


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from outliner.mcp.server import run_mcp_server

    run_mcp_server()
