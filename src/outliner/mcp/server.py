"""MCP server exposing the outline editor commands as tools."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from outliner.cache import SnapshotCache
from outliner.config import resolve_data_directory
from outliner.core.tree.markdown import render_outline_as_json, render_outline_as_markdown
from outliner.editor import COMMAND_NAMES, OutlineEditor, load_editor
from outliner.errors import OutlineError

# --- Core functions (testable without MCP context) ---


def outline_show(editor: OutlineEditor, *, output_format: str = "markdown") -> dict[str, Any]:
    """Return the outline as markdown or as a nested JSON tree.

    Args:
        output_format: "markdown" or "json".
    """
    if output_format not in ("markdown", "json"):
        return {"error": f"Invalid output_format '{output_format}'. Expected markdown or json."}

    result: dict[str, Any] = {
        "current_id": editor.model.current_id,
        "current_title": editor.current_node.title,
    }
    if output_format == "markdown":
        result["content"] = render_outline_as_markdown(editor.model)
    else:
        result["tree"] = render_outline_as_json(editor.model)
    return result


def outline_command(editor: OutlineEditor, *, commands: list[str]) -> dict[str, Any]:
    """Run editor commands in order and return the resulting outline.

    Args:
        commands: Command names, e.g. ["add_line", "indent"].
    """
    names = [c.replace("-", "_") for c in commands]
    unknown = [c for c in names if c not in COMMAND_NAMES]
    if unknown:
        return {
            "error": f"Unknown command(s): {', '.join(unknown)}.",
            "allowed": list(COMMAND_NAMES),
        }

    try:
        for name in names:
            editor.run(name)
    except OutlineError as e:
        return {"error": f"Outline is corrupted: {e}"}
    return {"applied": names, **outline_show(editor)}


def outline_rename(editor: OutlineEditor, *, title: str) -> dict[str, Any]:
    """Rename the node under the cursor.

    Args:
        title: New title.
    """
    try:
        editor.set_title(title)
    except OutlineError as e:
        return {"error": f"Outline is corrupted: {e}"}
    return outline_show(editor)


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    editor: OutlineEditor


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Load the cached outline on startup."""
    data_dir = resolve_data_directory()
    data_dir.mkdir(parents=True, exist_ok=True)
    cache = SnapshotCache(data_dir)
    editor = load_editor(cache)
    logger.info("Loaded outline from {} ({} nodes)", cache.path, len(editor.model.by_id))
    yield ServerContext(editor=editor)


mcp_server = FastMCP(
    "outliner",
    instructions="""\
Outliner is a tree of titled lines with a single cursor. Every command acts on
the node under the cursor (marked with '<' in markdown output).

Commands: add_line (new line below the cursor), move_prev / move_next (pre-order
up/down), indent (become last child of the previous sibling), outdent (move out
after the parent), expand / collapse (show or hide children).

Commands that do not apply (e.g. indenting a first child) leave the outline
unchanged; they are not errors.
""",
    lifespan=server_lifespan,
)


def _ctx(ctx: Context) -> ServerContext:
    return ctx.request_context.lifespan_context  # type: ignore[no-any-return]


@mcp_server.tool()
async def outline_show_tool(ctx: Context, output_format: str = "markdown") -> dict[str, Any]:
    """Show the outline and the cursor position.

    Args:
        output_format: "markdown" (indented bullets) or "json" (nested tree).
    """
    return outline_show(_ctx(ctx).editor, output_format=output_format)


@mcp_server.tool()
async def outline_command_tool(ctx: Context, commands: list[str]) -> dict[str, Any]:
    """Run one or more editor commands in order.

    Each command is persisted as soon as it completes.

    Args:
        commands: Command names from add_line, move_prev, move_next, indent,
            outdent, expand, collapse.
    """
    return outline_command(_ctx(ctx).editor, commands=commands)


@mcp_server.tool()
async def outline_rename_tool(ctx: Context, title: str) -> dict[str, Any]:
    """Rename the node under the cursor.

    Args:
        title: New title for the current node.
    """
    return outline_rename(_ctx(ctx).editor, title=title)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from outliner.logging_config import configure_logging

    configure_logging(quiet=True)
    mcp_server.run(transport="stdio")
