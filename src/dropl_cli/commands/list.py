import httpx
import typer
from rich.markup import escape

from dropl_cli.errors import APIError, DroplError
from dropl_cli.session import require_session
from dropl_cli.utils import Runtime, abort, console


def list_files(ctx: typer.Context) -> None:
    """List all your uploaded files."""
    runtime: Runtime = ctx.obj
    try:
        session = require_session(runtime.store)
    except DroplError as e:
        abort(str(e))

    console.print("[blue]Fetching your files...[/blue]")
    try:
        with runtime.client(session.token) as client:
            files = client.list_files(session.user_id)
    except APIError as e:
        abort(f"Failed to list files: {e.message}")
    except httpx.HTTPError as e:
        abort(f"Failed to list files: {str(e) or type(e).__name__}")

    if not files:
        console.print("[yellow]No files found.[/yellow]")
        return

    for file in files:
        console.print(f"{file.get('id')}  {file.get('name')}  {file.get('size')} bytes", markup=False, highlight=False)
