import logging
from pathlib import Path
from typing import List

import httpx
import typer
from rich.markup import escape

from dropl_cli.errors import APIError, DroplError
from dropl_cli.session import require_session
from dropl_cli.utils import Runtime, abort, console

logger = logging.getLogger(__name__)


def upload_files(
    ctx: typer.Context,
    files: List[str] = typer.Argument(..., help="Files to upload"),
) -> None:
    """Upload one or more files."""
    runtime: Runtime = ctx.obj
    try:
        session = require_session(runtime.store)
    except DroplError as e:
        abort(str(e))

    failed = 0
    with runtime.client(session.token) as client:
        # One at a time; a failure only affects its own file.
        for file in files:
            try:
                client.upload_file(Path(file), session.user_id)
            except APIError as e:
                reason = e.message
            except (httpx.HTTPError, OSError) as e:
                reason = str(e) or type(e).__name__
            else:
                console.print(f"[green]Uploaded: {escape(file)}[/green]")
                continue

            failed += 1
            logger.info(f"Upload of {file} failed: {reason}")
            console.print(f"[red]Failed to upload {escape(file)}:[/red] {escape(reason)}")

    if failed:
        raise typer.Exit(1)
