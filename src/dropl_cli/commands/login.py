import logging
from typing import Optional

import typer

from dropl_cli.utils import Runtime, abort, console

logger = logging.getLogger(__name__)


def login(
    ctx: typer.Context,
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Clerk session token"),
) -> None:
    """Login to your dropl account with a Clerk session token."""
    if not token:
        abort("Please provide a token: dropl login --token <token>")

    runtime: Runtime = ctx.obj
    runtime.store.save(token)
    logger.info("Stored new token")
    console.print("[green]Token saved! You are now logged in.[/green]")
