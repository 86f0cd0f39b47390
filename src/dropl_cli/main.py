"""dropl CLI - Main entry point."""

import typer

from dropl_cli import commands
from dropl_cli.utils import get_runtime, setup_logging

app = typer.Typer(
    help="dropl - upload and list your files",
    no_args_is_help=True,
)

app.command(name="login")(commands.login)
app.command(name="upload")(commands.upload_files)
app.command(name="list")(commands.list_files)


@app.callback()
def setup(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    setup_logging(verbose)
    # Tests inject their own runtime through the context object.
    if ctx.obj is None:
        ctx.obj = get_runtime()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
