import logging
from dataclasses import dataclass
from typing import Callable, NoReturn, Optional

import typer
from rich.console import Console

from dropl_cli.client import DroplClient
from dropl_cli.credentials import CredentialStore, FileCredentialStore
from dropl_cli.settings import Settings, settings

console = Console(soft_wrap=True)


def setup_logging(verbose: bool = False, config: Settings = settings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=config.log_format)


@dataclass
class Runtime:
    """Collaborators shared by all commands of one invocation."""

    store: CredentialStore
    client_factory: Callable[[str], DroplClient]

    def client(self, token: str) -> DroplClient:
        return self.client_factory(token)


def get_client(token: str, config: Settings = settings) -> DroplClient:
    return DroplClient(base_url=config.base_url, token=token, timeout=config.timeout)


def get_runtime(config: Optional[Settings] = None) -> Runtime:
    config = config or settings
    return Runtime(
        store=FileCredentialStore(config.config_path),
        client_factory=lambda token: get_client(token, config),
    )


def abort(message: str) -> NoReturn:
    """Print ``message`` as an error and stop the command."""
    console.print(message, style="red", markup=False)
    raise typer.Exit(1)
