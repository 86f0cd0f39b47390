"""Persistence of the single bearer token used by every command."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from dropl_cli.errors import CorruptConfigError

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    token: Optional[str] = None


class CredentialStore(Protocol):
    def save(self, token: str) -> None: ...

    def load(self) -> Credentials: ...


class FileCredentialStore:
    """Stores credentials as a JSON object in a single file.

    The whole file is replaced on every save. Concurrent logins are not
    coordinated, the last write wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token}), encoding="utf-8")
        logger.debug(f"Saved credentials to {self.path}")

    def load(self) -> Credentials:
        if not self.path.exists():
            logger.debug(f"No credentials file at {self.path}")
            return Credentials()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise CorruptConfigError(str(self.path), "not valid UTF-8") from e
        except json.JSONDecodeError as e:
            raise CorruptConfigError(str(self.path), f"invalid JSON: {e.msg}") from e
        except OSError as e:
            raise CorruptConfigError(str(self.path), f"unreadable: {e.strerror or e}") from e

        if not isinstance(data, dict):
            raise CorruptConfigError(str(self.path), "expected a JSON object")

        token = data.get("token")
        if token is not None and not isinstance(token, str):
            raise CorruptConfigError(str(self.path), "token must be a string")
        return Credentials(token=token)


class MemoryCredentialStore:
    """In-process store, nothing touches the disk."""

    def __init__(self, token: Optional[str] = None) -> None:
        self.token = token

    def save(self, token: str) -> None:
        self.token = token

    def load(self) -> Credentials:
        return Credentials(token=self.token)
