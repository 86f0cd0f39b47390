"""HTTP client for the dropl file API."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from dropl_cli.errors import APIError

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/files/upload"
LIST_PATH = "/api/files"


def error_message(response: httpx.Response) -> str:
    """Best human-readable message for a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    if text:
        return text
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


class DroplClient:
    """Thin wrapper over ``httpx.Client`` that sends the bearer token on every request."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 300.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "DroplClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _check(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        message = error_message(response)
        logger.info(f"{response.request.method} {response.request.url} failed: {response.status_code} {message}")
        raise APIError(message, status_code=response.status_code)

    def upload_file(self, path: Path, user_id: str) -> httpx.Response:
        """Upload one file. Raises ``OSError`` if it can't be read."""
        path = Path(path)
        with open(path, "rb") as f:
            logger.debug(f"POST {UPLOAD_PATH} file={path} userId={user_id}")
            response = self._client.post(
                UPLOAD_PATH,
                files={"files": (path.name, f)},
                data={"userId": user_id},
                headers={"Accept": "application/json"},
            )
        return self._check(response)

    def list_files(self, user_id: str) -> List[Dict[str, Any]]:
        logger.debug(f"GET {LIST_PATH} userId={user_id}")
        response = self._check(self._client.get(LIST_PATH, params={"userId": user_id}))
        try:
            data = response.json()
        except ValueError as e:
            raise APIError("Malformed response from server", status_code=response.status_code) from e

        if not isinstance(data, dict):
            return []
        files = data.get("files") or []
        if not isinstance(files, list):
            raise APIError("Malformed response from server", status_code=response.status_code)
        return [f for f in files if isinstance(f, dict)]
