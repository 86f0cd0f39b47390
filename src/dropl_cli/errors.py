from typing import Optional


class DroplError(Exception):
    """Base class for errors reported to the user."""


class NotLoggedInError(DroplError):
    def __init__(self) -> None:
        super().__init__("Please login first using `dropl login --token <token>`.")


class InvalidTokenError(DroplError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not extract userId from token ({reason}).")
        self.reason = reason


class CorruptConfigError(DroplError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Configuration file {path} is corrupted ({reason}). Please log in again.")
        self.path = path
        self.reason = reason


class APIError(DroplError):
    """Non-success response from the dropl API."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
