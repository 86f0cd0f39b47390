from dataclasses import dataclass

from dropl_cli.credentials import CredentialStore
from dropl_cli.errors import InvalidTokenError, NotLoggedInError
from dropl_cli.identity import decode_identity


@dataclass(frozen=True)
class Session:
    token: str
    user_id: str


def require_session(store: CredentialStore) -> Session:
    """Load the stored token and resolve its identity.

    Raises before any request is made when no token is stored or the
    token can't be decoded.
    """
    credentials = store.load()
    if not credentials.token:
        raise NotLoggedInError()

    identity = decode_identity(credentials.token)
    if not identity.ok:
        raise InvalidTokenError(identity.reason or "unknown error")
    return Session(token=credentials.token, user_id=identity.user_id)
