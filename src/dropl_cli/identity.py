"""Read the account identity out of a bearer token.

The token is decoded without verifying its signature or expiry. The
subject claim only routes requests to the right account; the server
performs the actual authorization.
"""

from dataclasses import dataclass
from typing import Optional

import jwt


@dataclass(frozen=True)
class IdentityResult:
    user_id: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.user_id is not None


def decode_identity(token: str) -> IdentityResult:
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        return IdentityResult(reason=f"malformed token: {e}")

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        return IdentityResult(reason="token has no subject claim")
    return IdentityResult(user_id=sub)


def extract_user_id(token: str) -> Optional[str]:
    """Return the subject claim of ``token`` or None if it can't be read."""
    return decode_identity(token).user_id
