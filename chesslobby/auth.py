"""
Caller identity and ownership checks.

The authentication proxy in front of the service verifies the caller and
forwards its external identity in a request header. Binding that header to a
CallerIdentity never touches the database; users are only created by the
explicit create endpoints.
"""
import logging
from dataclasses import dataclass

from fastapi import Request

from .config import get_config
from .errors import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)

MAX_IDENTITY_LENGTH = 128


@dataclass(frozen=True)
class CallerIdentity:
    uid: str


def bind_identity(token: str | None) -> CallerIdentity:
    if not token:
        raise Unauthenticated()
    if len(token) > MAX_IDENTITY_LENGTH or not token.isprintable() or any(c.isspace() for c in token):
        raise Unauthenticated("Malformed authentication header")
    return CallerIdentity(uid=token)


def get_caller(request: Request) -> CallerIdentity:
    return bind_identity(request.headers.get(get_config().auth_header))


def authorize(caller: CallerIdentity, target_uid: str) -> None:
    """Allow only the owner: exact, case-sensitive match."""
    if caller.uid != target_uid:
        logger.info("Denied %s access to resources of %s", caller.uid, target_uid)
        raise Forbidden()
