"""Bearer-token authentication backed by stored sessions."""

import logging
import time
import uuid

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings
from ..errors import UnauthorizedError
from ..storage.database import DatabaseManager
from .dependencies import get_db_manager, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: int, secret: str) -> str:
    """Sign a token carrying the user ID.

    Each call yields a distinct token so that revoking one session never
    revokes another session of the same user.
    """
    payload = {"userId": user_id, "iat": int(time.time()), "jti": uuid.uuid4().hex}
    return jwt.encode(payload, secret, algorithm="HS256")


def decode_access_token(token: str, secret: str) -> int:
    """Verify a token and return the user ID it carries.

    Raises:
        UnauthorizedError: Bad signature, malformed token or missing user ID
    """
    try:
        payload = jwt.decode(token, secret, algorithms=["HS256"])
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise UnauthorizedError() from e

    user_id = payload.get("userId")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        logger.warning("Bearer token has no valid userId claim")
        raise UnauthorizedError()
    return user_id


def authenticate_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db_manager: DatabaseManager = Depends(get_db_manager),
) -> int:
    """Resolve the authenticated user ID for a request.

    The token must be correctly signed and still held by a session row;
    deleting the session revokes the token.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    token = credentials.credentials
    user_id = decode_access_token(token, settings.jwt_secret)

    session = db_manager.get_session_by_token(token)
    if not session:
        logger.warning(f"No session found for token of user {user_id}")
        raise UnauthorizedError()

    return user_id
