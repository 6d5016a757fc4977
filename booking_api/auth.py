import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .security_utils import verify_jwt_token

logger = logging.getLogger(__name__)

# auto_error=False: anonymous callers are a normal case, not a 401
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class SessionUser:
    email: str
    name: Optional[str] = None


def session_from_token(token: str) -> Optional[SessionUser]:
    """Decode a bearer token into the caller's identity, or None when unusable"""
    payload = verify_jwt_token(token)
    if not payload:
        return None

    email = payload.get("email")
    if not email:
        logger.warning(f"⚠️ Session token missing email claim. Claims: {list(payload.keys())}")
        return None

    return SessionUser(email=email, name=payload.get("name"))


async def get_optional_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[SessionUser]:
    """Resolve the authenticated caller, or None for anonymous requests"""
    if not credentials:
        return None

    session = session_from_token(credentials.credentials)
    if session:
        logger.debug(f"✅ Session resolved for {session.email}")
    return session
