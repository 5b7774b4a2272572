from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from schooladmin import config
from schooladmin.exceptions import InvalidSignatureError, MalformedTokenError, TokenExpiredError
from schooladmin.models.user import ROLES, User


@dataclass(frozen=True)
class TokenClaims:
    principal_id: str
    role: str
    issued_at: datetime
    expires_at: datetime


def issue_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Signed bearer token carrying principal id, role, iat and exp."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None
                    else timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": user.id,
        "role": user.role,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def verify_token(token: str) -> TokenClaims:
    """
    Verifies signature and expiry before any claim is trusted.
    Raises MalformedTokenError, InvalidSignatureError or TokenExpiredError.
    """
    if not token or token.count(".") != 2:
        raise MalformedTokenError()
    try:
        jwt.get_unverified_header(token)
    except JWTError:
        raise MalformedTokenError()

    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidSignatureError()

    sub, role = payload.get("sub"), payload.get("role")
    iat, exp = payload.get("iat"), payload.get("exp")
    if not isinstance(sub, str) or role not in ROLES or not isinstance(exp, int) or not isinstance(iat, int):
        raise MalformedTokenError()

    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
    # jose already checks exp; keep the gate closed on the boundary second too
    if expires_at <= datetime.now(timezone.utc):
        raise TokenExpiredError()

    return TokenClaims(
        principal_id=sub,
        role=role,
        issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
        expires_at=expires_at,
    )
