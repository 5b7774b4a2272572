from typing import Dict, FrozenSet, Iterable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from schooladmin.exceptions import ForbiddenError, UnauthenticatedError
from schooladmin.logging_config import get_logger, set_principal_id
from schooladmin.utils.tokens import TokenClaims, verify_token

logger = get_logger(__name__)

# missing header is reported as 401 by authorize(), not 403 by HTTPBearer
bearer_scheme = HTTPBearer(auto_error=False)

ALL_ROLES = frozenset({"admin", "teacher", "student"})
STAFF = frozenset({"admin", "teacher"})
ADMIN = frozenset({"admin"})

# Role set per operation; routes reference these names, never role literals
ACCESS_POLICY: Dict[str, FrozenSet[str]] = {
    "classes.read": ALL_ROLES,
    # embeds teacher and student records, so it follows their read roles
    "classes.details": STAFF,
    "classes.create": ADMIN,
    "classes.update": ADMIN,
    "classes.delete": ADMIN,
    "teachers.read": STAFF,
    "teachers.create": ADMIN,
    "teachers.update": ADMIN,
    "teachers.delete": ADMIN,
    "students.read": STAFF,
    "students.create": ADMIN,
    "students.update": ADMIN,
    "students.delete": ADMIN,
    "analytics.gender": STAFF,
    "analytics.finance": ADMIN,
}


def authorize(token: Optional[str], allowed_roles: Iterable[str]) -> TokenClaims:
    """
    Role gate: the token must verify and its role must be in allowed_roles.
    Raises UnauthenticatedError (401) or ForbiddenError (403).
    """
    if not token:
        raise UnauthenticatedError()
    claims = verify_token(token)
    if claims.role not in frozenset(allowed_roles):
        logger.warning("Forbidden: %s (%s) not in %s", claims.principal_id, claims.role, sorted(allowed_roles))
        raise ForbiddenError()
    return claims


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def require(operation: str):
    """
    FastAPI dependency for one operation of ACCESS_POLICY.

        @router.post("/", dependencies=[Depends(require("classes.create"))])
    """
    if operation not in ACCESS_POLICY:
        raise KeyError(f"No access policy declared for '{operation}'")
    allowed = ACCESS_POLICY[operation]

    # async so the principal id is set in the request context, not a threadpool copy
    async def dependency(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> TokenClaims:
        claims = authorize(_bearer_token(credentials), allowed)
        set_principal_id(claims.principal_id)
        return claims

    dependency.__name__ = f"require_{operation.replace('.', '_')}"
    return dependency


async def current_principal(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)) -> TokenClaims:
    """Any valid token, whatever the role."""
    claims = authorize(_bearer_token(credentials), ALL_ROLES)
    set_principal_id(claims.principal_id)
    return claims
