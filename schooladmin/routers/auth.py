from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from schooladmin.database import get_db
from schooladmin.exceptions import UnauthenticatedError
from schooladmin.logging_config import get_logger
from schooladmin.models.user import User
from schooladmin.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from schooladmin.utils.access import current_principal
from schooladmin.utils.auth import register_principal, verify_credentials
from schooladmin.utils.tokens import TokenClaims, issue_token, verify_token

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    return register_principal(db, payload.email, payload.password, payload.role, name=payload.name)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    Checks email/password/role and returns a signed bearer token.
    """
    user = verify_credentials(db, payload.email, payload.password, payload.role)
    token = issue_token(user)
    claims = verify_token(token)
    logger.info("Login: %s as %s", user.id, user.role)
    return LoginResponse(
        token=token,
        expires_at=claims.expires_at.isoformat(),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def me(claims: TokenClaims = Depends(current_principal), db: Session = Depends(get_db)):
    user = db.get(User, claims.principal_id)
    if not user:
        # token outlived its account
        raise UnauthenticatedError("Unknown principal")
    return user
