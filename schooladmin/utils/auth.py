from uuid import uuid4
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schooladmin import config
from schooladmin.exceptions import DuplicateEmailError, InvalidCredentialsError, InvalidInputError
from schooladmin.logging_config import get_logger
from schooladmin.models.user import ROLES, User

logger = get_logger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=config.BCRYPT_ROUNDS,
)

# verified against when the email is unknown so both paths cost one bcrypt check
_DUMMY_HASH = pwd_context.hash("not-a-real-password")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)

def _normalize_email(email: str) -> str:
    try:
        return validate_email(email or "", check_deliverability=False).normalized.lower()
    except EmailNotValidError as e:
        raise InvalidInputError(f"Invalid email: {e}")

def register_principal(
    db: Session,
    email: str,
    password: str,
    role: str,
    name: Optional[str] = None,
) -> User:
    """
    Creates a login identity. The password is stored only as a salted bcrypt hash.
    """
    if role not in ROLES:
        raise InvalidInputError(f"Unknown role: {role}")
    if not password:
        raise InvalidInputError("Password must not be empty")
    email = _normalize_email(email)

    if db.query(User).filter(User.email == email).first():
        logger.warning("Registration rejected: email already in use")
        raise DuplicateEmailError(email)

    user = User(
        id=str(uuid4()),
        email=email,
        name=(name or "").strip() or None,
        password_hash=get_password_hash(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent registration won the unique index
        db.rollback()
        logger.warning("Registration rejected: email already in use")
        raise DuplicateEmailError(email)
    db.refresh(user)
    logger.info("Registered %s principal %s", role, user.id)
    return user

def verify_credentials(db: Session, email: str, password: str, role: str) -> User:
    """
    Checks an (email, password, role) triple.
    The role must equal the stored one; a mismatch is a failed login, never a role switch.
    """
    try:
        email = _normalize_email(email)
    except InvalidInputError:
        raise InvalidCredentialsError()

    user = db.query(User).filter(User.email == email).first()
    if user is None:
        verify_password(password or "", _DUMMY_HASH)
        logger.warning("Login failed: unknown account")
        raise InvalidCredentialsError()

    if not verify_password(password or "", user.password_hash):
        logger.warning("Login failed for %s: bad password", user.id)
        raise InvalidCredentialsError()

    if user.role != role:
        logger.warning("Login failed for %s: role mismatch (asked %s)", user.id, role)
        raise InvalidCredentialsError()

    return user

def ensure_default_admin(db: Session) -> Optional[User]:
    """Creates the configured bootstrap admin if it does not exist yet."""
    if not config.DEFAULT_ADMIN_EMAIL or not config.DEFAULT_ADMIN_PASSWORD:
        return None
    email = _normalize_email(config.DEFAULT_ADMIN_EMAIL)
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing
    logger.info("Creating default admin account")
    return register_principal(db, email, config.DEFAULT_ADMIN_PASSWORD, "admin", name="Administrator")
