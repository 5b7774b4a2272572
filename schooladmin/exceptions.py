"""
Domain exceptions for the school administration API.

Each error carries the HTTP status it maps to; the handlers registered in
``schooladmin.main`` turn them into ``{"detail": ..., "code": ...}`` responses.

Usage:
    from schooladmin.exceptions import NotFoundError

    if not row:
        raise NotFoundError("Class", class_id)
"""

from typing import Any, Dict, Optional


class SchoolAdminError(Exception):
    """Base exception for all API errors"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


# ============================================
# Input errors (400)
# ============================================

class InvalidInputError(SchoolAdminError):
    """Malformed or missing fields"""

    status_code = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_INPUT", details=details)


class ValidationError(InvalidInputError):
    """A field value violates its semantic type (negative amount, empty name...)"""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid value for '{field}': {reason}", details={"field": field})
        self.code = "VALIDATION_ERROR"


class ReferentialError(InvalidInputError):
    """A reference field does not resolve to an existing row"""

    def __init__(self, field: str, entity: str, entity_id: str):
        super().__init__(
            f"'{field}' references unknown {entity} {entity_id}",
            details={"field": field, "entity": entity, "id": entity_id},
        )
        self.code = "REFERENCE_NOT_FOUND"


# ============================================
# Authentication & Authorization Errors
# ============================================

class UnauthenticatedError(SchoolAdminError):
    """No usable identity on the request"""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="UNAUTHENTICATED")


class InvalidCredentialsError(UnauthenticatedError):
    """Email, password or role did not match"""

    def __init__(self):
        super().__init__("Invalid credentials")
        self.code = "INVALID_CREDENTIALS"


class MalformedTokenError(UnauthenticatedError):
    def __init__(self):
        super().__init__("Malformed token")
        self.code = "MALFORMED_TOKEN"


class InvalidSignatureError(UnauthenticatedError):
    def __init__(self):
        super().__init__("Invalid token signature")
        self.code = "INVALID_SIGNATURE"


class TokenExpiredError(UnauthenticatedError):
    def __init__(self):
        super().__init__("Token has expired")
        self.code = "TOKEN_EXPIRED"


class ForbiddenError(SchoolAdminError):
    """Valid identity, role not allowed for the operation"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="FORBIDDEN")


# ============================================
# Resource errors
# ============================================

class NotFoundError(SchoolAdminError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} not found: {entity_id}",
            code="NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )


class ConflictError(SchoolAdminError):
    """Duplicate unique field, or delete blocked by live references"""

    status_code = 409

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFLICT", details=details)


class DuplicateEmailError(ConflictError):
    def __init__(self, email: str):
        super().__init__("Email already registered", details={"email": email})
        self.code = "DUPLICATE_EMAIL"
