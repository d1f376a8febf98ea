"""
Custom Exceptions for Startup Launchpad
=======================================

Every error the API reports on purpose is a LaunchpadError subclass.
The handler registered in app.main turns it into a JSON body at the
class's status code; anything else surfaces as a generic 500.

Usage:
    from app.core.exceptions import NotFoundError, ForbiddenError

    startup = await store.get(EntityKind.STARTUP, startup_id)
    if not startup:
        raise NotFoundError("Startup")
"""

from typing import Optional, Any, Dict


class LaunchpadError(Exception):
    """Base exception for all Launchpad errors"""

    status_code: int = 500

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
        data = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            data["details"] = self.details
        return data


# ============================================
# Validation Errors (400)
# ============================================

class ValidationError(LaunchpadError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class DuplicateUserError(ValidationError):
    """Username or email already registered"""

    def __init__(self, field: str):
        super().__init__(f"{field.capitalize()} already exists", field=field)
        self.code = "DUPLICATE_USER"


# ============================================
# Authentication & Authorization Errors
# ============================================

class UnauthorizedError(LaunchpadError):
    """Missing or invalid credentials"""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class InvalidTokenError(UnauthorizedError):
    """JWT token is invalid or expired"""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
        self.code = "INVALID_TOKEN"


class ForbiddenError(LaunchpadError):
    """Authenticated user may not act on this record"""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


# ============================================
# Resource Errors (404 / 409)
# ============================================

class NotFoundError(LaunchpadError):
    """Record could not be resolved"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any = None):
        details = {"resource_type": resource_type}
        if resource_id is not None:
            details["resource_id"] = resource_id
        super().__init__(
            f"{resource_type} not found",
            code="NOT_FOUND",
            details=details
        )


class ConflictError(LaunchpadError):
    """Record already exists"""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


# ============================================
# AI Errors
# ============================================

class AIServiceError(LaunchpadError):
    """AI completion service failed"""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="AI_SERVICE_ERROR")


class AIResponseParseError(AIServiceError):
    """Completion text was not the JSON we asked for"""

    def __init__(self, message: str = "Failed to parse AI response"):
        super().__init__(message)
        self.code = "AI_PARSE_ERROR"


# ============================================
# Storage / Internal Errors
# ============================================

class StorageError(LaunchpadError):
    """Store operation failed"""

    def __init__(self, message: str):
        super().__init__(message, code="STORAGE_ERROR")


class InternalError(LaunchpadError):
    """Unexpected fault"""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")
