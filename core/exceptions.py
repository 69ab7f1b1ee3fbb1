# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors; ``code`` is a stable machine-readable key."""
    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.default_code


class ValidationError(DomainError):
    """Raised when entry, project or catalog data is invalid."""
    default_code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""
    default_code = "NOT_FOUND"


class BusinessRuleError(DomainError):
    """Raised when an operation is refused (invalid import batch, last admin)."""
    default_code = "BUSINESS_RULE"


class PermissionDeniedError(BusinessRuleError):
    """The signed-in member lacks a capability the operation needs."""
    default_code = "PERMISSION_DENIED"


class AuthenticationRequiredError(BusinessRuleError):
    """The operation needs a signed-in member and there is none."""
    default_code = "AUTH_REQUIRED"
