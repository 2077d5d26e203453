"""Client-facing error taxonomy.

Every business-rule, auth and ownership failure is raised as a PortalError
subclass and rendered by the handler registered in main.py as
``{"detail": ..., "code": ...}`` with the class's HTTP status.
"""


class PortalError(Exception):
    status_code = 500
    code = "error"
    default_detail = "Request failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {"detail": self.detail, "code": self.code}


class ValidationError(PortalError):
    """Missing or malformed fields, reported per field."""

    status_code = 400
    code = "validation_error"
    default_detail = "Validation failed"

    def __init__(self, errors: list[dict] | None = None, detail: str | None = None):
        self.errors = errors or []
        super().__init__(detail)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(errors=[{"field": field, "message": message}], detail=message)

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["errors"] = self.errors
        return body


class Unauthenticated(PortalError):
    status_code = 401
    code = "unauthenticated"
    default_detail = "Not authenticated"


class InvalidSession(PortalError):
    status_code = 401
    code = "invalid_session"
    default_detail = "Invalid or expired token"


class Forbidden(PortalError):
    status_code = 403
    code = "forbidden"
    default_detail = "Not permitted for this role"


class OwnershipViolation(Forbidden):
    # Surfaced to clients exactly like Forbidden.
    default_detail = "Not authorized for this record"


class NotFound(PortalError):
    status_code = 404
    code = "not_found"
    default_detail = "Not found"


class Conflict(PortalError):
    status_code = 409
    code = "conflict"
    default_detail = "Conflict"


class DuplicateApplication(Conflict):
    code = "duplicate_application"
    default_detail = "You have already applied to this job"


class DuplicateCollege(Conflict):
    code = "duplicate_college"
    default_detail = "A college with this name already exists"


class EmailAlreadyRegistered(Conflict):
    code = "email_already_registered"
    default_detail = "Email already registered"


class InvalidTransition(Conflict):
    code = "invalid_transition"
    default_detail = "Status change not allowed"


class UpstreamFailure(PortalError):
    status_code = 500
    code = "upstream_failure"
    default_detail = "Internal server error"
